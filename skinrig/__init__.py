"""Vector, quaternion and matrix math, skeletal animation, skinning, particles, scenes, input state, WAVE parsing and descriptor allocation."""

__version__ = "0.1.0"