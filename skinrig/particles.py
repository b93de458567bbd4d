"""Billboarded particle groups, an acceleration field and a timed emitter."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional

from skinrig.geometry import AABB, is_collision
from skinrig.matrix import Matrix, rotation_y
from skinrig.transform import Transform
from skinrig.vector import Float3, Float4

DELTA_TIME = 1.0 / 60.0
MAX_INSTANCES = 100


def _white() -> Float4:
    return Float4(1.0, 1.0, 1.0, 1.0)


@dataclass
class Particle:
    """One particle: where it is, how it moves, its colour and its age."""

    transform: Transform = field(default_factory=Transform)
    velocity: Float3 = field(default_factory=Float3)
    color: Float4 = field(default_factory=_white)
    life_time: float = 1.0
    current_time: float = 0.0


@dataclass
class InstanceData:
    """Per-instance values handed to the renderer."""

    wvp: Matrix = field(default_factory=Matrix)
    world: Matrix = field(default_factory=Matrix)
    color: Float4 = field(default_factory=_white)


@dataclass
class ParticleGroup:
    """Particles sharing a texture, and the instance data written for them."""

    texture_handle: Optional[int] = None
    particles: list[Particle] = field(default_factory=list)
    max_instances: int = MAX_INSTANCES
    instancing_buffer: list[InstanceData] = field(default_factory=list)
    num_instance: int = 0

    def __post_init__(self) -> None:
        if not self.instancing_buffer:
            self.instancing_buffer = [InstanceData() for _ in range(self.max_instances)]


def _default_area() -> AABB:
    return AABB(Float3(-1.0, -1.0, -1.0), Float3(1.0, 1.0, 1.0))


@dataclass
class AccelerationField:
    """A box inside which particles are accelerated."""

    acceleration: Float3 = field(default_factory=lambda: Float3(15.0, 0.0, 0.0))
    area: AABB = field(default_factory=_default_area)


class ParticleManager:
    """Owns named particle groups and simulates them frame by frame."""

    delta_time = DELTA_TIME

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.particle_groups: dict[str, ParticleGroup] = {}
        self.back_to_front_matrix = rotation_y(math.pi)
        self.billboard_matrix = Matrix()
        self.acceleration_field = AccelerationField()

    def _group(self, name: str) -> ParticleGroup:
        try:
            return self.particle_groups[name]
        except KeyError:
            raise KeyError(f"no particle group named {name!r}") from None

    def create_particle_group(self, name: str) -> ParticleGroup:
        """Register a new, empty group under ``name``."""
        if name in self.particle_groups:
            raise ValueError(f"particle group {name!r} already exists")
        group = ParticleGroup()
        self.particle_groups[name] = group
        return group

    def set_texture(self, name: str, texture_handle: int) -> None:
        """Set the texture the named group is drawn with."""
        self._group(name).texture_handle = texture_handle

    def emit(self, name: str, position: Float3, count: int) -> None:
        """Add ``count`` randomised particles around ``position`` to a group."""
        group = self._group(name)
        uniform = self.rng.uniform
        for _ in range(count):
            particle = Particle()
            particle.transform.scale = Float3(1.0, 1.0, 1.0)
            particle.transform.rotate = Float3(0.0, 0.0, 0.0)
            particle.transform.translate = Float3(
                uniform(-1.0, 1.0), uniform(-1.0, 1.0), uniform(-1.0, 1.0)
            )
            particle.velocity = Float3(
                uniform(-1.0, 1.0), uniform(-1.0, 1.0), uniform(-1.0, 1.0)
            )
            offset = Float3(uniform(-1.0, 1.0), uniform(-1.0, 1.0), uniform(-1.0, 1.0))
            particle.transform.translate = position + offset
            particle.color = Float4(uniform(0.0, 1.0), uniform(0.0, 1.0), uniform(0.0, 1.0), 1.0)
            particle.life_time = uniform(1.0, 3.0)
            particle.current_time = 0.0
            group.particles.append(particle)

    def update(self, view_matrix: Matrix, projection_matrix: Matrix) -> None:
        """Drop expired particles, write instance data and advance the rest."""
        billboard = self.back_to_front_matrix * view_matrix
        billboard.r[3][0] = 0.0
        billboard.r[3][1] = 0.0
        billboard.r[3][2] = 0.0
        self.billboard_matrix = billboard
        view_projection = view_matrix * projection_matrix
        dt = self.delta_time
        field_ = self.acceleration_field

        for group in self.particle_groups.values():
            alive: list[Particle] = []
            num_instance = 0
            for particle in group.particles:
                if particle.life_time <= particle.current_time:
                    continue

                world = particle.transform.make_affine_matrix()
                if num_instance < group.max_instances:
                    instance = group.instancing_buffer[num_instance]
                    instance.wvp = world * billboard * view_projection
                    instance.world = world
                    color = particle.color
                    alpha = 1.0 - particle.current_time / particle.life_time
                    instance.color = Float4(color.x, color.y, color.z, alpha)
                    num_instance += 1

                if is_collision(field_.area, particle.transform.translate):
                    particle.velocity += field_.acceleration * dt

                particle.transform.translate += particle.velocity * dt
                particle.current_time += dt
                alive.append(particle)

            group.particles = alive
            group.num_instance = num_instance


class ParticleEmitter:
    """Emits a burst of particles into a manager at a fixed interval."""

    delta_time = DELTA_TIME

    def __init__(self, manager: ParticleManager) -> None:
        self.particle_manager = manager
        self.count = 3
        self.frequency = 0.5
        self.frequency_time = 0.0
        self.transform = Transform(
            scale=Float3(1.0, 1.0, 1.0),
            rotate=Float3(0.0, 0.0, 0.0),
            translate=Float3(0.0, 0.0, 0.0),
        )

    def update(self, name: str, is_emit: bool) -> None:
        """Advance the emitter's clock; emit when the interval has passed and allowed."""
        self.frequency_time += self.delta_time
        if self.frequency <= self.frequency_time:
            if is_emit:
                self.emit(name)
            self.frequency_time -= self.frequency

    def emit(self, name: str) -> None:
        """Emit ``count`` particles at the emitter's position."""
        self.particle_manager.emit(name, self.transform.translate, self.count)