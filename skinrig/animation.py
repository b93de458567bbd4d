"""Keyframe animation data and sampling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

from skinrig.quaternion import Quaternion, slerp
from skinrig.vector import Float3, lerp


@dataclass
class KeyframeFloat3:
    """A vector value at a point in time (seconds)."""

    value: Float3 = field(default_factory=Float3)
    time: float = 0.0


@dataclass
class KeyframeQuaternion:
    """A rotation value at a point in time (seconds)."""

    value: Quaternion = field(default_factory=Quaternion)
    time: float = 0.0


@dataclass
class NodeAnimation:
    """Translation, rotation and scale tracks of one node."""

    translate: list[KeyframeFloat3] = field(default_factory=list)
    rotate: list[KeyframeQuaternion] = field(default_factory=list)
    scale: list[KeyframeFloat3] = field(default_factory=list)


@dataclass
class Animation:
    """A clip: its length in seconds and the tracks of each node by name."""

    duration: float = 0.0
    node_animations: dict[str, NodeAnimation] = field(default_factory=dict)


Keyframe = Union[KeyframeFloat3, KeyframeQuaternion]


def _interpolate(a, b, t: float):
    if isinstance(a, Quaternion):
        return slerp(a, b, t)
    return lerp(a, b, t)


def calculate_value(keyframes: Sequence[Keyframe], time: float):
    """Sample a keyframe track at ``time``.

    Vectors are linearly interpolated and quaternions spherically
    interpolated. Times before the first key give the first value, times
    after the last key give the last value.
    """
    if not keyframes:
        raise ValueError("cannot sample an empty keyframe track")

    first = keyframes[0]
    if len(keyframes) == 1 or time <= first.time:
        return first.value

    for current, following in zip(keyframes, keyframes[1:]):
        if current.time <= time <= following.time:
            t = (time - current.time) / (following.time - current.time)
            return _interpolate(current.value, following.value, t)

    return keyframes[-1].value