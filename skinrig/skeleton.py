"""Node hierarchies, skeletons built from them, and animation application."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional

from skinrig.animation import Animation, calculate_value
from skinrig.matrix import Matrix, identity
from skinrig.transform import QuaternionTransform


@dataclass
class Node:
    """A node of a model's scene hierarchy."""

    transform: QuaternionTransform = field(default_factory=QuaternionTransform)
    local_matrix: Matrix = field(default_factory=Matrix)
    name: str = ""
    children: list[Node] = field(default_factory=list)


@dataclass
class Joint:
    """A joint of a skeleton, referring to its relatives by index."""

    transform: QuaternionTransform = field(default_factory=QuaternionTransform)
    local_matrix: Matrix = field(default_factory=Matrix)
    skeleton_space_matrix: Matrix = field(default_factory=Matrix)
    name: str = ""
    children: list[int] = field(default_factory=list)
    index: int = 0
    parent: Optional[int] = None


@dataclass
class Skeleton:
    """Joints in depth-first order, with a name-to-index map."""

    root: int = 0
    joint_map: dict[str, int] = field(default_factory=dict)
    joints: list[Joint] = field(default_factory=list)


def create_joint(node: Node, parent: Optional[int], joints: list[Joint]) -> int:
    """Append a joint for ``node`` and its descendants to ``joints``; return its index."""
    joint = Joint(
        transform=copy.deepcopy(node.transform),
        local_matrix=copy.deepcopy(node.local_matrix),
        skeleton_space_matrix=identity(),
        name=node.name,
        index=len(joints),
        parent=parent,
    )
    joints.append(joint)
    for child in node.children:
        joint.children.append(create_joint(child, joint.index, joints))
    return joint.index


def update_skeleton(skeleton: Skeleton) -> None:
    """Recompute every joint's local and skeleton-space matrices."""
    for joint in skeleton.joints:
        joint.local_matrix = joint.transform.make_affine_matrix()
        if joint.parent is not None:
            parent_matrix = skeleton.joints[joint.parent].skeleton_space_matrix
            joint.skeleton_space_matrix = joint.local_matrix * parent_matrix
        else:
            joint.skeleton_space_matrix = joint.local_matrix


def create_skeleton(root_node: Node) -> Skeleton:
    """Build a skeleton from a node hierarchy and compute its matrices."""
    skeleton = Skeleton()
    skeleton.root = create_joint(root_node, None, skeleton.joints)
    for joint in skeleton.joints:
        skeleton.joint_map.setdefault(joint.name, joint.index)
    update_skeleton(skeleton)
    return skeleton


def apply_animation(skeleton: Skeleton, animation: Animation, animation_time: float) -> None:
    """Set the transform of every animated joint to its value at ``animation_time``."""
    for joint in skeleton.joints:
        node_animation = animation.node_animations.get(joint.name)
        if node_animation is None:
            continue
        joint.transform.translate = calculate_value(node_animation.translate, animation_time)
        joint.transform.rotate = calculate_value(node_animation.rotate, animation_time)
        joint.transform.scale = calculate_value(node_animation.scale, animation_time)