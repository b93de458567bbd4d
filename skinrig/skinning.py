"""Skin clusters: per-vertex joint influences and the matrix palette."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from skinrig.matrix import Matrix, identity, inverse, transpose
from skinrig.skeleton import Skeleton

NUM_MAX_INFLUENCE = 4


@dataclass
class VertexWeightData:
    """How strongly a joint pulls one vertex."""

    weight: float = 0.0
    vertex_index: int = 0


@dataclass
class JointWeightData:
    """Bind data of one joint: its inverse bind pose and the vertices it moves."""

    inverse_bind_pose_matrix: Matrix = field(default_factory=Matrix)
    vertex_weights: list[VertexWeightData] = field(default_factory=list)


@dataclass
class VertexInfluence:
    """Up to four joint weights of a vertex; a zero weight marks a free slot."""

    weights: list[float] = field(default_factory=lambda: [0.0] * NUM_MAX_INFLUENCE)
    joint_indices: list[int] = field(default_factory=lambda: [0] * NUM_MAX_INFLUENCE)


@dataclass
class WellForGPU:
    """Palette entry: a position matrix and its inverse transpose for normals."""

    skeleton_space_matrix: Matrix = field(default_factory=Matrix)
    skeleton_space_inverse_transpose_matrix: Matrix = field(default_factory=Matrix)


@dataclass
class SkinCluster:
    """Influences per vertex and one palette entry per joint."""

    inverse_bind_pose_matrices: list[Matrix] = field(default_factory=list)
    influences: list[VertexInfluence] = field(default_factory=list)
    palette: list[WellForGPU] = field(default_factory=list)


def create_skin_cluster(
    skeleton: Skeleton,
    skin_cluster_data: Mapping[str, JointWeightData],
    vertex_count: int,
) -> SkinCluster:
    """Build a skin cluster from per-joint weights, processed in joint-name order.

    Joints absent from the skeleton are skipped. A vertex keeps at most
    four influences; later ones are dropped.
    """
    joint_count = len(skeleton.joints)
    cluster = SkinCluster(
        inverse_bind_pose_matrices=[identity() for _ in range(joint_count)],
        influences=[VertexInfluence() for _ in range(vertex_count)],
        palette=[WellForGPU() for _ in range(joint_count)],
    )

    for joint_name, joint_weight in sorted(skin_cluster_data.items()):
        joint_index = skeleton.joint_map.get(joint_name)
        if joint_index is None:
            continue
        cluster.inverse_bind_pose_matrices[joint_index] = joint_weight.inverse_bind_pose_matrix
        for vertex_weight in joint_weight.vertex_weights:
            influence = cluster.influences[vertex_weight.vertex_index]
            for slot, weight in enumerate(influence.weights):
                if weight == 0.0:
                    influence.weights[slot] = vertex_weight.weight
                    influence.joint_indices[slot] = joint_index
                    break

    return cluster


def update_skin_cluster(skin_cluster: SkinCluster, skeleton: Skeleton) -> None:
    """Refresh the palette from the skeleton's current joint matrices."""
    for joint_index, joint in enumerate(skeleton.joints):
        if joint_index >= len(skin_cluster.inverse_bind_pose_matrices):
            raise ValueError(
                f"skin cluster has no inverse bind pose for joint {joint_index}"
            )
        entry = skin_cluster.palette[joint_index]
        entry.skeleton_space_matrix = (
            skin_cluster.inverse_bind_pose_matrices[joint_index] * joint.skeleton_space_matrix
        )
        entry.skeleton_space_inverse_transpose_matrix = transpose(
            inverse(entry.skeleton_space_matrix)
        )