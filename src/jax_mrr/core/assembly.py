"""Assembly PyTree data structures for decoded MRR files.

This module defines the immutable value types produced by the MRR decoder.
Every numeric field is a JAX array so a whole assembly can be passed through
jit / vmap and compared leaf by leaf with the ``jax.tree_util`` helpers.
"""

import enum
from typing import Tuple

import jax.numpy as jnp
from jax import Array
from flax import struct

from ..transforms import Transform3d


class JointType(enum.IntEnum):
    """Joint kind, stored on disk as a 4-byte little-endian discriminant."""
    RIGID = 0
    REVOLUTE = 1
    SLIDER = 2


@struct.dataclass
class Pose:
    """Position and orientation of a joint or part.

    Attributes:
        position: Array of shape (3,), float64.
        orientation: Array of shape (4,), float64 quaternion in (x, y, z, w)
                     order. Expected to be unit length, but stored exactly as
                     read from the file.
    """
    position: Array
    orientation: Array

    @classmethod
    def identity(cls) -> "Pose":
        return cls(
            position=jnp.zeros(3, dtype=jnp.float64),
            orientation=jnp.array([0.0, 0.0, 0.0, 1.0], dtype=jnp.float64),
        )

    def to_transform(self) -> Transform3d:
        """Homogeneous transform for this pose."""
        return Transform3d.from_pos_quat(self.position, self.orientation)


@struct.dataclass
class Joint:
    """A kinematic connector. Its identity is its index in ``Assembly.joints``."""
    joint_type: JointType = struct.field(pytree_node=False)
    pose: Pose


@struct.dataclass
class Body:
    """One triangle mesh of a part, as flat arrays.

    Attributes:
        triangle_count: Declared triangle count (signed 32-bit).
        vertices: float32 coordinates, x/y/z interleaved.
        indices: int32 triangle vertex indices.
        normals: float32 normal components, x/y/z interleaved. May be empty.
        uvs: float32 texture coordinates, u/v interleaved. May be empty.
    """
    triangle_count: int = struct.field(pytree_node=False)
    vertices: Array
    indices: Array
    normals: Array
    uvs: Array


@struct.dataclass
class Part:
    """A named rigid sub-assembly.

    Attributes:
        name: Part name. Static field.
        pose: Pose of the part.
        joint_references: uint32 indices into ``Assembly.joints``.
        rigid_group_references: uint32 indices of externally defined rigid
                                groups.
        bodies: Mesh bodies of the part.
    """
    name: str = struct.field(pytree_node=False)
    pose: Pose
    joint_references: Array
    rigid_group_references: Array
    bodies: Tuple[Body, ...]


@struct.dataclass
class Assembly:
    """Root of a decoded MRR file: ordered joints and ordered parts."""
    joints: Tuple[Joint, ...]
    parts: Tuple[Part, ...]

    @property
    def body_count(self) -> int:
        return sum(len(part.bodies) for part in self.parts)

    def find_parts(self, text: str) -> Tuple[Part, ...]:
        """Parts whose name contains *text*."""
        return tuple(part for part in self.parts if text in part.name)
