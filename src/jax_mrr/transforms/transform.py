"""Rigid-body transforms for placing assembly geometry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import jax
import jax.numpy as jnp
from jax.tree_util import register_pytree_node_class

from .rotation import quaternion_to_matrix

Array = jax.Array

@register_pytree_node_class  # let Transform3d work with jit / grad / vmap …
@dataclass(frozen=True)
class Transform3d:
    """Immutable homogeneous transform, shape (4, 4)."""
    matrix: Array

    # Constructors
    @classmethod
    def from_matrix(cls, matrix: Array) -> "Transform3d":
        if matrix.shape != (4, 4):
            raise ValueError(f"matrix must have shape (4,4), got {matrix.shape}")
        return cls(matrix)

    @classmethod
    def from_pos_quat(cls, pos: Array, quat: Optional[Array] = None) -> "Transform3d":
        """Build a transform from a position and an (x, y, z, w) quaternion."""
        m = jnp.eye(4, dtype=pos.dtype)
        m = m.at[:3, 3].set(pos)
        if quat is not None:
            m = m.at[:3, :3].set(quaternion_to_matrix(quat))
        return cls(m)

    @classmethod
    def identity(cls, *, dtype=jnp.float64) -> "Transform3d":
        return cls(jnp.eye(4, dtype=dtype))

    # PyTree boiler-plate
    def tree_flatten(self):
        return (self.matrix,), None

    @classmethod
    def tree_unflatten(cls, aux, children):
        (matrix,) = children
        return cls(matrix)

    def compose(self, other: "Transform3d") -> "Transform3d":
        """Self ∘ other (apply *other* first, then self)."""
        return Transform3d(jnp.matmul(self.matrix, other.matrix))

    def transform_points(self, points: Array) -> Array:
        """Apply the transform to (3,) or (N, 3) *points*."""
        if points.shape[-1] != 3 or points.ndim > 2:
            raise ValueError("points must have shape (3,) or (N,3)")

        R = self.get_rotation_matrix().astype(points.dtype)
        t = self.get_position().astype(points.dtype)
        return points @ R.T + t

    def transform_directions(self, directions: Array) -> Array:
        """Rotate (3,) or (N, 3) *directions*; translation is not applied."""
        if directions.shape[-1] != 3 or directions.ndim > 2:
            raise ValueError("directions must have shape (3,) or (N,3)")

        R = self.get_rotation_matrix().astype(directions.dtype)
        return directions @ R.T

    # Convenience helpers
    def get_position(self) -> Array:
        return self.matrix[:3, 3]

    def get_rotation_matrix(self) -> Array:
        return self.matrix[:3, :3]
