"""Triangle-list mesh geometry built from decoded bodies.

Bodies keep the flat arrays exactly as stored in the file. This module
reshapes them into per-vertex rows ready for rendering.
"""

from typing import Optional, Tuple

import jax.numpy as jnp
from jax import Array
from flax import struct

from jax_mrr import config
from jax_mrr.core import Assembly, Body, Pose
from jax_mrr.io import MrrError


class MalformedBody(MrrError, ValueError):
    """A body array length does not match its component count."""

    user_message = "corrupt file"


@struct.dataclass
class MeshGeometry:
    """Renderable triangle list.

    Attributes:
        positions: (N, 3) float32 vertex positions, scaled.
        normals: (N, 3) float32 normals, or None if the body has none.
        uvs: (M, 2) float32 texture coordinates. Empty when the body has none.
        indices: (K,) uint32 vertex indices, three per triangle.
    """
    positions: Array
    normals: Optional[Array]
    uvs: Array
    indices: Array


def _as_rows(values: Array, width: int, label: str) -> Array:
    if values.shape[0] % width:
        raise MalformedBody(
            f"{label} length {values.shape[0]} is not a multiple of {width}"
        )
    return values.reshape(-1, width)


def build_mesh(body: Body, scale: float = config.MESH_SCALE) -> MeshGeometry:
    """Convert one body into triangle-list geometry.

    Args:
        body: Decoded body.
        scale: Factor applied to vertex positions.

    Raises:
        MalformedBody: a flat array length does not match its component count.
    """
    positions = _as_rows(body.vertices, 3, "vertices") * scale
    normals = _as_rows(body.normals, 3, "normals") if body.normals.size else None
    uvs = _as_rows(body.uvs, 2, "uvs")
    return MeshGeometry(
        positions=positions,
        normals=normals,
        uvs=uvs,
        indices=body.indices.astype(jnp.uint32),
    )


def build_meshes(
    assembly: Assembly, scale: float = config.MESH_SCALE
) -> Tuple[MeshGeometry, ...]:
    """One mesh per body, in part order then body order."""
    return tuple(
        build_mesh(body, scale) for part in assembly.parts for body in part.bodies
    )


def mesh_to_world(
    mesh: MeshGeometry, pose: Pose, scale: float = config.MESH_SCALE
) -> MeshGeometry:
    """Place *mesh* at *pose*.

    *scale* must match the one the mesh was built with; it is applied to the
    pose translation so positions and offsets share units.
    """
    transform = pose.replace(position=pose.position * scale).to_transform()
    normals = mesh.normals
    if normals is not None:
        normals = transform.transform_directions(normals)
    return mesh.replace(
        positions=transform.transform_points(mesh.positions),
        normals=normals,
    )
