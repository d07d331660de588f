"""Quaternion conversion utilities in JAX.

MRR files store orientations as (x, y, z, w) quaternions, so every function
in this module uses that component order.
"""

import jax
import jax.numpy as jnp

# Type aliases
Array = jax.Array


def normalize_quaternions(quaternions: Array) -> Array:
    """Normalize quaternions to unit length.

    A zero quaternion carries no orientation and becomes the identity
    (0, 0, 0, 1) rather than NaN.
    """
    norm = jnp.linalg.norm(quaternions, axis=-1, keepdims=True)
    nonzero = norm > 0
    identity = jnp.zeros_like(quaternions).at[..., 3].set(1.0)
    return jnp.where(nonzero, quaternions / jnp.where(nonzero, norm, 1.0), identity)


def quaternion_to_matrix(quaternions: Array) -> Array:
    """
    Convert quaternions to rotation matrices.

    The decoder never checks that stored quaternions are unit length, so they
    are normalized here before building the matrix.

    Args:
        quaternions: (..., 4) array of quaternions in (x, y, z, w) format

    Returns:
        (..., 3, 3) array of rotation matrices
    """
    quaternions = normalize_quaternions(quaternions)

    # Unpack quaternion components - preserving batch dimensions
    x, y, z, w = jnp.moveaxis(quaternions, -1, 0)

    xx, yy, zz = x*x, y*y, z*z
    wx, wy, wz = w*x, w*y, w*z
    xy, xz, yz = x*y, x*z, y*z

    matrix = jnp.stack([
        jnp.stack([1 - 2*(yy + zz), 2*(xy - wz), 2*(xz + wy)], axis=-1),
        jnp.stack([2*(xy + wz), 1 - 2*(xx + zz), 2*(yz - wx)], axis=-1),
        jnp.stack([2*(xz - wy), 2*(yz + wx), 1 - 2*(xx + yy)], axis=-1)
    ], axis=-2)

    return matrix
