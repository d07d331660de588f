"""Tests for mesh geometry built from decoded bodies."""

import jax.numpy as jnp
import numpy as np
import pytest

import mrr_builder
from mrr_builder import pack_assembly, pack_body, pack_part
from jax_mrr.core import Body, Pose
from jax_mrr.io import decode
from jax_mrr.mesh import MalformedBody, build_mesh, build_meshes, mesh_to_world

S = 0.7071067811865476


def make_body(vertices, indices=(), normals=(), uvs=()):
    return Body(
        triangle_count=len(indices) // 3,
        vertices=jnp.array(vertices, dtype=jnp.float32),
        indices=jnp.array(indices, dtype=jnp.int32),
        normals=jnp.array(normals, dtype=jnp.float32),
        uvs=jnp.array(uvs, dtype=jnp.float32),
    )


def test_build_mesh_scales_positions():
    body = make_body([6.0, 0.0, 0.0, 0.0, 12.0, 0.0, 0.0, 0.0, -6.0], [0, 1, 2])
    mesh = build_mesh(body, scale=1.0 / 6.0)

    assert mesh.positions.shape == (3, 3)
    np.testing.assert_allclose(mesh.positions, [[1, 0, 0], [0, 2, 0], [0, 0, -1]], rtol=1e-6)
    assert mesh.indices.dtype == jnp.uint32
    np.testing.assert_array_equal(mesh.indices, [0, 1, 2])


def test_build_mesh_without_normals_or_uvs():
    mesh = build_mesh(make_body(mrr_builder.TRIANGLE_VERTICES, [0, 1, 2]), scale=1.0)
    assert mesh.normals is None
    assert mesh.uvs.shape == (0, 2)


def test_build_mesh_keeps_normals_unscaled():
    body = make_body(
        [3.0, 0.0, 0.0],
        [0],
        normals=[0.0, 0.0, 1.0],
        uvs=[0.25, 0.75],
    )
    mesh = build_mesh(body, scale=2.0)
    np.testing.assert_allclose(mesh.positions, [[6.0, 0.0, 0.0]])
    np.testing.assert_allclose(mesh.normals, [[0.0, 0.0, 1.0]])
    np.testing.assert_allclose(mesh.uvs, [[0.25, 0.75]])


@pytest.mark.parametrize("field,values", [
    ("vertices", [0.0, 1.0, 2.0, 3.0]),
    ("normals", [0.0, 1.0]),
    ("uvs", [0.5]),
])
def test_build_mesh_rejects_ragged_arrays(field, values):
    body = make_body(mrr_builder.TRIANGLE_VERTICES, [0, 1, 2])
    body = body.replace(**{field: jnp.array(values, dtype=jnp.float32)})
    with pytest.raises(MalformedBody, match=field) as info:
        build_mesh(body)
    assert isinstance(info.value, ValueError)
    assert info.value.user_message == "corrupt file"


def test_build_meshes_in_part_order():
    data = pack_assembly(parts=[
        pack_part("a", bodies=[pack_body([1.0, 0.0, 0.0]), pack_body([2.0, 0.0, 0.0])]),
        pack_part("b", bodies=[]),
        pack_part("c", bodies=[pack_body([3.0, 0.0, 0.0])]),
    ])
    meshes = build_meshes(decode(data), scale=1.0)
    assert len(meshes) == 3
    np.testing.assert_allclose([m.positions[0, 0] for m in meshes], [1.0, 2.0, 3.0])


def test_mesh_to_world():
    body = make_body([1.0, 0.0, 0.0], [0], normals=[1.0, 0.0, 0.0])
    pose = Pose(
        position=jnp.array([0.0, 0.0, 12.0]),
        orientation=jnp.array([0.0, 0.0, S, S]),
    )
    mesh = mesh_to_world(build_mesh(body, scale=0.5), pose, scale=0.5)

    np.testing.assert_allclose(mesh.positions, [[0.0, 0.5, 6.0]], rtol=1e-6, atol=1e-6)
    np.testing.assert_allclose(mesh.normals, [[0.0, 1.0, 0.0]], rtol=1e-6, atol=1e-6)
    assert mesh.positions.dtype == jnp.float32


def test_mesh_to_world_zero_quaternion_is_identity():
    body = make_body([1.0, 2.0, 3.0], [0], normals=[0.0, 0.0, 1.0])
    pose = Pose(position=jnp.array([1.0, 0.0, 0.0]), orientation=jnp.zeros(4))
    mesh = mesh_to_world(build_mesh(body, scale=1.0), pose, scale=1.0)

    assert not jnp.any(jnp.isnan(mesh.positions))
    np.testing.assert_allclose(mesh.positions, [[2.0, 2.0, 3.0]], rtol=1e-6)
    np.testing.assert_allclose(mesh.normals, [[0.0, 0.0, 1.0]], rtol=1e-6)
