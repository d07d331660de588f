import hypothesis
import jax
import numpy as np
import pytest

import mrr_builder

# Use hypothesis profile for CI
hypothesis.settings.register_profile("ci", max_examples=10, deadline=None)


def assert_trees_equal(a, b):
    """Same pytree structure (static fields included) and equal leaves."""
    assert jax.tree_util.tree_structure(a) == jax.tree_util.tree_structure(b)
    for x, y in zip(jax.tree_util.tree_leaves(a), jax.tree_util.tree_leaves(b)):
        np.testing.assert_array_equal(x, y)


@pytest.fixture
def sample_buffer():
    return mrr_builder.sample_buffer()


@pytest.fixture
def sample_file(tmp_path, sample_buffer):
    path = tmp_path / "ChassisBot v2.mrr"
    path.write_bytes(sample_buffer)
    return path


@pytest.fixture
def trees_equal():
    return assert_trees_equal
