"""
JAX MRR: a loader for MRR (MechSim Robot Representation) assembly files.

This library decodes the MRR binary format into immutable, JIT-compatible
PyTrees of joints, parts and triangle-mesh bodies using JAX.
"""

import jax
jax.config.update("jax_enable_x64", True)

# Import core modules
from . import transforms
from . import core
from . import io

__version__ = "0.1.0"
__all__ = ["transforms", "core", "io"]
