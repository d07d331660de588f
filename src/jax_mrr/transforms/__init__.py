"""
Pose transforms for MRR assemblies.

This module provides:
- quaternion conversion for (x, y, z, w) orientations (rotation module)
- homogeneous rigid-body transforms (Transform3d)
"""

from . import rotation
from .transform import Transform3d

__all__ = [
    "rotation",
    "Transform3d",
]
