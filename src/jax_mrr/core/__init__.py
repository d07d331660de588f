"""Core assembly data structures for jax_mrr.

This module provides the immutable value types that a decoded MRR file is
made of.
"""

from .assembly import Assembly, Body, Joint, JointType, Part, Pose

__all__ = ["Assembly", "Body", "Joint", "JointType", "Part", "Pose"]
