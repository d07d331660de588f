"""MRR parser for loading mechanical assemblies into JAX-native data structures.

This module decodes the MRR binary format, a signature followed by a flat
joint list and a part list, into an immutable Assembly PyTree. The grammar
has no alternation: each field is read once, in file order, and the first
failure aborts the whole decode.
"""

import logging
from pathlib import Path
from typing import List, Union

import jax.numpy as jnp

from jax_mrr.core.assembly import Assembly, Body, Joint, Part
from .cursor import ByteCursor
from .errors import FormatSignatureMismatch, IoError
from .readers import (
    F32,
    I32,
    U32,
    read_i32,
    read_joint_type,
    read_length,
    read_pose,
    read_sequence,
    read_text,
)

logger = logging.getLogger(__name__)

FORMAT_SIGNATURE = b"MRR (MechSim Robot Representation)"


def load(path: Union[str, Path]) -> bytes:
    """Read a whole file into memory.

    Raises:
        IoError: the file is missing or unreadable.
    """
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise IoError(path, exc) from exc


def check_signature(cursor: ByteCursor) -> None:
    """Consume the format signature, or raise without consuming anything.

    A buffer shorter than the signature is a mismatch, not an EOF.
    """
    if bytes(cursor.peek(len(FORMAT_SIGNATURE))) != FORMAT_SIGNATURE:
        raise FormatSignatureMismatch("format signature not found")
    cursor.take(len(FORMAT_SIGNATURE))


def _read_body(cursor: ByteCursor) -> Body:
    triangle_count = read_i32(cursor)
    vertices = read_sequence(cursor, F32)
    indices = read_sequence(cursor, I32)
    normals = read_sequence(cursor, F32)
    uvs = read_sequence(cursor, F32)
    return Body(
        triangle_count=triangle_count,
        vertices=jnp.asarray(vertices),
        indices=jnp.asarray(indices),
        normals=jnp.asarray(normals),
        uvs=jnp.asarray(uvs),
    )


def _read_part(cursor: ByteCursor) -> Part:
    name = read_text(cursor)
    pose = read_pose(cursor)
    joint_references = read_sequence(cursor, U32)
    rigid_group_references = read_sequence(cursor, U32)

    body_count = read_length(cursor)
    bodies: List[Body] = []
    for _ in range(body_count):
        bodies.append(_read_body(cursor))

    return Part(
        name=name,
        pose=pose,
        joint_references=jnp.asarray(joint_references),
        rigid_group_references=jnp.asarray(rigid_group_references),
        bodies=tuple(bodies),
    )


def decode(data: bytes) -> Assembly:
    """Decode an MRR buffer into an Assembly PyTree.

    Args:
        data: The complete file contents.

    Returns:
        Assembly: A new assembly sharing no memory with *data*.

    Raises:
        MrrError: any structural problem; no partial assembly is produced.
    """
    cursor = ByteCursor(data)
    check_signature(cursor)

    joint_count = read_length(cursor)
    joints: List[Joint] = []
    for _ in range(joint_count):
        joint_type = read_joint_type(cursor)
        pose = read_pose(cursor)
        joints.append(Joint(joint_type=joint_type, pose=pose))

    part_count = read_length(cursor)
    parts: List[Part] = []
    for _ in range(part_count):
        parts.append(_read_part(cursor))

    if cursor.remaining:
        logger.debug("Ignoring %d trailing bytes", cursor.remaining)
    logger.debug(
        "Decoded %d joints and %d parts from %d bytes",
        len(joints), len(parts), cursor.position,
    )
    return Assembly(joints=tuple(joints), parts=tuple(parts))


def load_assembly(path: Union[str, Path]) -> Assembly:
    """Load an MRR file and decode it into an Assembly PyTree.

    Args:
        path: Path to the .mrr file to load.

    Returns:
        Assembly: The decoded assembly.
    """
    return decode(load(path))
