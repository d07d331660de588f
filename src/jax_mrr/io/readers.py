"""Field readers for the MRR binary layout.

Fixed-width records (lengths, joint types, poses) are unpacked field by field
with explicit little-endian formats. Length-prefixed sequences are an 8-byte
element count followed by the packed elements.
"""

import struct

import jax.numpy as jnp
import numpy as np

from jax_mrr.core.assembly import JointType, Pose
from .cursor import ByteCursor
from .errors import InvalidUtf8, LengthOverflow, UnknownJointType

# Sequence element types
U8 = np.dtype("u1")
U32 = np.dtype("<u4")
I32 = np.dtype("<i4")
F32 = np.dtype("<f4")

_LENGTH = struct.Struct("<Q")
_JOINT_TYPE = struct.Struct("<I")
_I32 = struct.Struct("<i")
_POSE = struct.Struct("<3d4d")  # position x, y, z; quaternion x, y, z, w

# Largest byte span an 8-byte size field can describe.
MAX_SPAN = 2**64 - 1


def read_length(cursor: ByteCursor) -> int:
    """Read an 8-byte little-endian unsigned length."""
    (value,) = _LENGTH.unpack(cursor.take(_LENGTH.size))
    return value


def read_i32(cursor: ByteCursor) -> int:
    (value,) = _I32.unpack(cursor.take(_I32.size))
    return value


def read_joint_type(cursor: ByteCursor) -> JointType:
    """Read a 4-byte joint type discriminant.

    Raises:
        UnknownJointType: the value is not 0, 1 or 2.
    """
    (value,) = _JOINT_TYPE.unpack(cursor.take(_JOINT_TYPE.size))
    try:
        return JointType(value)
    except ValueError:
        raise UnknownJointType(value) from None


def read_pose(cursor: ByteCursor) -> Pose:
    """Read a packed pose: 3 position doubles then 4 quaternion doubles."""
    px, py, pz, qx, qy, qz, qw = _POSE.unpack(cursor.take(_POSE.size))
    return Pose(
        position=jnp.array([px, py, pz], dtype=jnp.float64),
        orientation=jnp.array([qx, qy, qz, qw], dtype=jnp.float64),
    )


def read_sequence(cursor: ByteCursor, dtype: np.dtype) -> np.ndarray:
    """Read a length-prefixed sequence of *dtype* elements.

    Args:
        cursor: Cursor positioned at the 8-byte length.
        dtype: One of ``U8``, ``U32``, ``I32`` or ``F32``.

    Returns:
        A new native-byte-order array that does not share memory with the
        input buffer.

    Raises:
        LengthOverflow: length times element width exceeds ``MAX_SPAN``.
        UnexpectedEof: the elements run past the end of the buffer.
    """
    length = read_length(cursor)
    span = length * dtype.itemsize
    if span > MAX_SPAN:
        raise LengthOverflow(length, dtype.itemsize)
    data = cursor.take(span)
    return np.frombuffer(data, dtype=dtype).astype(dtype.newbyteorder("="), copy=True)


def read_text(cursor: ByteCursor) -> str:
    """Read a length-prefixed UTF-8 string.

    Raises:
        InvalidUtf8: the bytes are not valid UTF-8.
    """
    raw = read_sequence(cursor, U8).tobytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidUtf8(f"invalid UTF-8 in name at byte {exc.start}") from exc
