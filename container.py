# Huffman Text Codec
# container.py
# 10/18/26

import struct
from typing import Tuple

from errors import MalformedContainerError

# [u32 tree length][tree bytes][packed bitstream][u8 trash bits], little-endian
TREE_LENGTH = struct.Struct("<I")


def write_container(tree_bytes: bytes, packed: bytes, trash_bits: int) -> bytes:
    if not 0 <= trash_bits <= 7:
        raise ValueError(f"trash bit count must be 0-7, got {trash_bits}")
    return b"".join((
        TREE_LENGTH.pack(len(tree_bytes)),
        tree_bytes,
        packed,
        bytes((trash_bits,)),
    ))


def read_container(data: bytes) -> Tuple[bytes, bytes, int]:
    """
    Split a compressed artifact into (tree_bytes, packed_bits, trash_bits)
    Only the framing is checked here; the tree and the trash count are
    validated by the code that consumes them
    """
    data = bytes(data)
    if len(data) < TREE_LENGTH.size:
        raise MalformedContainerError(f"container is {len(data)} bytes, too short for the tree length header")

    (tree_length,) = TREE_LENGTH.unpack_from(data, 0)
    cursor = TREE_LENGTH.size
    if cursor + tree_length > len(data):
        raise MalformedContainerError(
            f"declared tree length {tree_length} exceeds the {len(data) - cursor} bytes available")

    tree_bytes = data[cursor:cursor + tree_length]
    cursor += tree_length

    body = data[cursor:]
    if not body:
        raise MalformedContainerError("container has no trash-bit byte after the tree")

    return tree_bytes, body[:-1], body[-1]
