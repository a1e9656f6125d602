import struct

import pytest

from container import read_container, write_container
from errors import MalformedContainerError


def test_write_container_layout():
    data = write_container(b"TREE", b"\xaa\xbb", 3)
    assert data == b"\x04\x00\x00\x00TREE\xaa\xbb\x03"


def test_read_container_splits_fields():
    assert read_container(b"\x04\x00\x00\x00TREE\xaa\xbb\x03") == (b"TREE", b"\xaa\xbb", 3)


def test_read_container_empty_bitstream_keeps_trash_byte():
    assert read_container(b"\x01\x00\x00\x00T\x00") == (b"T", b"", 0)


def test_round_trip_with_large_tree():
    tree = bytes(range(256)) * 300
    tree_bytes, packed, trash = read_container(write_container(tree, b"\x01\x02", 7))
    assert tree_bytes == tree
    assert packed == b"\x01\x02"
    assert trash == 7


def test_read_container_accepts_bytearray():
    assert read_container(bytearray(b"\x00\x00\x00\x00\x05")) == (b"", b"", 5)


@pytest.mark.parametrize("trash", [-1, 8, 255])
def test_write_container_rejects_bad_trash(trash):
    with pytest.raises(ValueError):
        write_container(b"", b"", trash)


@pytest.mark.parametrize("data", [
    b"",
    b"\x01\x00",                                  # shorter than the length header
    struct.pack("<I", 10) + b"short",             # declared tree length exceeds buffer
    struct.pack("<I", 2**32 - 1) + b"\x00" * 8,
    struct.pack("<I", 4) + b"TREE",               # no trash-bit byte
])
def test_read_container_rejects_malformed(data):
    with pytest.raises(MalformedContainerError):
        read_container(data)
