# Huffman Text Codec
# codec.py
# 10/18/26

"""
Public entry points: compress text into the self-describing container and back

    data = compress("aaab")
    assert decompress(data) == "aaab"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from bitpack import decode_bits, encode_symbols, pack_bits, unpack_bits
from container import read_container, write_container
from errors import ReservedSymbolError
from huffman import (
    EOF_SYMBOL,
    HuffmanNode,
    build_huffman_tree,
    count_frequencies,
    deserialize_tree,
    generate_huffman_codes,
    serialize_tree,
)


@dataclass
class Encoding:
    frequency_table: Dict[str, int]
    tree: HuffmanNode
    codes: Dict[str, str]
    tree_bytes: bytes
    packed: bytes
    trash_bits: int
    encoded_bits: int

    def to_bytes(self) -> bytes:
        return write_container(self.tree_bytes, self.packed, self.trash_bits)


def encode(text: str) -> Encoding:
    """
    Run the whole compression pipeline and keep every intermediate result
    (frequency table, tree, codes, packing) for callers that want to report on it
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if EOF_SYMBOL in text:
        raise ReservedSymbolError(f"input contains the reserved end-of-stream symbol {EOF_SYMBOL!r}")

    message = text + EOF_SYMBOL
    frequency_table = count_frequencies(message)
    root = build_huffman_tree(frequency_table)
    codes = generate_huffman_codes(root)

    bits = encode_symbols(message, codes)
    packed, trash_bits = pack_bits(bits)

    return Encoding(
        frequency_table=frequency_table,
        tree=root,
        codes=codes,
        tree_bytes=serialize_tree(root),
        packed=packed,
        trash_bits=trash_bits,
        encoded_bits=len(bits),
    )


def compress(text: str) -> bytes:
    return encode(text).to_bytes()


def decompress(data: bytes) -> str:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")

    tree_bytes, packed, trash_bits = read_container(data)
    root = deserialize_tree(tree_bytes)
    bits = unpack_bits(packed, trash_bits)
    return decode_bits(bits, root)
