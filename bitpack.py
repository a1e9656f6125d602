# Huffman Text Codec
# bitpack.py
# 10/18/26

from typing import Dict, Iterable, Tuple

from errors import CorruptStreamError, MalformedContainerError
from huffman import EOF_SYMBOL, HuffmanNode


def encode_symbols(symbols: Iterable[str], code_map: Dict[str, str]) -> str:
    return ''.join(code_map[symbol] for symbol in symbols)


def pack_bits(bits: str) -> Tuple[bytes, int]:
    """
    Converts a string of '0'/'1' characters into packed bytes, most significant bit first
    Returns (packed_bytes, trash_bits) where trash_bits is the number of 0 bits
    added to fill the last byte (0-7)
    """
    out = bytearray()
    acc = 0
    acc_bits = 0

    for ch in bits:
        if ch == '1':
            acc = (acc << 1) | 1
        elif ch == '0':
            acc = acc << 1
        else:
            raise ValueError(f"bit string may only contain '0' and '1', got {ch!r}")
        acc_bits += 1
        if acc_bits == 8:
            out.append(acc & 0xFF)
            acc = 0
            acc_bits = 0

    trash_bits = 0
    if acc_bits != 0:
        trash_bits = 8 - acc_bits
        acc = acc << trash_bits
        out.append(acc & 0xFF)

    return bytes(out), trash_bits


def unpack_bits(packed: bytes, trash_bits: int) -> str:
    """
    Inverse of pack_bits: expand every byte to 8 bits and drop the trailing padding
    """
    if not 0 <= trash_bits <= 7:
        raise MalformedContainerError(f"trash bit count must be 0-7, got {trash_bits}")
    total_bits = len(packed) * 8 - trash_bits
    if total_bits < 0:
        raise MalformedContainerError(f"{trash_bits} trash bits declared but the bitstream is empty")

    bits = ''.join(f"{byte:08b}" for byte in packed)
    return bits[:total_bits]


def decode_bits(bits: str, root: HuffmanNode) -> str:
    """
    Decode a bit string by walking the Huffman tree
    Stops at the EOF symbol; whatever follows it is padding and is ignored
    """
    decoded = []

    # single-symbol tree: the root is the leaf and its code is "0"
    if root.is_leaf:
        for position, bit in enumerate(bits):
            if bit != '0':
                raise CorruptStreamError(f"unexpected bit {bit!r} at position {position} for a single-symbol tree")
            if root.symbol == EOF_SYMBOL:
                return ''.join(decoded)
            decoded.append(root.symbol)
        raise CorruptStreamError("bitstream ended before the end-of-stream symbol")

    node = root
    for position, bit in enumerate(bits):
        node = node.left if bit == '0' else node.right
        if node is None:
            raise CorruptStreamError(f"bit {position} leads to a missing child")

        # Leaf
        if node.is_leaf:
            if node.symbol == EOF_SYMBOL:
                return ''.join(decoded)
            decoded.append(node.symbol)
            node = root

    raise CorruptStreamError("bitstream ended before the end-of-stream symbol")
