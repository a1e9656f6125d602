# Huffman Text Codec
# huffman.py
# 10/18/26

import heapq
import itertools
import struct
from typing import Dict, Iterable, Optional

from errors import EmptyInputError, MalformedTreeError

EOF_SYMBOL = "□" # pseudo-EOF symbol appended to every message before encoding

LEAF_MARKER = 1
INTERNAL_MARKER = 0
MAX_CODE_POINT = 0x10FFFF
_CODE_POINT = struct.Struct("<I") # leaf symbols are stored as fixed-width code points

class HuffmanNode: # Node for Huffman tree
    def __init__(self, symbol: Optional[str], frequency: int, left=None, right=None):
        self.symbol = symbol    # character, or None for internal nodes
        self.frequency = frequency
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.symbol is not None

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode({self.symbol!r}, {self.frequency})"
        return f"HuffmanNode(None, {self.frequency}, {self.left!r}, {self.right!r})"

def count_frequencies(symbols: Iterable[str]) -> Dict[str, int]: # symbols: message with the EOF symbol already appended
    frequency_table: Dict[str, int] = {}
    for symbol in symbols:
        frequency_table[symbol] = frequency_table.get(symbol, 0) + 1
    # the EOF symbol must always get a leaf, even if the caller forgot to append it
    if frequency_table.get(EOF_SYMBOL, 0) < 1:
        frequency_table[EOF_SYMBOL] = 1
    return frequency_table

def build_huffman_tree(frequency_table: Dict[str, int]) -> HuffmanNode: # frequency_table: dict of symbol -> frequency
    if not frequency_table:
        raise EmptyInputError("cannot build a Huffman tree from an empty frequency table")

    # (frequency, insertion order, node): ties go to whichever node entered the queue first
    order = itertools.count()
    priority_queue = [(frequency, next(order), HuffmanNode(symbol, frequency))
                      for symbol, frequency in frequency_table.items()]
    heapq.heapify(priority_queue)

    # Build the tree
    while len(priority_queue) > 1:
        left_frequency, _, left = heapq.heappop(priority_queue)
        right_frequency, _, right = heapq.heappop(priority_queue)
        merged_frequency = left_frequency + right_frequency
        merged_node = HuffmanNode(None, merged_frequency, left, right) # internal node with combined frequency
        heapq.heappush(priority_queue, (merged_frequency, next(order), merged_node))

    # a single-entry table leaves a bare leaf as the root; its code is forced to "0" below
    return priority_queue[0][2]

def generate_huffman_codes(root: HuffmanNode) -> Dict[str, str]: # root: root of the Huffman tree
    if root.is_leaf:
        return {root.symbol: "0"}

    codes: Dict[str, str] = {}
    def generate_codes_helper(node, current_code): # recursive helper function to traverse the tree and generate codes
        # Leaf node -> assign code
        if node.is_leaf:
            codes[node.symbol] = current_code
            return

        generate_codes_helper(node.left, current_code + '0')
        generate_codes_helper(node.right, current_code + '1')

    generate_codes_helper(root, '')
    return codes # mapping of symbols to their Huffman codes

def serialize_tree(root: HuffmanNode) -> bytes:
    """
    Preorder encoding of the tree shape and leaf symbols
    internal node -> 0x00, left subtree, right subtree
    leaf          -> 0x01, symbol code point as u32 little-endian
    Frequencies are not stored, decoding only needs the shape
    """
    out = bytearray()

    def dfs(node: HuffmanNode) -> None:
        if node.is_leaf:
            out.append(LEAF_MARKER)
            out.extend(_CODE_POINT.pack(ord(node.symbol)))
            return
        out.append(INTERNAL_MARKER)
        dfs(node.left)
        dfs(node.right)

    dfs(root)
    return bytes(out)

def deserialize_tree(data: bytes) -> HuffmanNode:
    """
    Rebuild a tree written by serialize_tree. The whole buffer must be consumed
    Uses an explicit stack of internal nodes still waiting for their right child
    """
    n = len(data)
    root: Optional[HuffmanNode] = None
    pending = []
    i = 0

    while True:
        if i >= n:
            raise MalformedTreeError(f"tree data ended at byte {i} before the tree was complete")
        marker = data[i]
        i += 1

        if marker == LEAF_MARKER:
            if i + _CODE_POINT.size > n:
                raise MalformedTreeError(f"leaf at byte {i - 1} is missing its symbol")
            (code_point,) = _CODE_POINT.unpack_from(data, i)
            if code_point > MAX_CODE_POINT:
                raise MalformedTreeError(f"leaf at byte {i - 1} has invalid code point {code_point:#x}")
            i += _CODE_POINT.size
            node = HuffmanNode(chr(code_point), 0)
        elif marker == INTERNAL_MARKER:
            node = HuffmanNode(None, 0)
        else:
            raise MalformedTreeError(f"bad tree marker {marker} at byte {i - 1}")

        if pending:
            parent = pending[-1]
            if parent.left is None:
                parent.left = node
            else:
                parent.right = node
                pending.pop()
        else:
            root = node

        if not node.is_leaf:
            pending.append(node)
        if not pending:
            break

    if i != n:
        raise MalformedTreeError(f"{n - i} unexpected bytes after tree data")
    return root
