from heapq import heapify, heappush, heappop
from itertools import count

from bitarray import bitarray

BITS_PER_WORD = 8
BITS_PER_INT = 32
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE
SYMBOL_BITS = BITS_PER_WORD + 1
HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1

# Branch taken for each code bit. Codes are built and decoded with these two
# values only, so the encoder and decoder can never disagree.
LEFT = 0
RIGHT = 1

# The end-of-stream symbol always gets this weight, whatever the input holds.
PSEUDO_EOF_WEIGHT = 1


class HuffNode:
    """
    A node in a Huffman code tree.

    Leaves carry a symbol in [0, 256]; internal nodes carry the summed weight
    of their two children and no symbol. ``order`` is the creation sequence
    number used to break weight ties.
    """

    def __init__(self, value, weight, left=None, right=None, order=0):
        self.value = value
        self.weight = weight
        self.left = left
        self.right = right
        self.order = order

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __lt__(self, other):
        return (self.weight, self.order) < (other.weight, other.order)

    def __repr__(self):
        if self.is_leaf():
            return f"HuffNode(value={self.value}, weight={self.weight})"
        return f"HuffNode(weight={self.weight}, left={self.left!r}, right={self.right!r})"


def read_for_counts(bit_in) -> list:
    """
    Count every 8-bit word of ``bit_in`` until end of input.

    Returns a list of ALPH_SIZE + 1 weights; the last entry belongs to the
    end-of-stream symbol and is always PSEUDO_EOF_WEIGHT.
    """
    counts = [0] * (ALPH_SIZE + 1)
    while True:
        word = bit_in.read_bits(BITS_PER_WORD)
        if word is None:
            break
        counts[word] += 1
    counts[PSEUDO_EOF] = PSEUDO_EOF_WEIGHT
    return counts


def make_tree_from_counts(counts) -> HuffNode:
    """
    Build the Huffman tree for ``counts`` by repeatedly merging the two
    lightest nodes.

    Ties on weight go to the node created first: leaves are created in
    ascending symbol order, merged nodes after them in merge order. The first
    node popped becomes the left child.
    """
    sequence = count()
    queue = [HuffNode(symbol, weight, order=next(sequence))
             for symbol, weight in enumerate(counts) if weight > 0]
    if not queue:
        raise ValueError("cannot build a code tree from an all-zero weight table")
    heapify(queue)

    while len(queue) > 1:
        left = heappop(queue)
        right = heappop(queue)
        heappush(queue, HuffNode(None, left.weight + right.weight, left, right, order=next(sequence)))

    return queue[0]


def make_codings_from_tree(root: HuffNode) -> dict:
    """Map every leaf symbol in ``root`` to its root-to-leaf path as a bitarray."""
    codings = {}

    def walk(node, path):
        if node.is_leaf():
            codings[node.value] = path
            return
        walk(node.left, path + bitarray([LEFT], endian="big"))
        walk(node.right, path + bitarray([RIGHT], endian="big"))

    walk(root, bitarray(endian="big"))
    return codings
