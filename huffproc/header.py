"""
Tree header codec.

The header is a pre-order walk of the code tree: a 0 bit for an internal
node followed by its left and right subtrees, a 1 bit for a leaf followed by
its symbol in SYMBOL_BITS bits. The shape bits alone delimit the header, so
no node count or length is stored.
"""

from .exceptions import InvalidFormat, TruncatedHeader
from .huffman import HuffNode, PSEUDO_EOF, SYMBOL_BITS

INTERNAL_BIT = 0
LEAF_BIT = 1


def write_header(root: HuffNode, bit_out):
    """Serialize ``root`` to ``bit_out``."""
    if root.is_leaf():
        bit_out.write_bit(LEAF_BIT)
        bit_out.write_bits(SYMBOL_BITS, root.value)
        return
    bit_out.write_bit(INTERNAL_BIT)
    write_header(root.left, bit_out)
    write_header(root.right, bit_out)


def read_header(bit_in) -> HuffNode:
    """
    Rebuild a tree from a header written by ``write_header``.

    Parsing uses an explicit stack of internal nodes still waiting for
    children, so a hostile header cannot exhaust the interpreter's recursion
    limit.

    Raises:
        TruncatedHeader: input ended before the tree was complete.
        InvalidFormat: a leaf holds a symbol outside [0, 256].
    """
    root = None
    pending = []
    while True:
        bit = bit_in.read_bit()
        if bit is None:
            raise TruncatedHeader(f"input ended inside the tree header after {bit_in.bits_read} bits")

        if bit == INTERNAL_BIT:
            node = HuffNode(None, 0)
        else:
            symbol = bit_in.read_bits(SYMBOL_BITS)
            if symbol is None:
                raise TruncatedHeader(f"input ended inside a leaf symbol after {bit_in.bits_read} bits")
            if symbol > PSEUDO_EOF:
                raise InvalidFormat(f"leaf symbol {symbol} is outside the alphabet")
            node = HuffNode(symbol, 0)

        if pending:
            parent = pending[-1]
            if parent.left is None:
                parent.left = node
            else:
                parent.right = node
                pending.pop()
        else:
            root = node

        if bit == INTERNAL_BIT:
            pending.append(node)

        if not pending:
            return root
