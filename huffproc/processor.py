"""
Huffman compression and decompression of a single byte stream.

Compressed layout:
    32-bit marker HUFF_TREE
    tree header (see header.py)
    one code per input byte, in input order, then the end-of-stream code
    zero bits up to the next byte boundary
"""

from .exceptions import InvalidFormat, TruncatedPayload
from .header import read_header, write_header
from .huffman import (
    BITS_PER_INT,
    BITS_PER_WORD,
    HUFF_TREE,
    LEFT,
    PSEUDO_EOF,
    make_codings_from_tree,
    make_tree_from_counts,
    read_for_counts,
)

DEBUG_LOW = 1
DEBUG_HIGH = 4


class HuffProcessor:
    """
    Two-pass Huffman compressor and one-pass decompressor.

    Parameters:
    debug (int): 0 is silent, DEBUG_LOW prints a summary per call,
        DEBUG_HIGH also prints the weight table and every code.
    """

    def __init__(self, debug: int = 0):
        self.debug = debug

    def compress(self, bit_in, bit_out) -> int:
        """
        Compress everything readable from ``bit_in`` into ``bit_out``.

        ``bit_in`` is read twice, so it must support ``reset``.

        Returns:
        int: bits written to ``bit_out``, excluding the final padding.
        """
        counts = read_for_counts(bit_in)
        root = make_tree_from_counts(counts)
        codings = make_codings_from_tree(root)

        if self.debug >= DEBUG_HIGH:
            for symbol, weight in enumerate(counts):
                if weight:
                    print(f"{symbol}\t{weight}\t{codings[symbol].to01()}")

        bit_out.write_bits(BITS_PER_INT, HUFF_TREE)
        write_header(root, bit_out)

        bit_in.reset()
        self._write_compressed_bits(codings, bit_in, bit_out)
        bit_out.close()

        if self.debug >= DEBUG_LOW:
            print(f"compress: {len(codings)} symbols, read {bit_in.bits_read} bits, "
                  f"wrote {bit_out.bits_written} bits")
        return bit_out.bits_written

    def _write_compressed_bits(self, codings, bit_in, bit_out):
        while True:
            word = bit_in.read_bits(BITS_PER_WORD)
            if word is None:
                break
            bit_out.write_code(codings[word])
        bit_out.write_code(codings[PSEUDO_EOF])

    def decompress(self, bit_in, bit_out) -> int:
        """
        Restore the original bytes of a stream produced by ``compress``.

        Raises:
        InvalidFormat: the stream does not start with HUFF_TREE, or its tree
            cannot terminate.
        TruncatedHeader: the stream ends inside the tree header.
        TruncatedPayload: the stream ends before the end-of-stream code.
        """
        marker = bit_in.read_bits(BITS_PER_INT)
        if marker is None:
            raise InvalidFormat("stream is shorter than the format marker")
        if marker != HUFF_TREE:
            raise InvalidFormat(f"illegal header starts with {marker:#010x}")

        root = read_header(bit_in)
        if root.is_leaf() and root.value != PSEUDO_EOF:
            raise InvalidFormat(f"tree is a single leaf for symbol {root.value} with no end-of-stream code")

        self._read_compressed_bits(root, bit_in, bit_out)
        bit_out.close()

        if self.debug >= DEBUG_LOW:
            print(f"decompress: read {bit_in.bits_read} bits, wrote {bit_out.bits_written} bits")
        return bit_out.bits_written

    def _read_compressed_bits(self, root, bit_in, bit_out):
        node = root
        while True:
            if node.is_leaf():
                if node.value == PSEUDO_EOF:
                    return
                bit_out.write_bits(BITS_PER_WORD, node.value)
                node = root
                continue

            bit = bit_in.read_bit()
            if bit is None:
                raise TruncatedPayload(f"input ended after {bit_in.bits_read} bits without an end-of-stream code")
            node = node.left if bit == LEFT else node.right
