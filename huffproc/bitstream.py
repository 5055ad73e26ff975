"""
Bit-level I/O ports used by the Huffman processor.

Both ports buffer bits in a big-endian ``bitarray``: the first bit written is
the most significant bit of the first byte on disk.
"""

import io

from bitarray import bitarray
from bitarray.util import ba2int, int2ba

from .exceptions import HuffException

DEFAULT_CHUNK_SIZE = 4096


class BitInputStream:
    """
    Reads fixed-width unsigned integers from a binary stream.

    Bytes are pulled from the underlying stream in chunks and appended to a
    bitarray buffer; consumed bits are discarded whenever a new chunk is
    loaded.
    """

    def __init__(self, stream, chunk_size: int = DEFAULT_CHUNK_SIZE, owns_stream: bool = False):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.stream = stream
        self.chunk_size = chunk_size
        self.owns_stream = owns_stream
        self.bits_read = 0
        self._buffer = bitarray(endian="big")
        self._pos = 0

    def _fill(self, num_bits: int) -> bool:
        while len(self._buffer) - self._pos < num_bits:
            chunk = self.stream.read(self.chunk_size)
            if not chunk:
                return False
            del self._buffer[:self._pos]
            self._pos = 0
            self._buffer.frombytes(chunk)
        return True

    def read_bits(self, num_bits: int):
        """
        Read ``num_bits`` bits and return them as an unsigned int.

        Returns None when fewer than ``num_bits`` bits remain in the stream.
        """
        if not self._fill(num_bits):
            return None
        value = ba2int(self._buffer[self._pos:self._pos + num_bits], signed=False)
        self._pos += num_bits
        self.bits_read += num_bits
        return value

    def read_bit(self):
        if not self._fill(1):
            return None
        bit = self._buffer[self._pos]
        self._pos += 1
        self.bits_read += 1
        return bit

    def reset(self):
        """Rewind to the first bit of the underlying stream."""
        if not self.stream.seekable():
            raise HuffException("input stream cannot be reset to its start")
        self.stream.seek(0)
        self._buffer = bitarray(endian="big")
        self._pos = 0

    def close(self):
        if self.owns_stream:
            self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class BitOutputStream:
    """
    Writes fixed-width unsigned integers and prebuilt codes to a binary stream.

    Whole bytes are written through as soon as they are complete; the last
    partial byte is padded with zero bits by ``flush``.
    """

    def __init__(self, stream, owns_stream: bool = False):
        self.stream = stream
        self.owns_stream = owns_stream
        self.bits_written = 0
        self._buffer = bitarray(endian="big")
        self._closed = False

    def _drain(self):
        whole = len(self._buffer) - len(self._buffer) % 8
        if whole:
            self.stream.write(self._buffer[:whole].tobytes())
            del self._buffer[:whole]

    def write_bits(self, num_bits: int, value: int):
        """Write the low ``num_bits`` bits of ``value``, most significant first."""
        if num_bits == 0:
            return
        if value < 0 or value >> num_bits:
            raise ValueError(f"value {value} does not fit in {num_bits} bits")
        self._buffer.extend(int2ba(value, length=num_bits, endian="big"))
        self.bits_written += num_bits
        if len(self._buffer) >= 8 * DEFAULT_CHUNK_SIZE:
            self._drain()

    def write_bit(self, bit: int):
        self.write_bits(1, bit)

    def write_code(self, code: bitarray):
        self._buffer.extend(code)
        self.bits_written += len(code)
        if len(self._buffer) >= 8 * DEFAULT_CHUNK_SIZE:
            self._drain()

    def flush(self):
        self._buffer.fill()
        self._drain()
        self.stream.flush()

    def close(self):
        if self._closed:
            return
        self.flush()
        self._closed = True
        if self.owns_stream:
            self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def from_bytes(data: bytes, chunk_size: int = DEFAULT_CHUNK_SIZE) -> BitInputStream:
    return BitInputStream(io.BytesIO(data), chunk_size=chunk_size)


def from_path(path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> BitInputStream:
    return BitInputStream(open(path, "rb"), chunk_size=chunk_size, owns_stream=True)


def to_path(path) -> BitOutputStream:
    return BitOutputStream(open(path, "wb"), owns_stream=True)
