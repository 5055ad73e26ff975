import io
import os

from .bitstream import BitOutputStream, from_bytes, from_path, to_path
from .config_loader import load_config
from .exceptions import HuffException
from .processor import HuffProcessor


class Compressor:
        # Convenience layer over HuffProcessor: callers hand in bytes or file
        # paths and never touch the bit-stream ports themselves.
        def __init__(self, debug=None, chunk_size=None, config=None):
            """
            Initializes the Compressor.

            Parameters:
            debug (int, optional): Debug level for HuffProcessor. Defaults to the configured value.
            chunk_size (int, optional): Bytes read per refill of the input port. Defaults to the configured value.
            config (dict, optional): Already-loaded configuration; loaded from disk when omitted.
            """
            settings = (config or load_config())["huffman"]
            self.debug = settings["debug_level"] if debug is None else debug
            self.chunk_size = settings["read_chunk_size"] if chunk_size is None else chunk_size
            self.processor = HuffProcessor(debug=self.debug)

        def compress(self, data: bytes) -> bytes:
            """
            Compresses the given bytes.

            Parameters:
            data (bytes): The bytes to compress.

            Returns:
            bytes: Marker, tree header and encoded payload.
            """
            if not isinstance(data, (bytes, bytearray)):
                raise TypeError("Input data must be bytes.")
            sink = io.BytesIO()
            self.processor.compress(from_bytes(data, self.chunk_size), BitOutputStream(sink))
            return sink.getvalue()

        def decompress(self, compressed: bytes) -> bytes:
            """
            Decompresses bytes produced by ``compress``.

            Parameters:
            compressed (bytes): Compressed data.

            Returns:
            bytes: The original bytes.
            """
            if not isinstance(compressed, (bytes, bytearray)):
                raise TypeError("Input compressed data must be bytes.")
            sink = io.BytesIO()
            self.processor.decompress(from_bytes(compressed, self.chunk_size), BitOutputStream(sink))
            return sink.getvalue()

        def compress_file(self, src, dst) -> int:
            """Compresses the file at ``src`` into ``dst`` and returns the bits written."""
            with from_path(src, self.chunk_size) as bit_in, to_path(dst) as bit_out:
                return self.processor.compress(bit_in, bit_out)

        def decompress_file(self, src, dst) -> int:
            """
            Decompresses the file at ``src`` into ``dst`` and returns the bits written.

            A partially written ``dst`` is removed if the input turns out to be
            malformed.
            """
            try:
                with from_path(src, self.chunk_size) as bit_in, to_path(dst) as bit_out:
                    return self.processor.decompress(bit_in, bit_out)
            except HuffException:
                if os.path.exists(dst):
                    os.remove(dst)
                raise
