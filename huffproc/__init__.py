from .compression import Compressor
from .exceptions import HuffException, InvalidFormat, TruncatedHeader, TruncatedPayload
from .processor import HuffProcessor

__all__ = [
    "Compressor",
    "HuffException",
    "HuffProcessor",
    "InvalidFormat",
    "TruncatedHeader",
    "TruncatedPayload",
]
