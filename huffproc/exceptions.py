class HuffException(ValueError):
    """Base class for every error raised while reading or writing a compressed stream."""


class InvalidFormat(HuffException):
    """The stream does not start with the expected marker, or its tree is unusable."""


class TruncatedHeader(HuffException):
    """Input ran out before a complete code tree was read."""


class TruncatedPayload(HuffException):
    """Input ran out before the end-of-stream code was decoded."""
