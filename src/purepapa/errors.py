"""Exception hierarchy for papa parsing and thumbnail generation"""


class PapaError(Exception):
    """Base class for every error raised by purepapa"""


class FormatError(PapaError, ValueError):
    """The container bytes do not describe a usable papa texture"""


class InvalidMagicError(FormatError):
    """The leading four bytes are not the papa signature"""


class NoTexturesError(FormatError):
    """The header declares zero (or a negative number of) textures"""


class TruncatedReadError(FormatError):
    """Fewer bytes were available than a fixed-size structure needs"""


class InvalidTextureError(FormatError):
    """A texture entry has zero dimensions or an inconsistent payload size"""


class ResourceLimitError(PapaError):
    """A size taken from the file exceeds the stream or a configured limit"""


class StreamError(PapaError, OSError):
    """The underlying stream failed to read or seek"""
