"""Exceptions raised by the QOI codec."""


class QOIError(Exception):
    """Base class for everything the codec raises."""


class FormatError(QOIError, ValueError):
    """The byte stream is not a valid QOI file."""


class UnexpectedEofError(FormatError):
    pass


class BadMagicError(FormatError):
    pass


class UnsupportedChannelsError(FormatError):
    pass


class UnsupportedColorspaceError(FormatError):
    pass


class InvalidDimensionsError(FormatError):
    pass


class InvalidRunLengthError(FormatError):
    pass


class InvalidEndMarkerError(FormatError):
    pass


class TrailingDataError(FormatError):
    pass


class ResourceError(QOIError, MemoryError):
    """Storage for the decoded pixels could not be allocated."""
