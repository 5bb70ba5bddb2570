"""Exception types raised by cmdsplit."""


class CmdsplitError(Exception):
    """Base exception for cmdsplit."""


class MisuseError(CmdsplitError):
    """Raised when a cursor-only call is made before any input buffer was supplied."""
