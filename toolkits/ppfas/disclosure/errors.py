"""Error types raised inside the disclosure toolkit."""


class AcquisitionError(RuntimeError):
    """Raised when a disclosure report cannot be downloaded."""


class StructuralParseError(RuntimeError):
    """Raised when a workbook is unreadable or the requested sheet is absent."""
