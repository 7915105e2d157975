"""Compression error types."""


class CompressionError(Exception):
    """Base class for errors raised by the compressor."""


class UnknownOperationError(CompressionError):
    """Raised when a selector operation is requested by an unrecognized name."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Unknown selector operation: {operation!r}")


class UnknownOptionError(CompressionError):
    """Raised when an option or mode name is not recognized."""

    def __init__(self, name: str, kind: str = "option"):
        self.name = name
        self.kind = kind
        super().__init__(f"Unknown {kind}: {name!r}")
