"""
Exceptions raised by the importer and its decoding collaborators.

File system failures are not wrapped: reading or writing a file raises the
builtin OSError family and it reaches the host unchanged.
"""

from typing import List, Optional, Tuple


class AssetError(Exception):
    """Base exception for asset conversion errors."""

    def __init__(self, message: str, path: Optional[str] = None, recoverable: bool = False):
        super().__init__(message)
        self.path = path
        self.recoverable = recoverable


class ParseError(AssetError):
    """Exception raised when a source file is not well-formed XML or not an SVG document."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(f"Parse error: {message}", path, recoverable=False)


class RenderError(AssetError):
    """Exception raised when the vector rasterizer fails on a parsed document."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(f"Render error: {message}", path, recoverable=False)


class CodecError(AssetError):
    """Exception raised when pixel data cannot be encoded or decoded."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(f"Codec error: {message}", path, recoverable=False)


class ResourceUnavailableError(AssetError):
    """Exception raised when the host cannot supply the target resource."""

    def __init__(self, name: str):
        super().__init__(f"Resource '{name}' is not available", None, recoverable=True)
        self.name = name


class ImportBatchError(AssetError):
    """Exception raised after a batch import in which some candidates failed."""

    def __init__(self, failures: List[Tuple[str, Exception]]):
        paths = ", ".join(path for path, _ in failures)
        super().__init__(f"{len(failures)} asset(s) failed to import: {paths}", None, recoverable=False)
        self.failures = failures
