"""
Boundary exceptions.

Translation itself never fails; these cover reading sources, writing
output and API payload limits.
"""

from typing import Any, Dict, Optional


class BerustError(Exception):
    """Base exception for berust errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class SourceNotFoundError(BerustError):
    """Raised when the source file cannot be opened"""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=reason,
            details={"path": path}
        )


class OutputWriteError(BerustError):
    """Raised when the output file cannot be created or written"""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=reason,
            details={"path": path}
        )


class SourceTooLargeError(BerustError):
    """Raised when a submitted source exceeds the configured size limit"""

    def __init__(self, size: int, limit: int):
        super().__init__(
            message=f"Source is {size} bytes, limit is {limit} bytes",
            details={"size": size, "limit": limit}
        )
