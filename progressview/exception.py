# progressview/exception.py

# SECTION: MODULE DOCSTRING
"""Custom exceptions raised when input files cannot be turned into models."""

# SECTION: IMPORTS
from pathlib import Path


# KLASS: ProgressViewError
class ProgressViewError(Exception):
    """Base class for ProgressView errors."""


# KLASS: DataLoadError
class DataLoadError(ProgressViewError):
    """A user-state or catalog file is missing, unreadable, or invalid."""

    # FUNC: __init__
    def __init__(self, message: str, path: Path | str | None = None, model_name: str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.model_name = model_name

    # FUNC: __str__
    def __str__(self) -> str:
        details: list[str] = []
        if self.model_name:
            details.append(f"Model={self.model_name}")
        if self.path is not None:
            details.append(f"Path='{self.path}'")

        base_msg = super().__str__()
        details_str = f" ({', '.join(details)})" if details else ""
        return f"DataLoadError: {base_msg}{details_str}"
