"""Base Repository: Abstract interface for data access.

Repository Pattern provides:
- Abstraction over data sources (files, databases, APIs)
- Caching for performance
- Consistent error handling
- Easy testing via dependency injection
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, Sequence, TypeVar

import polars as pl

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract base class for repositories.

    All repositories should:
    1. Provide a get_all() method
    2. Handle caching internally
    3. Raise RepositoryError on failures
    """

    @abstractmethod
    def get_all(self) -> T:
        """Retrieve all data from the repository.

        Returns:
            The complete dataset

        Raises:
            RepositoryError: If data cannot be loaded
        """

    @abstractmethod
    def clear_cache(self) -> None:
        """Clear any cached data."""


class RepositoryError(Exception):
    """Exception raised when repository operations fail."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(f"{message}" + (f" (path: {path})" if path else ""))


def read_csv_table(path: Path, required: Sequence[str], label: str) -> pl.DataFrame:
    """Read a CSV file with every column as text.

    Typing is left to the caller so that bad cells surface as a
    RepositoryError instead of a silently inferred dtype.

    Args:
        path: CSV file to read
        required: Columns that must be present
        label: Human-readable name for error messages

    Raises:
        RepositoryError: If the file is missing, unreadable or lacks columns
    """
    if not path.exists():
        raise RepositoryError(f"{label} file not found", str(path))

    try:
        df = pl.read_csv(path, infer_schema_length=0)
    except (OSError, pl.exceptions.PolarsError) as e:
        raise RepositoryError(f"Failed to read {label.lower()}: {e}", str(path))

    missing = [c for c in required if c not in df.columns]
    if missing:
        raise RepositoryError(
            f"{label} file missing columns: {', '.join(missing)}", str(path)
        )
    return df
