"""Data source capability.

Every pipeline stage satisfies this two-operation interface, which is
what lets decorators stack around each other in any order.
"""

from __future__ import annotations

from typing import Protocol

from core.types import Value


class DataSource(Protocol):
    """Readable and writable single-value source."""

    def write(self, value: Value) -> None:
        """Persist or transform a value."""

    def read(self) -> Value:
        """Return the stored value, reversing any transforms.

        Raises:
            NotFoundError: If nothing was written for this source's key.
        """
