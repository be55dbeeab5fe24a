# parcel_tracker/exceptions.py
"""
Errors raised by the parcel store.

Storage failures are not wrapped: whatever SQLAlchemy raises reaches the
caller as-is.
"""

from typing import Any


class ParcelStoreError(Exception):
    """Base class for parcel store errors."""


class ParcelNotFoundError(ParcelStoreError, LookupError):
    """Raised when no parcel has the requested number."""

    def __init__(self, number: Any):
        self.number = number
        super().__init__(f"parcel with number {number} not found")
