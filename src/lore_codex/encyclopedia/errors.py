"""Exceptions raised by the encyclopedia core."""

from __future__ import annotations


class EncyclopediaError(Exception):
    """Base class for encyclopedia errors."""


class RetrievalError(EncyclopediaError):
    """A resource address could not be obtained from the content store.

    Attributes:
        address: Logical address that failed (e.g. ``"characters/aldric"``).
    """

    def __init__(self, address: str, reason: str = "not found or unavailable"):
        self.address = address
        self.reason = reason
        super().__init__(f"Unable to retrieve '{address}': {reason}")
