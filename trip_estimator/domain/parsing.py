"""Validated parsing of user-typed values.

Each parser returns a ``ParseResult`` instead of raising, so the caller
decides whether to re-prompt or abort.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_int(text: str) -> ParseResult[int]:
    try:
        return ParseResult(value=int(text.strip()))
    except ValueError:
        return ParseResult(error="Please enter a valid number.")


def parse_non_negative(text: str) -> ParseResult[float]:
    try:
        value = float(text.strip())
    except ValueError:
        return ParseResult(error="Invalid number. Try again.")
    if not math.isfinite(value):
        return ParseResult(error="Invalid number. Try again.")
    if value < 0:
        return ParseResult(error="Value cannot be negative. Try again.")
    return ParseResult(value=value)


def parse_yes(text: str) -> bool:
    """Only ``y`` (any case) counts as yes."""
    return text.strip().lower() == "y"
