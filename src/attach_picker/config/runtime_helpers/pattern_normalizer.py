"""Normalization of process-name pattern lists."""

from __future__ import annotations

from typing import Iterable


class PatternNormalizer:
    """Turns comma-separated or sequence pattern values into ordered, unique tuples."""

    @staticmethod
    def split(raw_value: str, separator: str = ",") -> list[str]:
        """Split *raw_value* on *separator*; an empty separator keeps it whole."""
        parts = raw_value.split(separator) if separator else [raw_value]
        return PatternNormalizer.clean(parts)

    @staticmethod
    def clean(parts: Iterable[str]) -> list[str]:
        stripped = (part.strip() for part in parts)
        return [part for part in stripped if part]

    @staticmethod
    def unique(items: Iterable[str]) -> tuple[str, ...]:
        """First occurrence wins."""
        return tuple(dict.fromkeys(items))

    @classmethod
    def normalize(cls, parts: Iterable[str]) -> tuple[str, ...]:
        return cls.unique(cls.clean(parts))
