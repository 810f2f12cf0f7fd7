"""Predicates used by the candidate filter."""

from .predicates import is_blacklisted, is_engine_process, matches_name_hint

__all__ = ["is_blacklisted", "is_engine_process", "matches_name_hint"]
