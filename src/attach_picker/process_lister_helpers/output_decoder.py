"""Decode helper stdout from the console code page."""

from __future__ import annotations

import codecs

from ..exceptions import HelperExecutionError


def decode_helper_output(raw: bytes, encoding: str) -> str:
    """Strictly decode *raw*; the helper writes legacy console text, not UTF-8."""
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise HelperExecutionError.unknown_encoding(encoding) from exc

    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise HelperExecutionError.undecodable(encoding, str(exc)) from exc
