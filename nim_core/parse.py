from __future__ import annotations

from typing import List, Optional

from .board import MAX_ROW, Move, Row


class ConfigError(ValueError):
    """A pile-size list from the command line or a request could not be used."""


def parse_rows(text: str) -> List[Row]:
    """Parses a comma-separated list of pile sizes such as '1,3,5,7'."""
    parts = [p.strip() for p in text.split(',')]
    if not text.strip() or not any(parts):
        raise ConfigError(f"no rows given in {text!r}")
    rows: List[Row] = []
    for part in parts:
        try:
            size = int(part)
        except ValueError:
            raise ConfigError(f"invalid row size {part!r} in {text!r}") from None
        if size <= 0 or size > MAX_ROW:
            raise ConfigError(f"row size {part!r} in {text!r} must be between 1 and {MAX_ROW}")
        rows.append(size)
    return rows


def parse_move(text: str) -> Optional[Move]:
    """Parses 'row,count'. Returns None on anything else so the caller can re-prompt."""
    fields = [t.strip() for t in text.strip().split(',')]
    if len(fields) != 2:
        return None
    try:
        return (int(fields[0]), int(fields[1]))
    except ValueError:
        return None
