"""
Deck Parser - Reads the text deck format into Card sequences.

Format (one card per line, comma separated):

    # name, cost, points, footprint
    Sentinel, 1, 1, X X X X X / X X I X X / X I C I X / X X I X X / X X X X X

- Blank lines and lines starting with '#' are ignored
- cost is 1-3, points is at least 1
- footprint rows are separated by '/', tokens by whitespace
- tokens: X (none), I (influence), C (center, exactly one)
- footprints are odd-sized squares, the same size for every card

Every problem is reported with its line number in a single
InvalidConfigurationError.
"""

from __future__ import annotations
from pathlib import Path
import logging

from ..engine_core.card import Card, InfluenceType, footprint_errors, validate_deck
from ..engine_core.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

_TOKENS = {tag.value: tag for tag in InfluenceType}


def parse_footprint(text: str) -> tuple[tuple[InfluenceType, ...], ...]:
    """
    Parse 'X I X / I C I / X I X' into a footprint grid.

    Raises InvalidConfigurationError on unknown tokens or a bad shape.
    """
    rows = []
    for row_text in text.split("/"):
        tokens = row_text.split()
        unknown = [t for t in tokens if t.upper() not in _TOKENS]
        if unknown:
            raise InvalidConfigurationError(
                f"unknown footprint token(s) {', '.join(repr(t) for t in unknown)}"
            )
        rows.append(tuple(_TOKENS[t.upper()] for t in tokens))
    footprint = tuple(rows)
    errors = footprint_errors(footprint)
    if errors:
        raise InvalidConfigurationError(errors)
    return footprint


def parse_card(line: str) -> Card:
    """Parse a single 'name, cost, points, footprint' record."""
    fields = [f.strip() for f in line.split(",")]
    if len(fields) != 4:
        raise InvalidConfigurationError(
            f"expected 4 fields (name, cost, points, footprint), got {len(fields)}"
        )
    name, cost_text, points_text, footprint_text = fields
    if not name:
        raise InvalidConfigurationError("card name is empty")
    try:
        cost = int(cost_text)
        points = int(points_text)
    except ValueError:
        raise InvalidConfigurationError(
            f"cost and points must be integers, got {cost_text!r} and {points_text!r}"
        ) from None
    if not 1 <= cost <= 3:
        raise InvalidConfigurationError(f"cost must be 1-3, got {cost}")
    if points < 1:
        raise InvalidConfigurationError(f"points must be >= 1, got {points}")
    return Card(name=name, cost=cost, points=points, footprint=parse_footprint(footprint_text))


def parse_deck(text: str, label: str = "deck") -> list[Card]:
    """
    Parse a whole deck file's text, preserving card order.

    Raises InvalidConfigurationError listing every bad line, duplicate
    name and footprint size mismatch.
    """
    cards: list[Card] = []
    errors: list[str] = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            cards.append(parse_card(line))
        except InvalidConfigurationError as e:
            errors.extend(f"{label} line {line_no}: {msg}" for msg in e.errors)

    if errors:
        raise InvalidConfigurationError(errors)

    validate_deck(cards, label=label)
    logger.debug("Parsed %d card(s) from %s", len(cards), label)
    return cards


def load_deck(path: str | Path) -> list[Card]:
    """Read and parse a UTF-8 deck file."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    return parse_deck(text, label=path.name)
