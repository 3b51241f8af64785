"""Record of one finished game and its CSV line format."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class GameDataError(ValueError):
    """A line could not be read as a game record."""


def _leading_int(token: str) -> int:
    match = _LEADING_INT.match(token)
    if match is None:
        raise GameDataError(f"Not a number: {token!r}")
    return int(match.group(1))


@dataclass(frozen=True)
class GameData:
    """Outcome of a single game."""

    timestamp: date
    won: bool
    moves: int
    hints: int

    @classmethod
    def parse(cls, line: str) -> GameData:
        """Read a ``date,won,moves,hints`` line."""
        fields = line.removesuffix("\n").split(",")
        if len(fields) < 4:
            raise GameDataError(f"Expected four fields: {line!r}")
        try:
            timestamp = date.fromisoformat(fields[0].strip())
        except ValueError as exc:
            raise GameDataError(f"Invalid date: {fields[0]!r}") from exc
        won = fields[1].lower() in ("1", "true")
        return cls(timestamp, won, _leading_int(fields[2]), _leading_int(fields[3]))

    def to_line(self) -> str:
        """Format as a ``date,won,moves,hints`` line without newline."""
        won = "true" if self.won else "false"
        return f"{self.timestamp.isoformat()},{won},{self.moves},{self.hints}"

    def __str__(self) -> str:
        return self.to_line()


def read_games(lines: Iterable[str]) -> Iterator[GameData]:
    """Yield records from lines, skipping blank ones and stopping at the first bad one."""
    for line in lines:
        if not line.strip():
            continue
        try:
            yield GameData.parse(line)
        except GameDataError:
            return