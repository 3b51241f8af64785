"""A player's game history, stored as one CSV file per user."""

from __future__ import annotations

import math
import os
from pathlib import Path

from wordladder.gamedata import GameData, read_games

DEFAULT_DATA_DIR = Path("gameData")
UNKNOWN_GAME = "Unknown"


def _user_file(data_dir: Path, username: str) -> Path:
    return data_dir / f"{username}.csv"


class User:
    """A player and the games recorded for them."""

    def __init__(
        self, username: str, data_dir: str | os.PathLike[str] = DEFAULT_DATA_DIR
    ) -> None:
        self.data_dir = Path(data_dir)
        self.username = username
        self.games: list[GameData] = []
        self.load(username)

    def load(self, username: str | None = None) -> None:
        """Read the user's games, creating an empty record file if none exists."""
        if username is not None:
            self.username = username
        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = _user_file(self.data_dir, self.username)
        try:
            with path.open(encoding="utf-8") as handle:
                self.games = list(read_games(handle))
        except FileNotFoundError:
            path.touch()
            self.games = []

    @property
    def wins(self) -> int:
        return sum(game.won for game in self.games)

    @property
    def losses(self) -> int:
        return sum(not game.won for game in self.games)

    @property
    def win_loss_ratio(self) -> float:
        """Wins divided by losses; infinite when there are no losses."""
        losses = self.losses
        if losses == 0:
            return math.inf
        return self.wins / losses

    @property
    def last_game(self) -> str:
        """Date of the latest game as dd/mm/yyyy, or ``Unknown``."""
        if not self.games:
            return UNKNOWN_GAME
        return self.games[-1].timestamp.strftime("%d/%m/%Y")

    def save_game(self, game: GameData) -> None:
        """Append a game to the user's record file and history."""
        if not self.username:
            raise ValueError("Cannot save game of non-loaded user")
        path = _user_file(self.data_dir, self.username)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(game.to_line() + "\n")
        self.games.append(game)


def is_username_unknown(
    username: str, data_dir: str | os.PathLike[str] = DEFAULT_DATA_DIR
) -> bool:
    """True when no record file exists for the user."""
    return not _user_file(Path(data_dir), username).exists()