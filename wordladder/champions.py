"""Leaderboard: the top players and their statistics."""

from __future__ import annotations

import math
import os
from pathlib import Path

from wordladder.user import DEFAULT_DATA_DIR, User

PODIUM_SIZE = 3
EMPTY_PLACE = ("N/A", 0)


def top_three(data_dir: str | os.PathLike[str] = DEFAULT_DATA_DIR) -> list[User]:
    """The three users with most wins, ties broken by higher win/loss ratio."""
    directory = Path(data_dir)
    try:
        entries = sorted(directory.iterdir())
        users = [User(entry.stem, directory) for entry in entries if entry.is_file()]
    except OSError:
        return []
    users.sort(key=lambda user: (-user.wins, -user.win_loss_ratio))
    return users[:PODIUM_SIZE]


def podium(users: list[User]) -> list[tuple[str, int]]:
    """Names and wins in podium order: third, first, second, padded with ``N/A``."""
    places = [(user.username, user.wins) for user in users[:PODIUM_SIZE]]
    places += [EMPTY_PLACE] * (PODIUM_SIZE - len(places))
    first, second, third = places
    return [third, first, second]


def _format_ratio(ratio: float) -> str:
    if math.isinf(ratio):
        return "inf"
    return f"{ratio:g}"


def format_stats(user: User) -> list[str]:
    """Lines describing a user's record."""
    return [
        f"Displaying stats for user {user.username}",
        f"Total wins: {user.wins}",
        f"Total loses: {user.losses}",
        f"Win/Lose ratio: {_format_ratio(user.win_loss_ratio)}",
        f"Last game: {user.last_game}",
    ]