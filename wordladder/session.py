"""State of one game in which the player walks a ladder to a target word."""

from __future__ import annotations

from datetime import date

from wordladder.dictionary import Dictionary
from wordladder.gamedata import GameData


class InvalidMove(ValueError):
    """A submitted word or requested hint is not allowed."""


class GameSession:
    """A game from ``source`` to ``target`` counting moves and hints."""

    def __init__(
        self,
        dictionary: Dictionary,
        source: str | None = None,
        target: str | None = None,
    ) -> None:
        self.dictionary = dictionary
        if source is None or target is None:
            random_source, random_target = dictionary.random_pair()
            source = random_source if source is None else source
            target = random_target if target is None else target
        self.source = source
        self.target = target
        self.words: list[str] = [source]
        self.moves = 0
        self.hints = 0
        self.won = False

    @property
    def current_word(self) -> str:
        """The last word played."""
        return self.words[-1]

    def submit(self, word: str) -> bool:
        """Play a word one letter away from the current one; return True on a win."""
        if self.won:
            raise InvalidMove("The game is already won")
        word = word.strip()
        if not word:
            raise InvalidMove("You must enter a valid word")
        try:
            valid_moves = self.dictionary.graph.neighbours(self.current_word)
        except ValueError as exc:
            raise InvalidMove("This is not a valid move") from exc
        if word not in valid_moves:
            raise InvalidMove("This is not a valid move")
        self.moves += 1
        self.words.append(word)
        if word == self.target:
            self.won = True
        return self.won

    def hint(self) -> str:
        """Suggest the next word on a shortest ladder to the target."""
        if self.won:
            raise InvalidMove("The game is already won")
        self.hints += 1
        _, prev = self.dictionary.graph.distances(self.current_word)
        word = self.target
        if word not in prev:
            raise InvalidMove("No hint is available")
        while prev[word] != self.current_word:
            word = prev[word]
        return word

    def result(self, today: date | None = None) -> GameData:
        """The game's record, dated ``today`` or the current date."""
        return GameData(today or date.today(), self.won, self.moves, self.hints)