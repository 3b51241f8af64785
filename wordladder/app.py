"""Interactive terminal front end: analyse ladders, play games, browse the leaderboard."""

from __future__ import annotations

import argparse
import os
import random
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO

from wordladder.champions import format_stats, podium, top_three
from wordladder.dictionary import Dictionary
from wordladder.ladder import LadderError, changed_position, shortest_ladder
from wordladder.session import GameSession, InvalidMove
from wordladder.user import DEFAULT_DATA_DIR, User, is_username_unknown

TITLE = "Word Ladder"
DEFAULT_DICTIONARY = "dictionary.txt"
HINT_COMMAND = ":hint"
QUIT_COMMAND = ":quit"
PODIUM_RANKS = ("3rd", "1st", "2nd")

MENU = (
    f"{TITLE}\n"
    "  analyze  Analyze answers\n"
    "  play     Play!\n"
    "  stats    Look up a player\n"
    "  top      Top players\n"
    "  quit     Leave\n"
)


def _mark_change(previous: str, current: str) -> str:
    index = changed_position(previous, current)
    if index < 0:
        return current
    return f"{current[:index]}[{current[index]}]{current[index + 1:]}"


def _format_ladder(ladder: list[str]) -> str:
    cells = [
        word if position in (0, len(ladder) - 1) else _mark_change(ladder[position - 1], word)
        for position, word in enumerate(ladder)
    ]
    return " -> ".join(cells)


class MainWindow:
    """Menu-driven session over a dictionary and a directory of player records."""

    def __init__(
        self,
        dictionary: Dictionary,
        data_dir: str | os.PathLike[str] = DEFAULT_DATA_DIR,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.dictionary = dictionary
        self.data_dir = Path(data_dir)
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._rng = rng
        self._views: dict[str, Callable[[], None]] = {
            "analyze": self._analysis,
            "play": self._play,
            "stats": self._stats,
            "top": self._champions,
        }

    def _say(self, text: str) -> None:
        self._out.write(text + "\n")

    def _ask(self, prompt: str) -> str | None:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            return None
        return line.strip()

    def run(self) -> None:
        """Show the menu until the user quits or input ends."""
        while True:
            self._out.write(MENU)
            command = self._ask("> ")
            if command is None or command == "quit":
                return
            view = self._views.get(command)
            if view is None:
                self._say(f"Unknown command: {command}")
                continue
            view()

    def _analysis(self) -> None:
        source = self._ask("Start word: ")
        target = self._ask("Target word: ")
        if source is None or target is None:
            return
        try:
            ladder = shortest_ladder(self.dictionary.graph, source, target)
        except LadderError as exc:
            self._say(f"Invalid input: {exc}")
            return
        self._say(f"Total moves: {len(ladder) - 1}")
        self._say(_format_ladder(ladder))

    def _play(self) -> None:
        username = self._ask("Enter username: ")
        if username is None:
            return
        if not username:
            self._say("Invalid input: Username may not be empty")
            return
        source, target = self.dictionary.random_pair(self._rng)
        session = GameSession(self.dictionary, source, target)
        self._say(f"Reach {target}")
        self._say(f"Type a word, {HINT_COMMAND} for a hint or {QUIT_COMMAND} to give up.")
        self._say(session.current_word)
        self._run_game(session)
        User(username, self.data_dir).save_game(session.result())

    def _run_game(self, session: GameSession) -> None:
        while not session.won:
            entry = self._ask("Enter a word: ")
            if entry is None:
                return
            if entry == QUIT_COMMAND:
                answer = self._ask(
                    "You have not yet won the game - quitting now will result in a loss. "
                    "Do you want to proceed? [y/N] "
                )
                if answer is None or answer.lower() in ("y", "yes"):
                    return
                continue
            if entry == HINT_COMMAND:
                try:
                    self._say(f"Hint: {session.hint()}")
                except InvalidMove as exc:
                    self._say(f"Invalid input: {exc}")
                continue
            try:
                won = session.submit(entry)
            except InvalidMove as exc:
                self._say(f"Invalid input: {exc}")
                continue
            self._say(session.current_word)
            if won:
                self._say(
                    f"Congratulations! You won the game in {session.moves} moves "
                    f"using {session.hints} hints"
                )

    def _stats(self) -> None:
        username = self._ask("Enter username: ")
        if username is None:
            return
        if not username:
            self._say("Invalid input: The username field cannot be empty")
            return
        if is_username_unknown(username, self.data_dir):
            self._say("Unknown user: This user has not yet played anything!")
            return
        for line in format_stats(User(username, self.data_dir)):
            self._say(line)

    def _champions(self) -> None:
        self._say("Champions")
        for rank, (name, wins) in zip(PODIUM_RANKS, podium(top_three(self.data_dir))):
            self._say(f"{rank}  {name}  {wins} Wins")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Read the dictionary path and the record directory from the command line."""
    parser = argparse.ArgumentParser(prog="wordladder", description=TITLE)
    parser.add_argument(
        "dictionary",
        nargs="?",
        default=DEFAULT_DICTIONARY,
        help="word list, one word per line",
    )
    parser.add_argument(
        "--data-dir",
        default=str(DEFAULT_DATA_DIR),
        help="directory holding one record file per player",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the dictionary and run the interactive menu."""
    args = parse_args(argv)
    dictionary = Dictionary()
    try:
        dictionary.load(args.dictionary)
    except OSError:
        print(f"Could not open dictionary file: {args.dictionary}", file=sys.stderr)
        return 1
    MainWindow(dictionary, args.data_dir).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())