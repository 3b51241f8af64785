# wordladder

A word ladder puzzle. Starting from one word, reach a target word of the
same length by changing a single letter at a time. Every step must itself
be a word in the dictionary.

The package can:

- build a word graph from a word list, linking words of the same length
  that differ in exactly one position;
- find a shortest ladder between two words;
- run a game from a random pair of words of the same length, checking each
  move and offering hints along a shortest remaining path;
- keep each player's game history as a CSV file and report wins, losses,
  win/loss ratio, the date of the last game and a podium of the top three
  players.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
wordladder [DICTIONARY] [--data-dir DIR]
```

- `DICTIONARY` is a text file with one word per line (default:
  `dictionary.txt` in the current directory). Words of 100 characters or
  more and repeated words are ignored. If the file cannot be opened, the
  command prints an error and exits with status 1.
- `--data-dir` is the directory holding player records (default:
  `gameData`). It is created when needed.

The program shows a menu and reads commands from standard input:

| Command   | What it does                                                          |
|-----------|-----------------------------------------------------------------------|
| `analyze` | Asks for a start and a target word and prints a shortest ladder and its number of moves. Letters changed at each inner step are shown in brackets. |
| `play`    | Asks for a username, picks a random pair of words and starts a game.  |
| `stats`   | Asks for a username and prints that player's wins, losses, win/loss ratio and last game date. |
| `top`     | Prints the podium of the three players with most wins, in the order 3rd, 1st, 2nd. |
| `quit`    | Leaves the program (so does the end of input).                        |

During a game, type a word one letter away from the current word, `:hint`
to be told the next word on a shortest path to the target, or `:quit` to
give up (after a confirmation). Whether the game ends in a win, a
confirmed quit or the end of input, the game is appended to the player's
record; a game that was not won counts as a loss.

Game histories are stored as one CSV file per player, named
`<username>.csv`, one game per line: the date in ISO form (`yyyy-mm-dd`),
whether the game was won (`true`/`false`), the number of moves and the
number of hints used.

## Using it as a library

```python
import random
from datetime import date

from wordladder.dictionary import Dictionary
from wordladder.session import GameSession, InvalidMove

dictionary = Dictionary()
dictionary.add_words(["cat", "cot", "cog", "dog"])

session = GameSession(dictionary, "cat", "dog")
session.submit("cot")
try:
    session.submit("dig")
except InvalidMove:
    pass  # not one letter away from the current word, or not a word
print(session.hint())               # "cog", the next word towards "dog"
print(session.result(date.today()))  # e.g. "2025-06-05,false,1,1"

source, target = dictionary.random_pair(random.Random())
```

The modules:

- `wordladder.graph`: `Graph`, an undirected graph with `add_node`,
  `add_edge`, `neighbours` and breadth-first `distances`.
- `wordladder.dictionary`: `Dictionary`, with `load` (from a file),
  `add_words`, the `graph` property and `random_pair`.
- `wordladder.ladder`: `shortest_ladder` (raises `LadderError`),
  `changed_position`, and layout helpers for drawing a ladder as a snaking
  grid: `grid_position`, `arrow_between` (returns an `Arrow`) and
  `arrowhead`.
- `wordladder.session`: `GameSession` with `submit`, `hint`,
  `current_word` and `result`; invalid moves raise `InvalidMove`.
- `wordladder.gamedata`: `GameData` records with `parse` and `to_line`,
  and `read_games` to read a record file; bad lines raise `GameDataError`.
- `wordladder.user`: `User` (`wins`, `losses`, `win_loss_ratio`,
  `last_game`, `save_game`) and `is_username_unknown`.
- `wordladder.champions`: `top_three`, `podium` and `format_stats`.
- `wordladder.app`: `MainWindow`, the menu-driven terminal session, and
  `main`, the command's entry point.

## What it does not do

The package has a text interface only; there is no graphical window, and
ladders are printed on one line rather than drawn. The geometry helpers in
`wordladder.ladder` compute grid positions and arrows but draw nothing.
No word list comes with the package: the `wordladder` command needs a
dictionary file to be supplied.