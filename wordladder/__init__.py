"""Word ladder puzzle: word graph, shortest ladders, game sessions, player records and a terminal front end."""

__version__ = "0.1.0"