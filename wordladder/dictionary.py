"""Word list that links words differing in exactly one letter."""

from __future__ import annotations

import os
import random
from collections.abc import Iterable

from wordladder.graph import Graph

MAX_WORD_LENGTH = 100
WILDCARD = "*"


class Dictionary:
    """Words grouped by length, with a graph of one-letter changes."""

    def __init__(self) -> None:
        self._graph: Graph[str] = Graph()
        self._buckets: dict[int, list[str]] = {}
        self._masks: dict[str, list[str]] = {}

    def load(self, path: str | os.PathLike[str]) -> int:
        """Add every line of a text file as a word; return how many were new."""
        with open(path, encoding="utf-8") as handle:
            return self.add_words(line.removesuffix("\n") for line in handle)

    def add_words(self, words: Iterable[str]) -> int:
        """Add words, linking each to existing words one letter away.

        Words of ``MAX_WORD_LENGTH`` characters or more and repeated words are
        ignored. Returns the number of words added.
        """
        added = 0
        for word in words:
            if len(word) >= MAX_WORD_LENGTH or not self._graph.add_node(word):
                continue
            added += 1
            self._buckets.setdefault(len(word), []).append(word)
            for i in range(len(word)):
                mask = word[:i] + WILDCARD + word[i + 1:]
                matches = self._masks.setdefault(mask, [])
                for other in matches:
                    self._graph.add_edge(word, other)
                matches.append(word)
        return added

    @property
    def graph(self) -> Graph[str]:
        """The graph of words joined by single-letter changes."""
        return self._graph

    def random_pair(self, rng: random.Random | None = None) -> tuple[str, str]:
        """Pick a word length at random, then two words of that length."""
        if not self._buckets:
            raise ValueError("The dictionary holds no words")
        rng = rng if rng is not None else random.SystemRandom()
        bucket = self._buckets[rng.choice(sorted(self._buckets))]
        return rng.choice(bucket), rng.choice(bucket)