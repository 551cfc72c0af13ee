"""A prefix tree over lowercase words."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_word: bool = False


def _check_letter(char: str) -> None:
    if not "a" <= char <= "z":
        raise ValueError(f"unsupported character {char!r}: only 'a'-'z' allowed")


class Trie:
    """Stores words of the letters ``a`` to ``z``."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        node = self._root
        for char in word:
            _check_letter(char)
            node = node.children.setdefault(char, _Node())
        node.is_word = True

    def _walk(self, text: str) -> Optional[_Node]:
        node = self._root
        for char in text:
            _check_letter(char)
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        """Whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None


def _flag(value: bool) -> str:
    return str(value).lower()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Insert a few words and print search and prefix results."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)

    trie = Trie()
    for word in ("apple", "app", "bat"):
        trie.insert(word)
    for word in ("apple", "app", "bat", "bad"):
        print(f"Search '{word}': {_flag(trie.search(word))}")
    for prefix in ("ap", "ba", "cat"):
        print(f"Prefix '{prefix}': {_flag(trie.starts_with(prefix))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())