"""Word puzzles: keypad combinations, wildcard matching and board search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import product

KEYPAD = {
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
    "0": " ",
    "*": "*",
    "#": "#",
}


def letter_combinations(digits: str) -> list[str]:
    """All strings the keypad digits can spell, in keypad order.

    Digits with no letters, and unknown characters, leave no combinations.
    """
    if not digits:
        return []
    choices = (KEYPAD.get(digit, "") for digit in digits)
    return ["".join(letters) for letters in product(*choices)]


def is_match(text: str, pattern: str) -> bool:
    """Match ``text`` against ``pattern`` where ``?`` is any character and
    ``*`` is any sequence of characters."""
    i = j = 0
    star = -1
    star_match = -1
    while i < len(text):
        if j < len(pattern) and pattern[j] in (text[i], "?"):
            i += 1
            j += 1
        elif j < len(pattern) and pattern[j] == "*":
            star = j
            star_match = i
            j += 1
        elif star != -1:
            j = star + 1
            star_match += 1
            i = star_match
        else:
            return False
    while j < len(pattern) and pattern[j] == "*":
        j += 1
    return j == len(pattern)


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    word: str | None = None


def _build_trie(words: Iterable[str]) -> _TrieNode:
    root = _TrieNode()
    for word in words:
        node = root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.word = word
    return root


def find_words(
    board: Sequence[Sequence[str]], dictionary: Iterable[str]
) -> list[str]:
    """Find dictionary words spelled by adjacent, non-repeating board cells.

    Starting cells are taken in row-major order. A word is reported at most
    once per starting cell, so it can appear again when it can be spelled
    from another starting cell.
    """
    grid = [list(row) for row in board]
    if not grid or not grid[0]:
        return []
    height, width = len(grid), len(grid[0])
    root = _build_trie(dictionary)
    result: list[str] = []

    def search(
        node: _TrieNode, i: int, j: int, visited: set[tuple[int, int]], reported: set[str]
    ) -> None:
        if (i, j) in visited:
            return
        child = node.children.get(grid[i][j])
        if child is None:
            return
        if child.word is not None and child.word not in reported:
            reported.add(child.word)
            result.append(child.word)
        visited.add((i, j))
        for ni, nj in ((i - 1, j), (i, j - 1), (i + 1, j), (i, j + 1)):
            if 0 <= ni < height and 0 <= nj < width:
                search(child, ni, nj, visited, reported)
        visited.discard((i, j))

    for i in range(height):
        for j in range(width):
            search(root, i, j, set(), set())
    return result