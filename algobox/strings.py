"""Small string puzzles."""

from __future__ import annotations


def _next_letter(char: str) -> str:
    return "a" if char == "z" else chr(ord(char) + 1)


def simplify_string(text: str) -> str:
    """Change letters so that no two neighbouring characters are equal.

    Scanning left to right, a character equal to its predecessor is moved to
    the next letter (``z`` wraps to ``a``), and moved once more if it then
    equals its successor.
    """
    chars = list(text)
    for i in range(1, len(chars)):
        if chars[i] != chars[i - 1]:
            continue
        chars[i] = _next_letter(chars[i])
        if i + 1 < len(chars) and chars[i + 1] == chars[i]:
            chars[i] = _next_letter(chars[i])
    return "".join(chars)


def has_two_substrings(text: str) -> bool:
    """Whether ``text`` holds non-overlapping ``AB`` and ``BA`` substrings."""
    seen_ab = seen_ba = False
    seen_overlap = False
    i = 0
    while i < len(text):
        if text[i : i + 3] in ("ABA", "BAB"):
            if seen_overlap:
                return True
            seen_overlap = True
            i += 2
        elif text[i : i + 2] == "AB" and not seen_ab:
            seen_ab = True
            i += 1
        elif text[i : i + 2] == "BA" and not seen_ba:
            seen_ba = True
            i += 1
        if seen_ab and seen_ba:
            return True
        if (seen_ab or seen_ba) and seen_overlap:
            return True
        i += 1
    return False