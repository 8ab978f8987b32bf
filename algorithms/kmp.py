"""Substring search: brute force and Knuth-Morris-Pratt."""

from __future__ import annotations

import argparse

DEFAULT_TEXT = "abcdabcxabcabcd"
DEFAULT_PATTERN = "abcd"


def _require_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")


def match_string_bf(text: str, pattern: str) -> list[int]:
    """Return the index of the last character of every match, by brute force."""
    _require_pattern(pattern)
    size = len(pattern)
    matched = []
    for start in range(len(text) - size + 1):
        length = 0
        while length < size and text[start + length] == pattern[length]:
            length += 1
        if length == size:
            matched.append(start + size - 1)
    return matched


def prefix_function(pattern: str) -> list[int]:
    """For each prefix, the length of its longest proper border."""
    pi = [0] * len(pattern)
    j = 0
    for i, ch in enumerate(pattern[1:], start=1):
        while j and ch != pattern[j]:
            j = pi[j - 1]
        if ch == pattern[j]:
            j += 1
        pi[i] = j
    return pi


def match_string_kmp(text: str, pattern: str) -> list[int]:
    """Return the index of the last character of every match, in linear time."""
    _require_pattern(pattern)
    pi = prefix_function(pattern)
    matched = []
    j = 0
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = pi[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == len(pattern):
            matched.append(i)
            j = pi[j - 1]
    return matched


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find a pattern in a text.")
    parser.add_argument("text", nargs="?", default=DEFAULT_TEXT)
    parser.add_argument("pattern", nargs="?", default=DEFAULT_PATTERN)
    args = parser.parse_args(argv)
    try:
        kmp = match_string_kmp(args.text, args.pattern)
        bf = match_string_bf(args.text, args.pattern)
    except ValueError as exc:
        parser.error(str(exc))
    print("kmp result:", " ".join(map(str, kmp)))
    print("bf result:", " ".join(map(str, bf)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())