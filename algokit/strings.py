"""Substring search by rolling hash and by direct comparison."""

from __future__ import annotations

_PRIME = 13
_BASE = 256


def rabin_karp(text: str, pattern: str) -> list[int]:
    """Start indices of every occurrence of pattern in text, via a rolling hash.

    An empty pattern, or one longer than the text, gives no matches.
    """
    text_length, pattern_length = len(text), len(pattern)
    if pattern_length == 0 or pattern_length > text_length:
        return []

    high = pow(_BASE, pattern_length - 1, _PRIME)
    pattern_hash = window_hash = 0
    for pattern_char, text_char in zip(pattern, text):
        pattern_hash = (_BASE * pattern_hash + ord(pattern_char)) % _PRIME
        window_hash = (_BASE * window_hash + ord(text_char)) % _PRIME

    last_start = text_length - pattern_length
    matches: list[int] = []
    for start in range(last_start + 1):
        if pattern_hash == window_hash and text[start : start + pattern_length] == pattern:
            matches.append(start)
        if start < last_start:
            window_hash = (
                _BASE * (window_hash - ord(text[start]) * high)
                + ord(text[start + pattern_length])
            ) % _PRIME
    return matches


def brute_force_match(text: str, pattern: str) -> list[int]:
    """Start indices of every occurrence of pattern in text, checking each position.

    An empty pattern matches at every index from 0 to len(text).
    """
    return [
        start
        for start in range(len(text) - len(pattern) + 1)
        if text.startswith(pattern, start)
    ]