"""Fuzzy suggestions for mistyped flag and command names."""

from __future__ import annotations

import json
import math
from typing import Iterable

SUGGEST_DID_YOU_MEAN_TEMPLATE = "Did you mean {}?"

# Names of the built-in help flag and help command.
HELP_FLAG_NAMES: tuple[str, ...] = ("help", "h")
HELP_COMMAND_NAMES: tuple[str, ...] = ("help", "h")

_BOOST_THRESHOLD = 0.7
_PREFIX_SIZE = 4


def jaro_distance(a: str, b: str) -> float:
    """Return the Jaro similarity of two strings, between 0 and 1."""
    first = a.encode("utf-8")
    second = b.encode("utf-8")
    if not first and not second:
        return 1.0
    if not first or not second:
        return 0.0

    len_a = len(first)
    len_b = len(second)
    matched_a = [False] * len_a
    matched_b = [False] * len_b
    max_distance = int(max(0, math.floor(max(len_a, len_b) / 2.0) - 1))

    matches = 0
    for i, char in enumerate(first):
        start = max(0, i - max_distance)
        end = min(len_b - 1, i + max_distance)
        for j in range(start, end + 1):
            if matched_b[j]:
                continue
            if char == second[j]:
                matched_a[i] = True
                matched_b[j] = True
                matches += 1
                break
    if matches == 0:
        return 0.0

    matched_second = (c for c, hit in zip(second, matched_b) if hit)
    matched_first = (c for c, hit in zip(first, matched_a) if hit)
    transpositions = sum(x != y for x, y in zip(matched_first, matched_second)) / 2

    return (
        matches / len_a + matches / len_b + (matches - transpositions) / matches
    ) / 3.0


def jaro_winkler(a: str, b: str) -> float:
    """Return the Jaro-Winkler similarity, boosting a shared prefix."""
    distance = jaro_distance(a, b)
    if distance <= _BOOST_THRESHOLD:
        return distance

    first = a.encode("utf-8")
    second = b.encode("utf-8")
    prefix = min(len(first), _PREFIX_SIZE, len(second))

    prefix_match = 0
    for x, y in zip(first[:prefix], second[:prefix]):
        if x != y:
            break
        prefix_match += 1
    return distance + 0.1 * prefix_match * (1.0 - distance)


def _best_match(names: Iterable[str], provided: str) -> str:
    best = 0.0
    suggestion = ""
    for name in names:
        score = jaro_winkler(name, provided)
        if score > best:
            best = score
            suggestion = name
    return suggestion


def suggest_flag(flags, provided: str, hide_help: bool) -> str:
    """Suggest the flag name closest to ``provided``, with its dashes.

    Each flag must offer a ``names()`` method. Unless ``hide_help`` is set,
    the help flag's names are candidates too. Returns an empty string when
    nothing is similar at all.
    """

    def candidates():
        for flag in flags:
            yield from flag.names()
            if not hide_help and HELP_FLAG_NAMES:
                yield from HELP_FLAG_NAMES

    suggestion = _best_match(candidates(), provided)
    if len(suggestion) == 1:
        return "-" + suggestion
    if len(suggestion) > 1:
        return "--" + suggestion
    return suggestion


def suggest_command(commands, provided: str) -> str:
    """Suggest the command name closest to ``provided``.

    Each command must offer a ``names()`` method. The help command's names
    are always candidates alongside each command.
    """

    def candidates():
        for command in commands:
            yield from command.names()
            yield from HELP_COMMAND_NAMES

    return _best_match(candidates(), provided)


def did_you_mean(suggestion: str) -> str:
    """Format a suggestion as a "Did you mean ...?" hint."""
    return SUGGEST_DID_YOU_MEAN_TEMPLATE.format(json.dumps(suggestion, ensure_ascii=False))