"""Command line entry point: letter statistics and a language guess."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Sequence

from letterfreq.formatting import format_result
from letterfreq.frequencies import (
    Language,
    closest_language,
    count_occurrences,
    frequency,
)

EXIT_FAILURE = 84


def estimate_language(letter: str, freq: float) -> Language | None:
    """Guess a language from one letter's frequency, or None for non-letters."""
    try:
        return closest_language(letter, freq)
    except ValueError:
        return None


def elect_language(votes: Iterable[Language | None]) -> Language:
    """Pick the language with most votes; ties go to the earliest language."""
    counts = Counter(vote for vote in votes if vote is not None)
    return max(Language, key=lambda language: counts[language])


def main(argv: Sequence[str] | None = None) -> int:
    """Print letter counts of a text and the language they suggest."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("usage: letterfreq TEXT LETTER [LETTER ...]", file=sys.stderr)
        return EXIT_FAILURE
    text, *letters = args

    votes = []
    try:
        for letter in letters:
            occurrences = count_occurrences(text, letter)
            freq = frequency(text, occurrences)
            print(format_result(letter, occurrences, freq))
            votes.append(estimate_language(letter, freq))
    except ValueError as error:
        print(f"letterfreq: {error}", file=sys.stderr)
        return EXIT_FAILURE

    print(f"=> {elect_language(votes).label}")
    return 0


if __name__ == "__main__":
    sys.exit(main())