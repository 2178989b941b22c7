"""Enumeration of every word of Recursian with a given number of syllables."""

from __future__ import annotations

from itertools import product

from recursia.textutils import RecursiaError

VOWELS = "eiu"
CONSONANTS = "bknrs'"

_CONSONANT_VOWEL = [c + v for c in CONSONANTS for v in VOWELS]


def all_recursian_words(num_syllables: int) -> list[str]:
    """Return every Recursian word with exactly num_syllables syllables.

    A syllable is a vowel or a consonant followed by a vowel; only the first
    syllable of a word may be a bare vowel. Words beginning with a vowel come
    first, then words beginning with a consonant.

    Raises RecursiaError if num_syllables is negative.
    """
    if num_syllables < 0:
        raise RecursiaError("numSyllables is negative")
    if num_syllables == 0:
        return [""]

    tails = ["".join(parts) for parts in product(_CONSONANT_VOWEL, repeat=num_syllables - 1)]
    heads = list(VOWELS) + _CONSONANT_VOWEL
    return [head + tail for head in heads for tail in tails]