import pytest

from recursia.textutils import RecursiaError
from recursia.words import CONSONANTS, VOWELS, all_recursian_words


def test_zero_syllables():
    assert all_recursian_words(0) == [""]


@pytest.mark.parametrize("count", [-1, -137])
def test_negative_raises(count):
    with pytest.raises(RecursiaError):
        all_recursian_words(count)


def test_length_one():
    words = all_recursian_words(1)
    assert all(len(word) in (1, 2) for word in words)
    assert len(words) == len(set(words))
    expected = {
        "'e", "'i", "'u", "be", "bi", "bu", "e", "i",
        "ke", "ki", "ku", "ne", "ni", "nu", "re", "ri",
        "ru", "se", "si", "su", "u",
    }
    assert set(words) == expected


@pytest.mark.parametrize(
    "syllables, count",
    [(0, 1), (1, 21), (2, 378), (3, 6804), (4, 122472)],
)
def test_quantities(syllables, count):
    assert len(all_recursian_words(syllables)) == count


def test_only_consonants_and_vowels():
    words = all_recursian_words(4)
    assert len(words) > 0
    allowed = set(CONSONANTS) | set(VOWELS)
    assert all(set(word) <= allowed for word in words)


def test_structure_alternates_and_ends_in_vowel():
    for word in all_recursian_words(3):
        assert word[-1] in VOWELS
        assert word.count("e") + word.count("i") + word.count("u") == 3
        for a, b in zip(word, word[1:]):
            assert not (a in CONSONANTS and b in CONSONANTS)
            assert not (a in VOWELS and b in VOWELS)


def test_no_duplicates_for_three_syllables():
    words = all_recursian_words(3)
    assert len(words) == len(set(words))


def test_vowel_initial_words_come_first():
    words = all_recursian_words(2)
    first_consonant = next(i for i, w in enumerate(words) if w[0] in CONSONANTS)
    assert all(w[0] in VOWELS for w in words[:first_consonant])
    assert all(w[0] in CONSONANTS for w in words[first_consonant:])
    assert all_recursian_words(1)[:3] == ["e", "i", "u"]