import pytest

from letterfreq.cli import elect_language, estimate_language, main
from letterfreq.frequencies import Language, closest_language


def test_too_few_arguments_fail():
    assert main([]) == 84
    assert main(["only text"]) == 84


def test_text_without_letters_fails(capsys):
    assert main(["123 !?", "a"]) == 84
    assert capsys.readouterr().err


def test_single_letter_text(capsys):
    assert main(["aaaa", "a"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"a:{len('aaaa')} (100.00%)", "=> Spanish"]


def test_one_line_per_letter_plus_verdict(capsys):
    letters = ["l", "z", "e"]
    assert main(["Hello World", *letters]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(letters) + 1
    assert [line[0] for line in lines[:-1]] == letters
    assert lines[-1].startswith("=> ")


def test_estimate_language_matches_closest_language():
    assert estimate_language("e", 20.0) is closest_language("e", 20.0)


@pytest.mark.parametrize("letter", ["1", "", "#"])
def test_estimate_language_non_letter_is_none(letter):
    assert estimate_language(letter, 5.0) is None


def test_elect_language_without_votes_is_english():
    assert elect_language([]) is Language.ENGLISH
    assert elect_language([None, None]) is Language.ENGLISH


def test_elect_language_majority_wins():
    votes = [Language.FRENCH, Language.GERMAN, Language.GERMAN, None]
    assert elect_language(votes) is Language.GERMAN


def test_elect_language_tie_goes_to_earlier_language():
    votes = [Language.SPANISH, Language.FRENCH, Language.SPANISH, Language.FRENCH]
    assert elect_language(votes) is Language.FRENCH