# letterfreq

letterfreq counts how often chosen letters appear in a text. For each letter it
shows that letter's share of all the letters in the text. It then guesses
whether the text is English, French, German or Spanish.

## Installation

```
pip install .
```

## Usage

Pass the text first and then one or more letters:

```
letterfreq "The quick brown fox jumps over the lazy dog" a b
```

The command prints one line per letter. Each line gives how many times the
letter occurs, ignoring case, and its percentage of all the ASCII letters in the
text. The last line gives the estimated language:

```
a:1 (2.85%)
b:1 (2.85%)
=> Spanish
```

Only the first character of each letter argument is used. The percentage is
truncated to hundredths, and the hundredths are written without zero padding,
so 5.05 is shown as `5.5`.

Each letter from `a` to `z` votes for one language. The vote goes to the
language whose reference frequency matches the letter's frequency, by the
walk described under `closest_language`. The language with the most votes
wins, and a tie goes to the earliest of English, French, German and Spanish.
An argument that is not an ASCII letter is still reported, with a count of 0,
but it does not vote.

The command exits with status 84 in two cases, and prints a message on
standard error in each:

- it gets fewer than two arguments;
- the text contains no letters.

It exits with status 0 otherwise.

You can also start it with `python -m letterfreq.cli`.

## Library use

```python
from letterfreq.frequencies import count_occurrences, frequency, closest_language
from letterfreq.formatting import format_result

text = "Hello World"
occurrences = count_occurrences(text, "l")
freq = frequency(text, occurrences)
print(format_result("l", occurrences, freq))   # l:3 (30.00%)
print(closest_language("a", 8.0).label)
```

- `letterfreq.frequencies`
  - `Language` is an enum with the members `ENGLISH`, `FRENCH`, `GERMAN` and `SPANISH`, each with a `label` property.
  - `REFERENCE_FREQUENCIES` is the table of reference frequencies.
  - `count_occurrences` and `count_letters` count letters in a text.
  - `frequency` gives a percentage, and raises `ValueError` for a text with no letters.
  - `closest_language` returns a `Language` for any letter from `a` to `z`, and raises `ValueError` for anything else. It works from the signed differences between the frequency and each language's reference value. Only the first negative difference is turned into its magnitude. It then walks the differences in language order and moves to the next candidate each time the current one is beaten.
- `letterfreq.formatting`
  - `format_frequency` renders a percentage between 0 and 100, and raises `ValueError` outside that range.
  - `format_result` renders one output line.
- `letterfreq.cli`
  - `estimate_language` returns the vote for one letter, or `None` for a character that is not a letter.
  - `elect_language` picks the winner from a sequence of votes.
  - `main` runs the command.

## Limitations

The language guess comes from a crude per-letter vote, not from a statistical
model. Only the four languages above are known. Only ASCII letters are counted,
so accented letters are ignored.

## Running the tests

```
pip install ".[test]"
pytest
```