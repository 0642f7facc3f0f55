"""Character-stream transformations used to format Latin spellings.

Each function takes an iterable of single characters and returns an
iterator of characters, so they can be chained freely.
"""

from collections.abc import Iterable, Iterator

from ordo import litterae


def all_caps(chars: Iterable[str]) -> Iterator[str]:
    """Uppercase every letter, long vowels included."""
    return map(litterae.to_capital, chars)


def ending_hyphens(chars: Iterable[str]) -> Iterator[str]:
    """Replace a leading '|' (a bare word ending) with '-'."""
    it = iter(chars)
    first = next(it, None)
    if first is None:
        return
    yield "-" if first == "|" else first
    yield from it


def long_vowel_ticks(chars: Iterable[str]) -> Iterator[str]:
    """Write each long vowel as its plain vowel followed by "'"."""
    for ch in chars:
        if litterae.is_long_vowel(ch):
            yield litterae.remove_macron(ch)
            yield "'"
        else:
            yield ch


def _drop_inner(chars: Iterable[str], mark: str) -> Iterator[str]:
    """Omit `mark` wherever it is neither the first nor the last character."""
    it = iter(chars)
    ch = next(it, None)
    is_first = True
    while ch is not None:
        following = next(it, None)
        if not is_first and following is not None and ch == mark:
            ch, following = following, next(it, None)
        yield ch
        is_first = False
        ch = following


def no_compound_words(chars: Iterable[str]) -> Iterator[str]:
    """Omit hyphens that join the parts of a compound word."""
    return _drop_inner(chars, "-")


def no_macrons(chars: Iterable[str]) -> Iterator[str]:
    """Replace long vowels with their plain forms."""
    return map(litterae.remove_macron, chars)


def no_stem_ending_separators(chars: Iterable[str]) -> Iterator[str]:
    """Omit '|' separators between stem and ending."""
    return _drop_inner(chars, "|")


_SEMIVOWEL_I = {"J": "I", "j": "i"}


def semivowel_i(chars: Iterable[str]) -> Iterator[str]:
    """Write semivowel J as I."""
    return (_SEMIVOWEL_I.get(ch, ch) for ch in chars)


def stem_hyphens(chars: Iterable[str]) -> Iterator[str]:
    """Replace a trailing '|' (a bare word stem) with '-'."""
    it = iter(chars)
    ch = next(it, None)
    while ch is not None:
        following = next(it, None)
        if following is None and ch == "|":
            ch = "-"
        yield ch
        ch = following


_VOWEL_V = {
    "U": "V",
    "u": "v",
    litterae.CAPITAL_LONG_U: "V",
    litterae.SMALL_LONG_U: "v",
}


def vowel_v(chars: Iterable[str]) -> Iterator[str]:
    """Write vowel U, long or short, as V."""
    return (_VOWEL_V.get(ch, ch) for ch in chars)