"""Validating character-stream transformations for reading Latin spellings.

Each function takes an iterable of single characters and returns an
iterator of characters.  Invalid input raises :class:`Irritus` while the
iterator is being consumed, so chained stages stop at the first error.
"""

from collections.abc import Iterable, Iterator

from ordo import litterae


class Irritus(ValueError):
    """Raised when a spelling is not valid."""


def _is_ascii_letter(ch: str) -> bool:
    # W is not a Latin letter.
    return ("A" <= ch <= "Z" or "a" <= ch <= "z") and ch not in "Ww"


_ASCII_MARKS = frozenset("'-|")

_CANONICAL_EXTRAS = frozenset(
    {
        litterae.CAPITAL_LONG_A,
        litterae.SMALL_LONG_A,
        litterae.CAPITAL_LONG_E,
        litterae.SMALL_LONG_E,
        litterae.CAPITAL_LONG_I,
        litterae.SMALL_LONG_I,
        litterae.CAPITAL_LONG_O,
        litterae.SMALL_LONG_O,
        litterae.CAPITAL_LONG_U,
        litterae.SMALL_LONG_U,
        litterae.CAPITAL_LONG_Y,
        litterae.SMALL_LONG_Y,
        litterae.MACRON,
    }
)


def ascii_chars(chars: Iterable[str]) -> Iterator[str]:
    """Accept only characters allowed in the ASCII representation."""
    for ch in chars:
        if not (_is_ascii_letter(ch) or ch in _ASCII_MARKS):
            raise Irritus(f"invalid character {ch!r}")
        yield ch


def canonical_chars(chars: Iterable[str]) -> Iterator[str]:
    """Accept only characters allowed in the canonical representation."""
    for ch in chars:
        if not (
            _is_ascii_letter(ch) or ch in _ASCII_MARKS or ch in _CANONICAL_EXTRAS
        ):
            raise Irritus(f"invalid character {ch!r}")
        yield ch


def initial_caps(chars: Iterable[str]) -> Iterator[str]:
    """Accept a capital letter only in the first position."""
    for position, ch in enumerate(chars):
        if position > 0 and litterae.is_capital(ch):
            raise Irritus(f"capital letter {ch!r} after the first position")
        yield ch


def _lengthen(chars: Iterable[str], mark: str) -> Iterator[str]:
    """Merge a short vowel followed by `mark` into a precomposed long vowel."""
    it = iter(chars)
    ch = next(it, None)
    while ch is not None:
        following = next(it, None)
        if ch == mark:
            raise Irritus(f"{mark!r} does not follow a short vowel")
        if following == mark and litterae.is_short_vowel(ch):
            ch = litterae.to_long_vowel(ch)
            following = next(it, None)
        yield ch
        ch = following


def long_vowel_macrons(chars: Iterable[str]) -> Iterator[str]:
    """Normalize combining macrons into precomposed long vowels."""
    return _lengthen(chars, litterae.MACRON)


def long_vowel_ticks(chars: Iterable[str]) -> Iterator[str]:
    """Normalize trailing "'" ticks into precomposed long vowels."""
    return _lengthen(chars, "'")


def not_empty(chars: Iterable[str]) -> Iterator[str]:
    """Reject an empty character sequence."""
    empty = True
    for ch in chars:
        empty = False
        yield ch
    if empty:
        raise Irritus("empty spelling")


def _solo(chars: Iterable[str], mark: str) -> Iterator[str]:
    prior = None
    for ch in chars:
        if ch == mark and prior == mark:
            raise Irritus(f"repeated {mark!r}")
        prior = ch
        yield ch


def solo_hyphens(chars: Iterable[str]) -> Iterator[str]:
    """Reject two or more adjacent hyphens."""
    return _solo(chars, "-")


def solo_pipes(chars: Iterable[str]) -> Iterator[str]:
    """Reject two or more adjacent vertical lines."""
    return _solo(chars, "|")