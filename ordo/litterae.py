"""Unicode character constants and single-character helpers for Latin letters."""

CAPITAL_LONG_A = "\u0100"
"""Precomposed 'Ā'."""
SMALL_LONG_A = "\u0101"
"""Precomposed 'ā'."""
CAPITAL_LONG_E = "\u0112"
"""Precomposed 'Ē'."""
SMALL_LONG_E = "\u0113"
"""Precomposed 'ē'."""
CAPITAL_LONG_I = "\u012a"
"""Precomposed 'Ī'."""
SMALL_LONG_I = "\u012b"
"""Precomposed 'ī'."""
CAPITAL_LONG_O = "\u014c"
"""Precomposed 'Ō'."""
SMALL_LONG_O = "\u014d"
"""Precomposed 'ō'."""
CAPITAL_LONG_U = "\u016a"
"""Precomposed 'Ū'."""
SMALL_LONG_U = "\u016b"
"""Precomposed 'ū'."""
CAPITAL_LONG_Y = "\u0232"
"""Precomposed 'Ȳ'."""
SMALL_LONG_Y = "\u0233"
"""Precomposed 'ȳ'."""
MACRON = "\u0304"
"""Combining macron."""

_LONG_TO_SHORT = {
    CAPITAL_LONG_A: "A",
    SMALL_LONG_A: "a",
    CAPITAL_LONG_E: "E",
    SMALL_LONG_E: "e",
    CAPITAL_LONG_I: "I",
    SMALL_LONG_I: "i",
    CAPITAL_LONG_O: "O",
    SMALL_LONG_O: "o",
    CAPITAL_LONG_U: "U",
    SMALL_LONG_U: "u",
    CAPITAL_LONG_Y: "Y",
    SMALL_LONG_Y: "y",
}

_SHORT_TO_LONG = {short: long for long, short in _LONG_TO_SHORT.items()}

_SMALL_TO_CAPITAL_LONG = {
    SMALL_LONG_A: CAPITAL_LONG_A,
    SMALL_LONG_E: CAPITAL_LONG_E,
    SMALL_LONG_I: CAPITAL_LONG_I,
    SMALL_LONG_O: CAPITAL_LONG_O,
    SMALL_LONG_U: CAPITAL_LONG_U,
    SMALL_LONG_Y: CAPITAL_LONG_Y,
}

_CAPITAL_LONG = frozenset(_SMALL_TO_CAPITAL_LONG.values())


def is_capital(ch: str) -> bool:
    """Return True for an ASCII capital or a capital long vowel."""
    return "A" <= ch <= "Z" or ch in _CAPITAL_LONG


def is_long_vowel(ch: str) -> bool:
    """Return True for a precomposed long vowel."""
    return ch in _LONG_TO_SHORT


def is_short_vowel(ch: str) -> bool:
    """Return True for a plain vowel letter, either case."""
    return ch in _SHORT_TO_LONG


def to_capital(ch: str) -> str:
    """Uppercase an ASCII letter or a long vowel; leave anything else alone."""
    if ch in _SMALL_TO_CAPITAL_LONG:
        return _SMALL_TO_CAPITAL_LONG[ch]
    if "a" <= ch <= "z":
        return ch.upper()
    return ch


def to_long_vowel(ch: str) -> str:
    """Turn a plain vowel into its precomposed long form."""
    return _SHORT_TO_LONG.get(ch, ch)


def remove_macron(ch: str) -> str:
    """Turn a precomposed long vowel into its plain form."""
    return _LONG_TO_SHORT.get(ch, ch)