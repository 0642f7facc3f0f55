"""The spelling of a single form of a Latin word."""

from collections.abc import Iterable
from dataclasses import dataclass

from ordo import chars, validation


def _join(stream: Iterable[str]) -> str:
    return "".join(stream)


@dataclass(frozen=True, order=True, repr=False)
class Orthographia:
    """A specific spelling of one form of a Latin word.

    The spelling is held in canonical form: long vowels as precomposed
    letters with macrons, J and V as semivowels only, I and U as vowels
    only, a capital only as the first letter of a proper name, '-' for
    compound words and suffixes, and '|' between stem and ending.

    Build instances with :meth:`from_ascii` or :meth:`from_canonical`,
    which validate the input and raise :class:`~ordo.validation.Irritus`
    when it is not a valid spelling.
    """

    canonical: str

    @classmethod
    def from_ascii(cls, ascii: str) -> "Orthographia":
        """Read a spelling where long vowels are followed by "'".

        Examples: "ma'ter", "jam", "i'nsul|a", "Ju'ppiter", "ex-i're",
        "-que", "leg|e'ba'|mus", "nas|", "|us".
        """
        stream = validation.not_empty(ascii)
        stream = validation.ascii_chars(stream)
        stream = validation.initial_caps(stream)
        stream = validation.long_vowel_ticks(stream)
        stream = validation.solo_hyphens(stream)
        stream = validation.solo_pipes(stream)
        return cls(_join(stream))

    @classmethod
    def from_canonical(cls, canonical: str) -> "Orthographia":
        """Read a spelling where long vowels carry macrons.

        Macrons may be precomposed or given as a plain vowel followed by
        the combining macron U+0304.
        """
        stream = validation.not_empty(canonical)
        stream = validation.canonical_chars(stream)
        stream = validation.initial_caps(stream)
        stream = validation.long_vowel_macrons(stream)
        stream = validation.solo_hyphens(stream)
        stream = validation.solo_pipes(stream)
        return cls(_join(stream))

    def to_ascii_format(self) -> str:
        """Format with ASCII only: long vowels are followed by "'"."""
        return _join(chars.long_vowel_ticks(self.canonical))

    def to_classical_format(self) -> str:
        """Format in capitals with I and V only and no marks.

        Stems and endings are shown with '-' instead of '|'.
        """
        stream = chars.all_caps(self.canonical)
        stream = chars.semivowel_i(stream)
        stream = chars.vowel_v(stream)
        stream = chars.no_macrons(stream)
        stream = chars.no_compound_words(stream)
        stream = chars.ending_hyphens(stream)
        stream = chars.no_stem_ending_separators(stream)
        stream = chars.stem_hyphens(stream)
        return _join(stream)

    def to_modern_format(self) -> str:
        """Format the common modern way: J as I, no long vowel marks."""
        stream = chars.semivowel_i(self.canonical)
        stream = chars.no_macrons(stream)
        stream = chars.no_compound_words(stream)
        stream = chars.ending_hyphens(stream)
        stream = chars.no_stem_ending_separators(stream)
        stream = chars.stem_hyphens(stream)
        return _join(stream)

    def to_teaching_format(self) -> str:
        """Format for teaching: like the modern format but with macrons."""
        stream = chars.semivowel_i(self.canonical)
        stream = chars.no_compound_words(stream)
        stream = chars.ending_hyphens(stream)
        stream = chars.no_stem_ending_separators(stream)
        stream = chars.stem_hyphens(stream)
        return _join(stream)

    def __str__(self) -> str:
        return self.to_modern_format()

    def __repr__(self) -> str:
        return f'"{self.to_ascii_format()}"'