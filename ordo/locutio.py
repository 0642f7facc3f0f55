"""A phrase of one or more Latin words."""

from collections.abc import Iterable
from dataclasses import dataclass

from ordo.orthographia import Orthographia
from ordo.validation import Irritus


@dataclass(frozen=True, order=True, repr=False)
class Locutio:
    """An ordered, non-empty sequence of spellings forming one expression."""

    orthographiae: tuple[Orthographia, ...]

    def __post_init__(self) -> None:
        words = tuple(self.orthographiae)
        if not words:
            raise Irritus("a phrase needs at least one word")
        object.__setattr__(self, "orthographiae", words)

    @classmethod
    def one_word(cls, orthographia: Orthographia) -> "Locutio":
        """Build a phrase of a single word."""
        return cls((orthographia,))

    @classmethod
    def two_words(
        cls, orthographia1: Orthographia, orthographia2: Orthographia
    ) -> "Locutio":
        """Build a phrase of two words."""
        return cls((orthographia1, orthographia2))

    @classmethod
    def from_words(cls, orthographiae: Iterable[Orthographia]) -> "Locutio":
        """Build a phrase from any iterable of spellings."""
        return cls(tuple(orthographiae))

    def __str__(self) -> str:
        return " ".join(og.to_ascii_format() for og in self.orthographiae)

    def __repr__(self) -> str:
        return f'"{self}"'