"""Latin words with all their forms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto

from ordo.orthographia import Orthographia
from ordo.validation import Irritus


class Casus(Enum):
    """Grammatical case."""

    NOMINATIVUS = auto()
    VOCATIVUS = auto()
    GENETIVUS = auto()
    DATIVUS = auto()
    ACCUSATIVUS = auto()
    ABLATIVUS = auto()


class Declinatio(Enum):
    """Noun declension."""

    PRIMA = auto()
    SECUNDA = auto()
    TERTIA = auto()
    QUARTA = auto()
    QUINTA = auto()


class Genus(Enum):
    """Grammatical gender."""

    FEMININUM = auto()
    MASCULINUM = auto()
    NEUTRUM = auto()
    UTRUM = auto()


class Numerus(Enum):
    """Grammatical number."""

    SINGULARIS = auto()
    PLURALIS = auto()


class ParsOrationis(Enum):
    """Part of speech."""

    NOMEN = auto()
    NUMERALE = auto()
    PRONOMEN = auto()
    ADIECTIVUM = auto()
    VERBUM = auto()
    ADVERBIUM = auto()
    PRAEPOSITIO = auto()
    CONIUNCTIO = auto()


@dataclass(frozen=True, eq=False)
class Forma:
    """A particular form of a Latin word."""

    orthographia: Orthographia
    vocabulum: Vocabulum = field(repr=False)


class Vocabulum(ABC):
    """A Latin word with all its forms."""

    @abstractmethod
    def formae(self) -> list[Forma]:
        """Return every form of the word."""

    @abstractmethod
    def lemma(self) -> Forma:
        """Return the dictionary form of the word."""

    @abstractmethod
    def pars_orationis(self) -> ParsOrationis:
        """Return the part of speech."""


@dataclass(frozen=True, eq=False)
class FormaConiunctionis(Forma):
    """The single form of a conjunction."""


class Coniunctio(Vocabulum):
    """A conjunction, which has exactly one form."""

    def __init__(self, orthographia: Orthographia) -> None:
        self._forma = FormaConiunctionis(orthographia, self)

    @classmethod
    def from_ascii(cls, ascii: str) -> Coniunctio:
        """Build a conjunction from its ASCII spelling."""
        return cls(Orthographia.from_ascii(ascii))

    def formae(self) -> list[Forma]:
        return [self._forma]

    def lemma(self) -> Forma:
        return self._forma

    def pars_orationis(self) -> ParsOrationis:
        return ParsOrationis.CONIUNCTIO

    def __repr__(self) -> str:
        return f"Coniunctio({self._forma.orthographia!r})"


@dataclass(frozen=True, eq=False)
class FormaNominis(Forma):
    """One inflected form of a noun."""

    casus: Casus
    numerus: Numerus


_CASUS_ORDER = (
    Casus.NOMINATIVUS,
    Casus.ACCUSATIVUS,
    Casus.GENETIVUS,
    Casus.DATIVUS,
    Casus.ABLATIVUS,
)

_ASCII_ENDINGS = {
    Declinatio.PRIMA: {
        Numerus.SINGULARIS: ("a", "am", "ae", "ae", "a'"),
        Numerus.PLURALIS: ("ae", "a's", "a'rum", "i's", "i's"),
    },
}


class Nomen(Vocabulum):
    """A noun with its declension, gender and inflected forms."""

    def __init__(
        self,
        declinatio: Declinatio,
        genus: Genus,
        spellings: Iterable[tuple[Casus, Numerus, Orthographia]],
    ) -> None:
        self.declinatio = declinatio
        self.genus = genus
        self._formae = tuple(
            FormaNominis(orthographia, self, casus, numerus)
            for casus, numerus, orthographia in spellings
        )
        if not self._formae:
            raise Irritus("a noun needs at least one form")

    @classmethod
    def from_ascii_stem(
        cls, ascii_stem: str, declinatio: Declinatio, genus: Genus
    ) -> Nomen:
        """Decline a noun from its ASCII stem.

        Only the first declension is supported; other declensions raise
        ValueError.  An invalid stem raises Irritus.
        """
        try:
            endings = _ASCII_ENDINGS[declinatio]
        except KeyError:
            raise ValueError(f"declension {declinatio.name} is not supported") from None
        spellings = [
            (casus, numerus, Orthographia.from_ascii(ascii_stem + ending))
            for numerus in (Numerus.SINGULARIS, Numerus.PLURALIS)
            for casus, ending in zip(_CASUS_ORDER, endings[numerus])
        ]
        return cls(declinatio, genus, spellings)

    def formae(self) -> list[Forma]:
        return list(self._formae)

    def lemma(self) -> Forma:
        return self._formae[0]

    def pars_orationis(self) -> ParsOrationis:
        return ParsOrationis.NOMEN

    def __repr__(self) -> str:
        return f"Nomen({self.lemma().orthographia!r}, {self.declinatio.name}, {self.genus.name})"