# ordo

A library for working with Latin words. It provides:

- a canonical spelling type
- several ways to print a spelling
- multi-word phrases
- simple word models with their inflected forms

## Installation

```
pip install .
```

To install it with the test tools as well:

```
pip install ".[test]"
```

## Spellings

An `ordo.orthographia.Orthographia` holds one spelling of one form of a Latin word. It is immutable, hashable and ordered. You can build one from an ASCII form or from a canonical Unicode form:

- **ASCII form** (`Orthographia.from_ascii`): a long vowel is followed by `'`.
- **Canonical form** (`Orthographia.from_canonical`): a long vowel is written one of two ways:
  - as a precomposed letter such as `ā`;
  - as a plain vowel followed by the combining macron U+0304.

The same rules apply to both forms:

- `j` and `v` are semivowels only; `i` and `u` are vowels only.
- Only the first letter may be a capital. A capital marks a proper name.
- A hyphen joins the parts of a compound word, as in `duo-decim`.
- A leading hyphen marks a suffix, as in `-que`.
- A vertical bar separates a stem from its ending, as in `leg|is`.
- A trailing bar marks a bare stem, as in `magn|`.
- A leading bar marks a bare ending, as in `|us`.

The validated spelling is kept in canonical form in the `canonical` attribute.

```python
from ordo.orthographia import Orthographia

word = Orthographia.from_ascii("Ju'ppiter")
word.canonical              # "Jūppiter"
word.to_ascii_format()      # "Ju'ppiter"
word.to_classical_format()  # "IVPPITER"
word.to_modern_format()     # "Iuppiter"
word.to_teaching_format()   # "Iūppiter"
str(word)                   # "Iuppiter"
print(repr(word))           # "Ju'ppiter"  (with the double quotes)
```

The classical, modern and teaching formats print a bare stem or a bare ending with `-` in place of `|`. For example, `magn|` prints as `magn-` and `|us` prints as `-us`.

### Invalid spellings

Invalid input raises `ordo.validation.Irritus`, a subclass of `ValueError`. A spelling is invalid when it contains any of the following:

- nothing at all (an empty string)
- `w`, or any character that is not allowed in the chosen form
- punctuation
- a capital letter after the first position
- two hyphens in a row
- two bars in a row
- a long-vowel mark (`'` or U+0304) that does not follow a plain vowel

## Phrases

An `ordo.locutio.Locutio` is an ordered, non-empty phrase of spellings. There are three ways to build one:

- `Locutio.one_word`
- `Locutio.two_words`
- `Locutio.from_words`, which takes any iterable of spellings

Building a phrase with no words raises `Irritus`. Phrases are immutable, hashable and ordered. Both `str` and `repr` join the words in ASCII form with spaces; `repr` also adds double quotes around the result.

```python
from ordo.locutio import Locutio
from ordo.orthographia import Orthographia

xxii = Locutio.two_words(
    Orthographia.from_ascii("vi'ginti'"),
    Orthographia.from_ascii("duo"),
)
str(xxii)  # "vi'ginti' duo"
```

## Words and forms

`ordo.vocabulum` models a whole word together with its forms.

The grammatical categories are enums:

- `Casus`
- `Declinatio`
- `Genus`
- `Numerus`
- `ParsOrationis`

Every word is a `Vocabulum` and has three methods:

- `formae()`
- `lemma()`
- `pars_orationis()`

Every form is a `Forma`, with the attributes `orthographia` and `vocabulum`.

There are two kinds of word:

- **`Coniunctio`** is a conjunction, with a single `FormaConiunctionis`.
- **`Nomen`** is a noun with `declinatio` and `genus`. Its forms are `FormaNominis` objects, each with `casus` and `numerus`.

`Nomen.from_ascii_stem` declines a noun from its stem. It gives ten forms, singular then plural. Within each number the cases come in this order: nominative, accusative, genitive, dative, ablative.

```python
from ordo.vocabulum import Coniunctio, Declinatio, Genus, Nomen, ParsOrationis

et = Coniunctio.from_ascii("et")
str(et.lemma().orthographia)  # "et"
et.pars_orationis() is ParsOrationis.CONIUNCTIO  # True

puella = Nomen.from_ascii_stem("puell", Declinatio.PRIMA, Genus.FEMININUM)
len(puella.formae())                  # 10
str(puella.formae()[9].orthographia)  # "puellis"
```

## Character helpers

There are also lower-level helpers:

- **`ordo.litterae`** holds the long-vowel and macron constants. It also has single-character tests and conversions: `is_capital`, `is_long_vowel`, `is_short_vowel`, `to_capital`, `to_long_vowel` and `remove_macron`.
- **`ordo.chars`** holds the generator stages used for formatting: `all_caps`, `ending_hyphens`, `long_vowel_ticks`, `no_compound_words`, `no_macrons`, `no_stem_ending_separators`, `semivowel_i`, `stem_hyphens` and `vowel_v`.
- **`ordo.validation`** holds the validating stages used for parsing: `ascii_chars`, `canonical_chars`, `initial_caps`, `long_vowel_macrons`, `long_vowel_ticks`, `not_empty`, `solo_hyphens` and `solo_pipes`. Each stage raises `Irritus` while its output is being consumed.

## Limitations

- `Nomen.from_ascii_stem` supports only the first declension (`Declinatio.PRIMA`). Any other declension raises `ValueError`.
- Of the parts of speech listed in `ParsOrationis`, only nouns (`Nomen`) and conjunctions (`Coniunctio`) have word classes. There are no classes for verbs, adjectives, pronouns, numerals, adverbs or prepositions.
- The package is a library only. It has no command-line tool and no built-in vocabulary or dictionary storage.