import pytest

from ordo.validation import Irritus
from ordo.vocabulum import (
    Casus,
    Coniunctio,
    Declinatio,
    FormaNominis,
    Genus,
    Nomen,
    Numerus,
    ParsOrationis,
)


def test_coniunctio_from_ascii():
    et = Coniunctio.from_ascii("et")
    assert len(et.formae()) == 1
    assert str(et.formae()[0].orthographia) == "et"
    assert str(et.lemma().orthographia) == "et"
    assert et.pars_orationis() is ParsOrationis.CONIUNCTIO


def test_coniunctio_form_points_back():
    et = Coniunctio.from_ascii("et")
    assert et.lemma().vocabulum is et


def test_coniunctio_invalid_spelling():
    with pytest.raises(Irritus):
        Coniunctio.from_ascii("e.t")


def test_nomen_from_ascii_stem():
    puella = Nomen.from_ascii_stem("puell-", Declinatio.PRIMA, Genus.FEMININUM)
    assert len(puella.formae()) == 10
    assert str(puella.formae()[0].orthographia) == "puella"
    assert str(puella.formae()[9].orthographia) == "puellis"
    assert str(puella.lemma().orthographia) == "puella"
    assert puella.pars_orationis() is ParsOrationis.NOMEN


def test_nomen_form_order_and_spellings():
    puella = Nomen.from_ascii_stem("puell", Declinatio.PRIMA, Genus.FEMININUM)
    formae = puella.formae()
    assert [f.orthographia.to_ascii_format() for f in formae] == [
        "puella",
        "puellam",
        "puellae",
        "puellae",
        "puella'",
        "puellae",
        "puella's",
        "puella'rum",
        "puelli's",
        "puelli's",
    ]
    assert [(f.casus, f.numerus) for f in formae][:2] == [
        (Casus.NOMINATIVUS, Numerus.SINGULARIS),
        (Casus.ACCUSATIVUS, Numerus.SINGULARIS),
    ]
    assert (formae[7].casus, formae[7].numerus) == (Casus.GENETIVUS, Numerus.PLURALIS)


def test_nomen_forms_point_back():
    puella = Nomen.from_ascii_stem("puell", Declinatio.PRIMA, Genus.FEMININUM)
    assert all(isinstance(f, FormaNominis) for f in puella.formae())
    assert all(f.vocabulum is puella for f in puella.formae())
    assert puella.declinatio is Declinatio.PRIMA
    assert puella.genus is Genus.FEMININUM


def test_nomen_unsupported_declension():
    with pytest.raises(ValueError):
        Nomen.from_ascii_stem("domin", Declinatio.SECUNDA, Genus.MASCULINUM)


def test_nomen_invalid_stem():
    with pytest.raises(Irritus):
        Nomen.from_ascii_stem("wind", Declinatio.PRIMA, Genus.FEMININUM)


def test_nomen_needs_forms():
    with pytest.raises(Irritus):
        Nomen(Declinatio.PRIMA, Genus.FEMININUM, [])