import pytest

from ordo.validation import (
    Irritus,
    ascii_chars,
    canonical_chars,
    initial_caps,
    long_vowel_macrons,
    long_vowel_ticks,
    not_empty,
    solo_hyphens,
    solo_pipes,
)


def run(stage, text):
    return "".join(stage(text))


def test_irritus_is_value_error():
    with pytest.raises(ValueError):
        run(not_empty, "")


def test_ascii_chars_accepts_ticks():
    assert run(ascii_chars, "ma'ter") == "ma'ter"


@pytest.mark.parametrize("text", ["m\u0101ter", "wind", "S.P.Q.R.", "a b"])
def test_ascii_chars_rejects(text):
    with pytest.raises(Irritus):
        run(ascii_chars, text)


def test_canonical_chars_accepts_precomposed():
    assert run(canonical_chars, "m\u0101ter") == "m\u0101ter"


def test_canonical_chars_accepts_combining_macron():
    assert run(canonical_chars, "ma\u0304ter") == "ma\u0304ter"


@pytest.mark.parametrize("text", ["mater!", "Wind"])
def test_canonical_chars_rejects(text):
    with pytest.raises(Irritus):
        run(canonical_chars, text)


@pytest.mark.parametrize("text", ["vacca", "Marcus", "\u0112sus"])
def test_initial_caps_accepts(text):
    assert run(initial_caps, text) == text


@pytest.mark.parametrize("text", ["ex\u012are", "XVII"])
def test_initial_caps_rejects(text):
    with pytest.raises(Irritus):
        run(initial_caps, text)


def test_long_vowel_macrons_precomposed_unchanged():
    assert run(long_vowel_macrons, "m\u0101ter") == "m\u0101ter"


def test_long_vowel_macrons_combines():
    assert run(long_vowel_macrons, "ma\u0304ter") == "m\u0101ter"


@pytest.mark.parametrize(
    "text", ["m\u0304ater", "ma\u0304\u0304ter", "m\u0101\u0304ter", "\u0304cauda"]
)
def test_long_vowel_macrons_rejects(text):
    with pytest.raises(Irritus):
        run(long_vowel_macrons, text)


def test_long_vowel_ticks_combines():
    assert run(long_vowel_ticks, "ma'ter") == "m\u0101ter"


def test_long_vowel_ticks_final_vowel():
    assert run(long_vowel_ticks, "vi'ginti'") == "v\u012bgint\u012b"


@pytest.mark.parametrize("text", ["m'ater", "ma''ter", "'cauda"])
def test_long_vowel_ticks_rejects(text):
    with pytest.raises(Irritus):
        run(long_vowel_ticks, text)


def test_not_empty_passes_text():
    assert run(not_empty, "vacca") == "vacca"


def test_not_empty_rejects_empty():
    with pytest.raises(Irritus):
        run(not_empty, "")


@pytest.mark.parametrize("text", ["ab-sunt", "-que"])
def test_solo_hyphens_accepts(text):
    assert run(solo_hyphens, text) == text


@pytest.mark.parametrize("text", ["ab--sunt", "--que"])
def test_solo_hyphens_rejects(text):
    with pytest.raises(Irritus):
        run(solo_hyphens, text)


@pytest.mark.parametrize("text", ["can|it", "|us", "stat|"])
def test_solo_pipes_accepts(text):
    assert run(solo_pipes, text) == text


@pytest.mark.parametrize("text", ["can||it", "||us", "stat||"])
def test_solo_pipes_rejects(text):
    with pytest.raises(Irritus):
        run(solo_pipes, text)


def test_chained_stages():
    result = "".join(
        solo_pipes(solo_hyphens(long_vowel_ticks(initial_caps(ascii_chars(not_empty("le'g|era'|mus"))))))
    )
    assert result == "l\u0113g|er\u0101|mus"


def test_chained_stages_raise_on_capital():
    with pytest.raises(Irritus):
        "".join(long_vowel_ticks(initial_caps(ascii_chars("ITA"))))