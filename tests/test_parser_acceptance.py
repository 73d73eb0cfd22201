import pytest

from drex.models import DieRollTerm, ModifierTerm
from drex.parser import parse_term, parse_terms, tokenize


@pytest.mark.parametrize(
    ("token", "term"),
    [
        ("3d6", DieRollTerm(multiplier=3, sides=6)),
        ("+3d6", DieRollTerm(multiplier=3, sides=6)),
        ("-4D10", DieRollTerm(multiplier=-4, sides=10)),
        ("0d20", DieRollTerm(multiplier=0, sides=20)),
        ("127d255", DieRollTerm(multiplier=127, sides=255)),
        ("+7", ModifierTerm(value=7)),
        ("7", ModifierTerm(value=7)),
        ("-7", ModifierTerm(value=-7)),
        ("-128", ModifierTerm(value=-128)),
    ],
)
def test_parse_term_acceptance(token, term):
    assert parse_term(token) == term


@pytest.mark.parametrize(
    ("expression", "terms"),
    [
        (
            "3d12+4",
            [DieRollTerm(multiplier=3, sides=12), ModifierTerm(value=4)],
        ),
        (
            "-4d10+5",
            [DieRollTerm(multiplier=-4, sides=10), ModifierTerm(value=5)],
        ),
        (
            "50+2d8-1d4",
            [
                ModifierTerm(value=50),
                DieRollTerm(multiplier=2, sides=8),
                DieRollTerm(multiplier=-1, sides=4),
            ],
        ),
    ],
)
def test_parse_terms_acceptance(expression, terms):
    assert parse_terms(expression) == terms


def test_tokenize_keeps_signs_and_order():
    assert tokenize("2d6+6+4d10") == ["2d6", "+6", "+4d10"]
    assert tokenize("3d1-2d1-4") == ["3d1", "-2d1", "-4"]


def test_terms_display_properly():
    assert str(parse_term("3d6")) == "3d6"
    assert str(parse_term("-2d4")) == "-2d4"
    assert str(parse_term("5")) == "+5"
    assert str(parse_term("+0")) == "+0"
    assert str(parse_term("-6")) == "-6"
