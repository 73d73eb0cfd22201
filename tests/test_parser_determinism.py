from drex.parser import normalize_expression, parse_terms, tokenize


def test_parse_is_deterministic():
    expression = normalize_expression("2d10 - 1d4 + 7")
    a = parse_terms(expression)
    b = parse_terms(expression)

    assert expression == "2d10-1d4+7"
    assert a == b


def test_normalize_strips_all_whitespace():
    assert normalize_expression(" 2d6 +\t6\n+ 4d10 ") == "2d6+6+4d10"


def test_tokenize_skips_unmatched_text():
    assert tokenize("3d6andapotato") == ["3d6"]
    assert tokenize("roll3d6plus2") == ["3d6", "2"]
    assert tokenize("CHICKEN!") == []
