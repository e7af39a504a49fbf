import pytest

from toolkits.ppfas.disclosure import (
    normalize_name,
    parse_market_value,
    parse_percent,
    parse_quantity,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("8.11%", 0.0811),
        ("0.0811", 0.0811),
        ("15", 0.15),
        (0.0811, 0.0811),
        (15, 0.15),
        (" 2.5 % ", 0.025),
        ("1", 1.0),
        (1, 1.0),
    ],
)
def test_parse_percent_scales_to_fraction(raw, expected):
    assert parse_percent(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["abc", "", None, "%", "nan", "1_000", True])
def test_parse_percent_rejects_non_numeric(raw):
    assert parse_percent(raw) is None


def test_parse_quantity_strips_thousands_separators():
    assert parse_quantity("1,23,456") == 123456
    assert parse_quantity(2500) == 2500
    assert parse_quantity(2500.0) == 2500
    assert parse_quantity("12.7") == 12


@pytest.mark.parametrize("raw", ["abc", None, "", "-", "-100", float("nan")])
def test_parse_quantity_defaults_to_zero(raw):
    assert parse_quantity(raw) == 0


def test_parse_market_value():
    assert parse_market_value("1,234.56") == pytest.approx(1234.56)
    assert parse_market_value(99.5) == pytest.approx(99.5)
    assert parse_market_value("n/a") == 0.0
    assert parse_market_value(None) == 0.0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Foo Ltd", "Foo"),
        ("Foo Limited", "Foo"),
        ("  Foo   Bar   LIMITED ", "Foo Bar"),
        ("Foo Ltd.", "Foo"),
        ("Foo Pvt Ltd", "Foo Pvt"),
        ("Foo Private Limited", "Foo Private"),
        ("GAIL (India) Limited", "GAIL (India)"),
        ("Central Depository Services (India) Ltd.", "Central Depository Services (India)"),
        ("Alphabet Inc Class A", "Alphabet Inc Class A"),
        ("Foo\xa0Limited", "Foo"),
        ("Foo\tLtd", "Foo"),
    ],
)
def test_normalize_name(raw, expected):
    assert normalize_name(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "HDFC Bank Limited",
        "Bajaj Holdings & Investment Ltd.",
        "Foo Pvt Ltd",
        "Zydus Lifesciences  Private Limited",
        "gail (india) ltd",
        "Microsoft Corp",
        "Power Grid Corporation of India Limited",
        "Foo\xa0Limited",
        "Foo\tLtd",
        "Foo\nLimited",
    ],
)
def test_normalize_name_is_idempotent(raw):
    once = normalize_name(raw)
    assert normalize_name(once) == once
