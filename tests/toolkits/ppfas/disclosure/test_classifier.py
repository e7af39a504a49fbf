import pytest

from toolkits.ppfas.disclosure.classifier import (
    AnchorKind,
    RowCells,
    RowRejection,
    classify_anchor,
    classify_row,
)


def _cells(name, percent=0.05, quantity=100, market_value=10.0):
    return RowCells(name=name, percent=percent, quantity=quantity, market_value=market_value)


def test_accepts_valid_holding():
    result = classify_row(_cells("  HDFC Bank Limited ", "8.11%", "1,000", "1,234.5"))

    assert result.accepted
    assert result.record.name == "HDFC Bank Limited"
    assert result.record.percent == pytest.approx(0.0811)
    assert result.record.quantity == 1000
    assert result.record.market_value == pytest.approx(1234.5)


@pytest.mark.parametrize(
    ("name", "reason"),
    [
        (None, RowRejection.EMPTY_NAME),
        ("   ", RowRejection.EMPTY_NAME),
        ("AB", RowRejection.SHORT_NAME),
        ("Sub Total", RowRejection.NOISE),
        ("TOTAL", RowRejection.NOISE),
        ("Last 3 years", RowRejection.NOISE),
        ("(a) Listed / awaiting listing on Stock Exchanges", RowRejection.NOISE),
        ("Clearing Corporation of India Ltd", RowRejection.NOISE),
        ("182 Days Tbill (MD 05/12/2025)", RowRejection.NOISE),
    ],
)
def test_rejects_non_holding_names(name, reason):
    result = classify_row(_cells(name))

    assert not result.accepted
    assert result.rejection is reason


@pytest.mark.parametrize("percent", ["abc", None, 0, "0%", -0.01, "150%"])
def test_rejects_unusable_percent(percent):
    result = classify_row(_cells("Infosys Limited", percent=percent))

    assert result.rejection is RowRejection.BAD_PERCENT


def test_sub_total_is_rejected_regardless_of_percent():
    for percent in (0.5, "45%", 1):
        assert classify_row(_cells("Sub Total", percent=percent)).record is None


def test_quantity_and_market_value_do_not_gate_rows():
    result = classify_row(_cells("Infosys Limited", quantity="--", market_value="NA"))

    assert result.accepted
    assert result.record.quantity == 0
    assert result.record.market_value == 0.0


def test_classify_anchor():
    assert classify_anchor("  grand total ") == (AnchorKind.TERMINATOR, None)
    assert classify_anchor("EQUITY & EQUITY RELATED") == (
        AnchorKind.SECTION_HEADER,
        "equity_and_equity_related",
    )
    assert classify_anchor("Reverse Repo / TREPS") == (AnchorKind.SECTION_HEADER, "reverse_repo_treps")
    assert classify_anchor("(b) Reits") == (AnchorKind.SECTION_HEADER, "b_reits")
    assert classify_anchor("Equity & Equity related total") == (AnchorKind.OTHER, None)
    assert classify_anchor(None) == (AnchorKind.OTHER, None)
