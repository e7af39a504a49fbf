from toolkits.ppfas.disclosure import DiffEntry
from py_scripts.ppfas_disclosure.reporting import (
    entry_to_dict,
    format_percent,
    format_price,
    format_shares,
    render_markdown,
)


def _entry(name="Foo", quantity_diff=-25, percent_diff=-0.0125):
    return DiffEntry(
        name=name,
        has_traded=quantity_diff != 0,
        percent_diff=percent_diff,
        display_percent_diff=percent_diff if quantity_diff else 0.0,
        old_percent=0.05,
        new_percent=0.05 + percent_diff,
        quantity_diff=quantity_diff,
        old_price=1234.5,
        new_price=0.0,
    )


def test_formatters():
    assert format_percent(0.0123, signed=True) == "+1.23%"
    assert format_percent(-0.0123, signed=True) == "-1.23%"
    assert format_percent(0.0) == "0.00%"
    assert format_shares(12000) == "+12,000"
    assert format_shares(-5) == "-5"
    assert format_price(0.0) == "N/A"
    assert format_price(1234.5) == "1,234.50"


def test_entry_to_dict_adds_magnitudes():
    payload = entry_to_dict(_entry())

    assert payload["name"] == "Foo"
    assert payload["quantity_diff_abs"] == 25
    assert payload["percent_diff_abs"] == 0.0125


def test_render_markdown_uses_display_names_and_fallback():
    entry = _entry(name="A|B Corp")
    markdown = render_markdown(
        [entry],
        {"reverse_repo_treps": [entry], "some_new_section": [entry]},
        fund_code="liquid",
    )

    assert markdown.startswith("# Portfolio changes (liquid)\n")
    assert "| A\\|B Corp | -1.25% | 5.00% | 3.75% | -25 | 1,234.50 | N/A |" in markdown
    assert "### Reverse Repo / TREPS" in markdown
    assert "### Some New Section" in markdown
    assert markdown.endswith("\n")
