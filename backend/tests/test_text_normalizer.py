import pytest

from services.text_normalizer import normalize


def test_dashes_become_hyphens():
    assert normalize("4 – 8 years — onsite") == "4 - 8 years - onsite"


def test_smart_quotes_become_ascii():
    assert normalize("We’re hiring a “Lead” ‘now’") == "We're hiring a \"Lead\" 'now'"


def test_inline_whitespace_collapses():
    assert normalize("Senior \t  Engineer") == "Senior Engineer"


def test_newlines_survive():
    text = "Title: Analyst   \n   Location: Pune\r\n\n• One"
    assert normalize(text) == "Title: Analyst\nLocation: Pune\n\n• One"


def test_trims_ends():
    assert normalize("  \n hello \n ") == "hello"


def test_empty():
    assert normalize("") == ""
    assert normalize(" \t\n ") == ""


@pytest.mark.parametrize("text", [
    "",
    "plain",
    "  a  \n  b  \n\n\n c ",
    "We’re  hiring — “now”\r\n\t• item",
    " non-breaking spaces here",
    "🚀🔥",
])
def test_normalize_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once
