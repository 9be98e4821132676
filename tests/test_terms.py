import pytest

from scass.core.constants import DEFAULT_SEARCH_TERMS
from scass.core.errors import TermSourceError
from scass.core.terms import parse_file_types, read_words_from_file, resolve_terms


@pytest.mark.parametrize("raw", [None, ""])
def test_missing_value_uses_default_terms(raw):
    terms = resolve_terms(raw)
    assert terms == list(DEFAULT_SEARCH_TERMS)
    assert "DROP TABLE" in terms and "eval" in terms


def test_default_terms_are_static():
    assert isinstance(DEFAULT_SEARCH_TERMS, tuple)
    assert len(DEFAULT_SEARCH_TERMS) == 34
    resolve_terms(None).append("mutated")
    assert "mutated" not in DEFAULT_SEARCH_TERMS


def test_comma_list_is_split_and_trimmed():
    assert resolve_terms("TODO, FIXME,,race condition") == ["TODO", "FIXME", "race condition"]


def test_comma_wins_over_existing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a,b").write_text("ignored\n", encoding="utf-8")
    assert resolve_terms("a,b") == ["a", "b"]


def test_existing_file_is_read_line_by_line(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("TODO\n\nDROP TABLE\r\n  spaced  \n", encoding="utf-8")
    assert resolve_terms(str(words)) == ["TODO", "DROP TABLE", "  spaced  "]


def test_directory_is_a_single_literal(tmp_path):
    assert resolve_terms(str(tmp_path)) == [str(tmp_path)]


def test_plain_word_is_a_single_literal():
    assert resolve_terms("SECRET") == ["SECRET"]


def test_unreadable_word_file_is_fatal(tmp_path):
    bad = tmp_path / "words.bin"
    bad.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(TermSourceError):
        read_words_from_file(str(bad))


def test_parse_file_types_keeps_dots_and_case():
    assert parse_file_types(".py, .TS,,.json") == [".py", ".TS", ".json"]
    assert parse_file_types("") == []
    assert parse_file_types(None) == []
