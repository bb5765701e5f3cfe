from __future__ import annotations

import pytest

from tagcards.parser.classifier import (
    LineKind,
    TagDirective,
    classify,
    classify_line,
    is_closing_directive,
    parse_directive,
)


@pytest.mark.parametrize("line", ["", "// a comment", "//", "@sep ;", "@sep", "@sep a<b"])
def test_ignorable_lines(line: str) -> None:
    assert classify_line(line, "::") is LineKind.IGNORABLE


@pytest.mark.parametrize("line", ["bad<line", "#ta*g", "@tags a, b/c", 'say "hi"', "back\\slash"])
def test_malformed_lines_take_precedence_over_directives(line: str) -> None:
    assert classify_line(line, "->") is LineKind.MALFORMED


@pytest.mark.parametrize("line", ["#greeting", "##greeting", "@tags a, b", "@@tags a", "#привет", "#a b"])
def test_tag_directives(line: str) -> None:
    assert classify_line(line, "::") is LineKind.DIRECTIVE


@pytest.mark.parametrize("line", ["# spaced", "###triple", "hello -> bonjour", "just a word", "@other thing"])
def test_content_lines(line: str) -> None:
    assert classify_line(line, "->") is LineKind.CONTENT


def test_separator_characters_do_not_make_line_malformed() -> None:
    assert classify_line("hello -> bonjour", "->") is LineKind.CONTENT
    assert classify_line("hello -> bonjour", "=") is LineKind.MALFORMED


def test_parse_single_tag_directives() -> None:
    assert parse_directive("#greeting") == TagDirective(tags=frozenset({"greeting"}), closing=False)
    assert parse_directive("##greeting") == TagDirective(tags=frozenset({"greeting"}), closing=True)


def test_parse_batch_directives() -> None:
    assert parse_directive("@tags a, b ,c") == TagDirective(tags=frozenset({"a", "b", "c"}), closing=False)
    assert parse_directive("@@tags a,  b") == TagDirective(tags=frozenset({"a", "b"}), closing=True)


def test_parse_batch_directive_drops_empty_entries() -> None:
    assert parse_directive("@tags a,, b,").tags == frozenset({"a", "b"})
    assert parse_directive("@tags").tags == frozenset()


def test_parse_directive_rejects_content() -> None:
    with pytest.raises(ValueError):
        parse_directive("hello -> bonjour")


def test_closing_markers() -> None:
    assert is_closing_directive("##a")
    assert is_closing_directive("@@tags a")
    assert not is_closing_directive("#a")
    assert not is_closing_directive("@tags a")


@pytest.mark.parametrize(
    ("line", "separator", "columns"),
    [
        ("#a::b", "::", [2]),
        ("##a::b", "::", [3]),
        ("@tags c::d, e", "::", [7]),
        ("@@tags c::d", "::", [8]),
        ("#x|y", "|", [2]),
        ("#go->on", "->", [4]),
    ],
)
def test_separator_is_not_exempt_on_directive_lines(line: str, separator: str, columns: list) -> None:
    assert classify(line, separator) == (LineKind.MALFORMED, columns)


def test_classify_returns_columns_only_for_malformed_lines() -> None:
    assert classify("x :: y", "::") == (LineKind.CONTENT, [])
    assert classify("#greeting", "::") == (LineKind.DIRECTIVE, [])
    assert classify("// a: b", "::") == (LineKind.IGNORABLE, [])
    assert classify("x :: y: z", "::") == (LineKind.MALFORMED, [6])


def test_separator_marker_mid_line_is_content() -> None:
    assert classify_line("see @sep below", "::") is LineKind.CONTENT
