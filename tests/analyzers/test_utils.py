"""Tests for analyzer helper functions."""

from __future__ import annotations

from compdoc.analyzers.utils import (
    clean_type_text,
    first_match,
    is_jsdoc,
    parse_jsdoc,
    pascal_case,
    strip_quotes,
)


def test_parse_jsdoc_separates_description_and_tags() -> None:
    block = parse_jsdoc(
        """/**
         * Visual variant of the tag
         * based on semantic meaning
         * @default 'default'
         * @deprecated use tone
         */"""
    )

    assert block.description == "Visual variant of the tag\nbased on semantic meaning"
    assert block.default_value() == "'default'"
    assert block.tags["deprecated"] == "use tone"


def test_parse_jsdoc_single_line() -> None:
    block = parse_jsdoc("/** Test identifier */")

    assert block.description == "Test identifier"
    assert block.default_value() is None


def test_is_jsdoc_rejects_plain_comments() -> None:
    assert is_jsdoc("/** doc */")
    assert not is_jsdoc("/* block */")
    assert not is_jsdoc("// line")
    assert not is_jsdoc("/**/")


def test_clean_type_text() -> None:
    assert clean_type_text('import("/abs/types").Size') == "Size"
    assert clean_type_text("React.ReactNode") == "ReactNode"
    assert clean_type_text("Chakra.BoxProps", ["Chakra."]) == "BoxProps"
    assert clean_type_text("'a'\n   | 'b'") == "'a' | 'b'"


def test_pascal_case() -> None:
    assert pascal_case("icon-button") == "IconButton"
    assert pascal_case("date_formatter") == "DateFormatter"
    assert pascal_case("IconButton") == "IconButton"
    assert pascal_case("tag") == "Tag"


def test_first_match_prefers_exact_name() -> None:
    assert first_match(["OtherProps", "TagProps"], "TagProps", "Props") == "TagProps"
    assert first_match(["Styled", "OtherProps"], "TagProps", "Props") == "OtherProps"
    assert first_match(["Styled"], "TagProps", "Props") is None


def test_strip_quotes() -> None:
    assert strip_quotes("'data-testid'") == "data-testid"
    assert strip_quotes('"x"') == "x"
    assert strip_quotes("plain") == "plain"
