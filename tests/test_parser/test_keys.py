"""Tests for style-definition key classification."""

import pytest

from stylecraft.parser.keys import KeyKind, classify_key, is_block, is_sequence


class TestClassifyKey:
    @pytest.mark.parametrize(
        "key, value",
        [
            ("backgroundColor", "red"),
            ("--brand-Color", "#fff"),
            ("zIndex", 10),
            ("display", ["-webkit-box", "flex"]),
            ("color", None),
        ],
    )
    def test_declarations(self, key, value):
        assert classify_key(key, value) is KeyKind.DECLARATION

    @pytest.mark.parametrize("key", [".foo", "#main", "&:hover", ":root", "a", "> li", "h1, h2"])
    def test_selectors(self, key):
        assert classify_key(key, {"color": "red"}) is KeyKind.SELECTOR

    def test_at_rule_block(self):
        assert classify_key("@media print", {"color": "red"}) is KeyKind.AT_RULE

    def test_at_rule_list_of_blocks(self):
        assert classify_key("@font-face", [{"src": "a"}, {"src": "b"}]) is KeyKind.AT_RULE

    def test_at_statement(self):
        assert classify_key("@import", '"base.css"') is KeyKind.AT_STATEMENT

    def test_selector_like_key_with_scalar_is_declaration(self):
        # Shape decides: a scalar value is never a nested block.
        assert classify_key(".foo", "red") is KeyKind.DECLARATION


class TestShapeHelpers:
    def test_strings_are_not_sequences(self):
        assert not is_sequence("abc")
        assert is_sequence(["a"])
        assert is_sequence(("a",))

    def test_empty_list_is_not_block(self):
        assert not is_block([])

    def test_mixed_list_is_not_block(self):
        assert not is_block([{"a": 1}, "b"])
