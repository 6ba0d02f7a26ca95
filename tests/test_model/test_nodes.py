"""Tests for CSS node dataclasses and factories."""

import pytest

from stylecraft.errors import InvalidValueError
from stylecraft.model.nodes import (
    AtRule,
    Declaration,
    Rule,
    iter_nodes,
    make_at_rule,
    make_declaration,
    make_rule,
    wrap_in_at_rules,
)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


class TestMakeDeclaration:
    @pytest.mark.parametrize("value", ["red", 0, 1.5, ""])
    def test_scalars_kept_exactly(self, value):
        decl = make_declaration("color", value)
        assert decl.value == value
        assert type(decl.value) is type(value)

    @pytest.mark.parametrize("value", [None, True, {"a": 1}, object(), {1, 2}])
    def test_non_scalars_rejected(self, value):
        with pytest.raises(InvalidValueError) as exc_info:
            make_declaration("color", value)
        assert exc_info.value.prop == "color"
        assert "color" in str(exc_info.value)

    def test_custom_property_flag(self):
        assert make_declaration("--x", "1").is_custom_property
        assert not make_declaration("x", "1").is_custom_property


class TestMakeRuleAndAtRule:
    def test_rule_nodes_become_tuple(self):
        rule = make_rule(".a", [Declaration("color", "red")])
        assert rule.nodes == (Declaration("color", "red"),)

    def test_at_rule_without_nodes_is_statement(self):
        stmt = make_at_rule("import", '"a.css"')
        assert stmt.nodes is None
        assert not stmt.has_block
        assert stmt.directive == '@import "a.css"'

    def test_at_rule_with_empty_block(self):
        block = make_at_rule("media", "print", [])
        assert block.nodes == ()
        assert block.has_block

    def test_directive_without_params(self):
        assert make_at_rule("font-face", nodes=[]).directive == "@font-face"

    def test_nodes_are_frozen(self):
        rule = make_rule(".a")
        with pytest.raises(AttributeError):
            rule.selector = ".b"  # type: ignore[misc]


class TestWrapInAtRules:
    def test_no_directives_returns_node(self):
        rule = make_rule(".a")
        assert wrap_in_at_rules(rule, []) is rule

    def test_outermost_first(self):
        rule = make_rule(".a", [Declaration("color", "red")])
        wrapped = wrap_in_at_rules(rule, [("media", "print"), ("supports", "(display: grid)")])
        assert wrapped == AtRule(
            "media", "print", (AtRule("supports", "(display: grid)", (rule,)),)
        )


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


class TestIterNodes:
    def test_depth_first_document_order(self):
        tree = [
            Rule(".a", (Declaration("color", "red"),)),
            AtRule("media", "print", (Rule(".b", (Declaration("margin", 0),)),)),
            AtRule("import", '"x.css"'),
        ]
        walked = [(depth, type(node).__name__) for depth, node in iter_nodes(tree)]
        assert walked == [
            (0, "Rule"),
            (1, "Declaration"),
            (0, "AtRule"),
            (1, "Rule"),
            (2, "Declaration"),
            (0, "AtRule"),
        ]
