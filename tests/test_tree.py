"""Tests for Leaf and Group tree nodes."""

import dataclasses

import pytest

from sexptree.builder import DEFAULT_MAX_DEPTH, parse
from sexptree.lexer import CloseParen, Identifier, Number, OpenParen
from sexptree.tree import Group, Leaf


class TestLeaf:
    """Tests for Leaf nodes."""

    def test_identifier_leaf(self):
        leaf = Leaf(Identifier("car"))
        assert leaf.is_leaf is True
        assert leaf.value == "car"

    def test_number_leaf(self):
        leaf = Leaf(Number(1.5))
        assert leaf.value == 1.5

    @pytest.mark.parametrize("unit", [OpenParen(), CloseParen()])
    def test_parens_cannot_be_leaves(self, unit):
        """Parentheses never appear as leaves."""
        with pytest.raises(ValueError, match="Identifier or Number"):
            Leaf(unit)

    def test_equality_ignores_position(self):
        """Leaves compare by content, not by source offset."""
        assert Leaf(Identifier("a", start=5)) == Leaf(Identifier("a"))
        assert Leaf(Number(1.0, text="1", start=3)) == Leaf(Number(1.0, text="1.0"))

    def test_frozen(self):
        leaf = Leaf(Identifier("a"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            leaf.unit = Identifier("b")


class TestGroup:
    """Tests for Group nodes."""

    def test_empty(self):
        group = Group()
        assert len(group) == 0
        assert group.is_leaf is False
        assert group.depth == 0
        assert group.leaf_count == 0

    def test_children_stored_as_tuple(self):
        group = Group([Leaf(Identifier("a"))])
        assert isinstance(group.children, tuple)
        assert group == Group((Leaf(Identifier("a")),))

    def test_indexing_and_iteration(self):
        a, b = Leaf(Identifier("a")), Leaf(Number(2.0))
        group = Group((a, b))
        assert group[0] is a
        assert group[-1] is b
        assert list(group) == [a, b]

    def test_frozen(self):
        group = Group()
        with pytest.raises(dataclasses.FrozenInstanceError):
            group.children = ()

    def test_depth(self):
        """Depth counts nested group levels below the node."""
        assert Group((Group(),)).depth == 1
        assert Group((Leaf(Identifier("a")), Group((Group(),)))).depth == 2

    def test_leaves_in_source_order(self):
        tree = parse("(a (b c) d)")
        assert [leaf.value for leaf in tree.leaves()] == ["a", "b", "c", "d"]

    def test_leaf_count(self):
        assert parse("(a (b (c 1)) 2)").leaf_count == 5

    def test_to_python(self):
        assert parse("((car cdr) 12.5)").to_python() == [[["car", "cdr"], 12.5]]

    def test_repr(self):
        assert repr(parse("(123 world)")) == (
            "Group[Group[Leaf(Number(123.0)), Leaf(Identifier('world'))]]"
        )

    def test_deep_tree_traversal(self):
        """Traversal does not recurse per nesting level."""
        depth = 5000
        tree = parse("(" * depth + "x" + ")" * depth, max_depth=None)
        assert tree.depth == depth
        assert [leaf.value for leaf in tree.leaves()] == ["x"]

    def test_equality_is_structural(self):
        assert parse("((a) b)") == parse("( ( a )  b )")
        assert parse("((a) b)") != parse("(a (b))")
        assert parse("(a)") != parse("(a b)")
        assert Group((Leaf(Identifier("a")),)) != Group((Group(),))

    def test_hash_matches_equality(self):
        assert hash(parse("((a) 1)")) == hash(parse("( (a)  1 )"))
        assert len({parse("(a)"), parse("(a)"), parse("(b)")}) == 2


class TestDeepTrees:
    """Trees nested as deep as the default limit allows."""

    @pytest.fixture
    def deep_tree(self):
        depth = DEFAULT_MAX_DEPTH
        return parse("(" * depth + "x" + ")" * depth)

    def test_repr(self, deep_tree):
        text = repr(deep_tree)
        depth = DEFAULT_MAX_DEPTH
        assert text == "Group[" * (depth + 1) + "Leaf(Identifier('x'))" + "]" * (depth + 1)

    def test_to_python(self, deep_tree):
        value = deep_tree.to_python()
        for _ in range(DEFAULT_MAX_DEPTH):
            assert len(value) == 1
            value = value[0]
        assert value == ["x"]

    def test_equality_and_hash(self, deep_tree):
        depth = DEFAULT_MAX_DEPTH
        other = parse("(" * depth + "x" + ")" * depth)
        assert deep_tree == other
        assert hash(deep_tree) == hash(other)
        assert deep_tree != parse("(" * depth + "y" + ")" * depth)

    def test_unlimited_depth_repr(self):
        depth = DEFAULT_MAX_DEPTH * 8
        tree = parse("(" * depth, max_depth=None)
        assert repr(tree).count("Group[") == depth + 1
        assert len(tree.to_python()) == 1
