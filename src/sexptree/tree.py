"""
Tree nodes produced by the builder.

A tree is made of two node kinds:
- Leaf: wraps one Identifier or Number
- Group: an ordered, unnamed sequence of child nodes

Examples:
    (123 world)
    → Group[Group[Leaf(Number(123.0)), Leaf(Identifier('world'))]]

Nodes are frozen; they are built once by the builder and never modified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

from .lexer import Identifier, Number

# Plain-data form of a tree: identifiers as str, numbers as float, groups as lists
PlainValue = Union[str, float, List["PlainValue"]]


@dataclass(frozen=True)
class Leaf:
    """A tree node holding a single identifier or number."""

    unit: Union[Identifier, Number]

    def __post_init__(self):
        if not isinstance(self.unit, (Identifier, Number)):
            raise ValueError(
                f"Leaf can only hold an Identifier or Number, not {type(self.unit).__name__}"
            )

    @property
    def is_leaf(self) -> bool:
        return True

    @property
    def value(self) -> Union[str, float]:
        """The identifier text or the numeric value."""
        if isinstance(self.unit, Identifier):
            return self.unit.text
        return self.unit.value

    def to_python(self) -> PlainValue:
        return self.value

    def __repr__(self) -> str:
        return f"Leaf({self.unit!r})"


@dataclass(frozen=True)
class Group:
    """
    An ordered list of child nodes, one per parenthesis scope.

    Groups are positional: they have no name, and the first child carries no
    special meaning.
    """

    children: Tuple[Node, ...] = ()

    def __post_init__(self):
        # Accept any iterable of nodes but always store a tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_leaf(self) -> bool:
        return False

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)

    def __getitem__(self, index: int) -> Node:
        return self.children[index]

    def leaves(self) -> Iterator[Leaf]:
        """Iterate over all leaves, depth-first in source order."""
        stack = [iter(self.children)]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
            elif child.is_leaf:
                yield child
            else:
                stack.append(iter(child.children))

    @property
    def leaf_count(self) -> int:
        return sum(1 for _ in self.leaves())

    @property
    def depth(self) -> int:
        """
        Number of nested group levels below this one.

        A group whose children are all leaves has depth 0.
        """
        deepest = 0
        pending = [(self, 0)]
        while pending:
            group, level = pending.pop()
            deepest = max(deepest, level)
            pending.extend(
                (child, level + 1) for child in group.children if not child.is_leaf
            )
        return deepest

    def to_python(self) -> PlainValue:
        """Convert to nested lists of str and float (JSON friendly)."""
        result: List[PlainValue] = []
        stack = [(iter(self.children), result)]
        while stack:
            children, target = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
            elif child.is_leaf:
                target.append(child.value)
            else:
                nested: List[PlainValue] = []
                target.append(nested)
                stack.append((iter(child.children), nested))
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if len(left.children) != len(right.children):
                return False
            for a, b in zip(left.children, right.children):
                if isinstance(a, Group) and isinstance(b, Group):
                    pending.append((a, b))
                elif a != b:
                    return False
        return True

    def __hash__(self) -> int:
        return hash((self.leaf_count, self.depth, tuple(leaf.value for leaf in self.leaves())))

    def __repr__(self) -> str:
        parts = []
        pending: List[Union[Node, str]] = [self]
        while pending:
            item = pending.pop()
            if isinstance(item, str):
                parts.append(item)
            elif item.is_leaf:
                parts.append(repr(item))
            else:
                parts.append("Group[")
                pending.append("]")
                # Pushed in reverse so children pop in source order
                for index in range(len(item.children) - 1, -1, -1):
                    pending.append(item.children[index])
                    if index:
                        pending.append(", ")
        return "".join(parts)


Node = Union[Leaf, Group]


__all__ = ["Leaf", "Group", "Node", "PlainValue"]
