# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node classes for markup trees.

The variant set is closed:

- Text: literal content
- Attribute: a key/value pair, absorbed by the enclosing container
- Element: <tag ...>children</tag>
- VoidElement: <tag .../>
- Fragment: children with no wrapping tag
- Empty: renders to nothing (see EMPTY)

Element, VoidElement and Fragment share the Container base, which owns
the rule that splits constructor arguments into attributes and children.
"""

from __future__ import annotations

from typing import Iterable

from .exceptions import InvalidNodeError


class Node:
    """Base class of every markup node."""

    __slots__ = ()

    def render(self, escape: bool = False) -> str:
        """Serialize this node and its descendants.

        Args:
            escape: If True, escape text content and attribute values.
        """
        from .render import render
        return render(self, escape=escape)

    def __str__(self) -> str:
        return self.render()


class Text(Node):
    """A literal piece of text.

    Non-string content is converted with str().

    Example:
        >>> Text('hello').render()
        'hello'
    """

    __slots__ = ('content',)

    def __init__(self, content: object) -> None:
        self.content = str(content)

    def __repr__(self) -> str:
        return f"Text({self.content!r})"


class Attribute(Node):
    """A single key/value attribute.

    Passed as an argument to a container, it ends up in the container's
    attribute list instead of its children.
    Non-string values are converted with str().
    """

    __slots__ = ('key', 'value')

    def __init__(self, key: str, value: object) -> None:
        self.key = key
        self.value = str(value)

    def __repr__(self) -> str:
        return f"Attribute({self.key!r}, {self.value!r})"


class Empty(Node):
    """Node that renders to the empty string. Use the EMPTY instance."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = Empty()


class Container(Node):
    """Base for nodes that hold attributes and children.

    Attributes:
        tag: The tag name (empty for fragments).
        attrs: Ordered list of (key, value) pairs; duplicates are kept.
        children: Ordered list of child nodes.
    """

    __slots__ = ('tag', 'attrs', 'children')

    def __init__(self, tag: str, children: Iterable[Node | None] = ()) -> None:
        self.tag = tag
        self.attrs: list[tuple[str, str]] = []
        self.children: list[Node] = []
        self.extend(children)

    def extend(self, items: Iterable[Node | None]) -> Container:
        """Append attributes and children, keeping argument order.

        Attribute nodes go to attrs, None is skipped, any other Node
        goes to children.

        Raises:
            InvalidNodeError: If an item is neither a Node nor None.
        """
        for item in items:
            if item is None:
                continue
            if isinstance(item, Attribute):
                self.attrs.append((item.key, item.value))
            elif isinstance(item, Node):
                self.children.append(item)
            else:
                raise InvalidNodeError(item)
        return self

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.tag!r}, "
            f"attrs={len(self.attrs)}, children={len(self.children)})"
        )


class Element(Container):
    """A normal element: opening tag, children, closing tag."""

    __slots__ = ()


class VoidElement(Container):
    """A self-closing element. Children are kept but never rendered."""

    __slots__ = ()


class Fragment(Container):
    """A group of children rendered without a wrapping tag.

    Attributes attached to a fragment are kept in attrs but never rendered.
    """

    __slots__ = ()

    def __init__(self, children: Iterable[Node | None] = ()) -> None:
        super().__init__('', children)

    def __repr__(self) -> str:
        return f"Fragment(children={len(self.children)})"
