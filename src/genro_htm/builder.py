# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Generic node constructors and control-flow helpers.

Every named tag and attribute helper is a thin call into make(),
make_self_closing() or attr(). Use these directly for custom or
non-standard tags.

Example:
    >>> page = make('section', attr('id', 'news'),
    ...             map_nodes(['a', 'b'], lambda s: make('p', text(s))))
    >>> page.render()
    '<section id="news"><p>a</p><p>b</p></section>'
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, TypeVar

from .node import (
    EMPTY,
    Attribute,
    Container,
    Element,
    Fragment,
    Node,
    Text,
    VoidElement,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


def attr_name(name: str) -> str:
    """Convert a Python keyword name into an attribute key.

    A trailing underscore is dropped and the remaining underscores become
    hyphens.

    Examples:
        >>> attr_name('class_')
        'class'
        >>> attr_name('data_user_id')
        'data-user-id'
    """
    return name.rstrip('_').replace('_', '-')


def keyword_attrs(attrs: dict[str, Any]) -> list[Attribute]:
    """Turn keyword arguments into attribute nodes, in keyword order.

    Names go through attr_name(). None and False drop the attribute,
    True gives a boolean attribute whose value repeats its key
    (``disabled=True`` -> ``disabled="disabled"``), anything else is
    converted with str().
    """
    nodes: list[Attribute] = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        key = attr_name(key)
        nodes.append(Attribute(key, key if value is True else value))
    return nodes


def make(tag: str, *children: Node | None, **attrs: Any) -> Element:
    """Create an element with the given tag.

    Attribute nodes among children become attributes of the element.
    Keyword attributes count as attribute nodes placed after all the
    positional arguments (see keyword_attrs()).

    Example:
        >>> make('div', attr('id', 'x'), text('hi'), class_='box').render()
        '<div id="x" class="box">hi</div>'
    """
    return Element(tag, (*children, *keyword_attrs(attrs)))


def make_self_closing(tag: str, *children: Node | None, **attrs: Any) -> VoidElement:
    """Create a self-closing element. Non-attribute children are not rendered."""
    return VoidElement(tag, (*children, *keyword_attrs(attrs)))


def fragment(*children: Node | None) -> Fragment:
    """Group children without a wrapping tag. Attributes are discarded."""
    return Fragment(children)


def attr(key: str, value: object) -> Attribute:
    """Create an attribute to pass to an element constructor or join()."""
    return Attribute(key, value)


def text(template: object, *args: Any) -> Text:
    """Create a text node.

    With args, template is interpolated printf-style (``template % args``)
    when the node is built, not when it is rendered.

    Example:
        >>> text('%d items', 3).render()
        '3 items'
    """
    if args:
        template = template % args
    return Text(template)


def empty() -> Node:
    """Return the empty node."""
    return EMPTY


def cond(condition: Any, when_true: Node, when_false: Node) -> Node:
    """Return when_true if condition is truthy, else when_false."""
    if condition:
        return when_true
    return when_false


def when(condition: Any, when_true: Node) -> Node:
    """Return when_true if condition is truthy, else the empty node."""
    return cond(condition, when_true, EMPTY)


def map_nodes(items: Iterable[T] | None, transform: Callable[[T], Node]) -> Node:
    """Apply transform to each item and group the results in a fragment.

    Returns the empty node when items is None or yields nothing.
    """
    if items is None:
        return EMPTY
    return map_indexed(items, lambda item, _index: transform(item))


def map_indexed(
    items: Iterable[T] | None, transform: Callable[[T, int], Node]
) -> Node:
    """Like map_nodes(), but transform also receives the item's index."""
    if items is None:
        return EMPTY
    nodes = [transform(item, index) for index, item in enumerate(items)]
    if not nodes:
        return EMPTY
    return Fragment(nodes)


def join(parent: Node, *children: Node | None, **attrs: Any) -> Node:
    """Append children and attributes to parent in place and return it.

    Uses the same rule as construction: attribute nodes extend the
    attribute list, other nodes extend the children, and keyword
    attributes follow them. Joining onto make(tag, *args, **kw) renders
    like make(tag, *args, *keyword_attrs(kw), *children). If parent
    cannot hold children (text, attribute, empty) it is returned untouched.

    Not synchronized: do not join onto a node that is being rendered
    by another thread.

    Example:
        >>> shared = fragment(attr('class', 'card'), text('body'))
        >>> join(make('div'), shared).render()
        '<div>body</div>'
        >>> join(make('div'), attr('class', 'card'), text('body')).render()
        '<div class="card">body</div>'
    """
    if isinstance(parent, Container):
        parent.extend((*children, *keyword_attrs(attrs)))
    else:
        logger.debug("join() on non-extensible node ignored: %r", parent)
    return parent
