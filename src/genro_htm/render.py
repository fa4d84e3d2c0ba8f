# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Markup renderer.

Serializes a node tree depth-first into a string. Rendering never mutates
the tree, so the same node can be rendered any number of times.

By default nothing is escaped: text and attribute values are written
verbatim and the caller is responsible for safe content. Pass
``escape=True`` to escape them with :func:`html.escape`.

Example:
    >>> from genro_htm import div, h1, text, class_
    >>> render(div(class_('box'), h1(text('Hi'))))
    '<div class="box"><h1>Hi</h1></div>'
"""

from __future__ import annotations

import logging
from html import escape as html_escape

from .exceptions import InvalidNodeError
from .node import (
    Attribute,
    Container,
    Element,
    Empty,
    Fragment,
    Node,
    Text,
    VoidElement,
)

logger = logging.getLogger(__name__)


class _ClosingTag(str):
    """Closing tag queued on the render stack behind its children."""

    __slots__ = ()


def render(node: Node | None, escape: bool = False) -> str:
    """Render a node to markup.

    The tree is walked with an explicit stack, so nesting depth is not
    bounded by the interpreter's recursion limit.

    Args:
        node: The node to render. None renders to an empty string.
        escape: If True, escape text content and attribute values.

    Returns:
        The markup string.

    Raises:
        InvalidNodeError: If a node is not one of the known node classes.
    """
    parts: list[str] = []
    stack: list[object] = [node]

    while stack:
        item = stack.pop()
        if isinstance(item, _ClosingTag):
            parts.append(item)
        elif item is None or isinstance(item, Empty):
            continue
        elif isinstance(item, Text):
            parts.append(html_escape(item.content, quote=False) if escape else item.content)
        elif isinstance(item, Attribute):
            parts.append(_format_attr(item.key, item.value, escape))
        elif isinstance(item, Fragment):
            stack.extend(reversed(item.children))
        elif isinstance(item, (Element, VoidElement)):
            if not item.tag:
                logger.debug("Skipping element with empty tag: %r", item)
                continue
            parts.append(_opening_tag(item, escape))
            if isinstance(item, VoidElement):
                parts.append("/>")
            else:
                parts.append(">")
                stack.append(_ClosingTag(f"</{item.tag}>"))
                stack.extend(reversed(item.children))
        else:
            raise InvalidNodeError(item)

    return "".join(parts)


def _format_attr(key: str, value: str, escape: bool) -> str:
    if escape:
        value = html_escape(value, quote=True)
    return f'{key}="{value}"'


def _opening_tag(node: Container, escape: bool) -> str:
    attrs = " ".join(_format_attr(k, v, escape) for k, v in node.attrs)
    return f"<{node.tag} {attrs}" if attrs else f"<{node.tag}"
