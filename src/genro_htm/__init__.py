# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-HTM - Build HTML markup from composable node values.

A lightweight, zero-dependency library: elements, text, attributes and
fragments are combined into a tree and rendered to a string.

Example:
    >>> from genro_htm import div, h1, text, class_, when
    >>> page = div(class_('card'), h1(text('Hello')), when(False, text('hidden')))
    >>> page.render()
    '<div class="card"><h1>Hello</h1></div>'
"""

__version__ = "0.1.0"

from .attrs import alt, class_, for_, href, id_, name, rel, src, style, type_
from .builder import (
    attr,
    cond,
    empty,
    fragment,
    join,
    keyword_attrs,
    make,
    make_self_closing,
    map_indexed,
    map_nodes,
    text,
    when,
)
from .exceptions import HtmError, InvalidNodeError
from .node import (
    EMPTY,
    Attribute,
    Container,
    Element,
    Empty,
    Fragment,
    Node,
    Text,
    VoidElement,
)
from .render import render
from .tags import (
    VOID_ELEMENTS,
    TagFactory,
    a,
    body,
    br,
    button,
    code,
    div,
    form,
    h,
    h1,
    h2,
    h3,
    h4,
    head,
    hr,
    html,
    img,
    input_,
    label,
    link,
    list_,
    list_item,
    main,
    meta,
    option,
    pre,
    script,
    select,
    span,
    textarea,
    title,
)

__all__ = [
    # Nodes
    "Node",
    "Text",
    "Attribute",
    "Container",
    "Element",
    "VoidElement",
    "Fragment",
    "Empty",
    "EMPTY",
    # Constructors
    "make",
    "make_self_closing",
    "fragment",
    "attr",
    "text",
    "empty",
    "cond",
    "when",
    "map_nodes",
    "map_indexed",
    "join",
    "keyword_attrs",
    # Rendering
    "render",
    # Attributes
    "id_",
    "class_",
    "name",
    "type_",
    "style",
    "rel",
    "href",
    "alt",
    "src",
    "for_",
    # Tags
    "VOID_ELEMENTS",
    "TagFactory",
    "h",
    "html",
    "head",
    "body",
    "main",
    "meta",
    "title",
    "link",
    "script",
    "span",
    "div",
    "h1",
    "h2",
    "h3",
    "h4",
    "button",
    "list_",
    "list_item",
    "a",
    "img",
    "br",
    "hr",
    "code",
    "pre",
    "form",
    "input_",
    "textarea",
    "select",
    "option",
    "label",
    # Exceptions
    "HtmError",
    "InvalidNodeError",
]
