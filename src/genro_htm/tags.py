# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Named HTML tag constructors.

Each function is a direct call into make() or make_self_closing() with a
fixed tag. For tags without a named helper use the ``h`` factory, which
builds a constructor for any tag name on attribute access:

Example:
    >>> from genro_htm.tags import h, div
    >>> h.section(div(), class_='news').render()
    '<section class="news"><div></div></section>'
    >>> h.wbr().render()
    '<wbr/>'

Names that clash with Python builtins or keywords carry a trailing
underscore (input_, list_, h.del_).
"""

from __future__ import annotations

from typing import Any, Callable

from . import attrs
from .builder import join, make, make_self_closing, text
from .node import Element, Node, VoidElement

# Void elements per the WHATWG HTML standard
VOID_ELEMENTS: frozenset[str] = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'source', 'track', 'wbr',
})


class TagFactory:
    """Builds tag constructors on attribute access.

    ``factory.div`` returns a callable equivalent to
    ``functools.partial(make, 'div')``. Tags listed in void_elements build
    self-closing elements instead.

    Attributes:
        void_elements: Tag names rendered as self-closing.
    """

    def __init__(self, void_elements: frozenset[str] = VOID_ELEMENTS) -> None:
        self.void_elements = void_elements

    def __getattr__(self, name: str) -> Callable[..., Element | VoidElement]:
        """Return a constructor for the tag ``name``.

        Raises:
            AttributeError: If name starts with an underscore.
        """
        if name.startswith('_'):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")
        return self._make_tag_method(name.rstrip('_'))

    def _make_tag_method(self, tag: str) -> Callable[..., Element | VoidElement]:
        """Create a constructor for a specific tag."""
        factory = make_self_closing if tag in self.void_elements else make

        def tag_method(*children: Node | None, **attr: Any) -> Element | VoidElement:
            return factory(tag, *children, **attr)

        tag_method.__name__ = tag
        return tag_method


h = TagFactory()


def html(*body: Node | None, **attr: Any) -> Element:
    return make('html', *body, **attr)


def head(*body: Node | None, **attr: Any) -> Element:
    return make('head', *body, **attr)


def body(*children: Node | None, **attr: Any) -> Element:
    return make('body', *children, **attr)


def main(*body: Node | None, **attr: Any) -> Element:
    return make('main', *body, **attr)


def meta(*body: Node | None, **attr: Any) -> Element:
    """<meta ...></meta>; h.meta builds the void form."""
    return make('meta', *body, **attr)


def title(template: str, *args: Any) -> Element:
    """<title> holding text, optionally formatted printf-style."""
    return make('title', text(template, *args))


def link(rel: str, href: str) -> VoidElement:
    """<link rel="..." href="..."/>"""
    return make_self_closing('link', attrs.rel(rel), attrs.href(href))


def script(src: str) -> Element:
    """<script src="..."></script>"""
    return make('script', attrs.src(src))


def span(*body: Node | None, **attr: Any) -> Element:
    return make('span', *body, **attr)


def div(*body: Node | None, **attr: Any) -> Element:
    return make('div', *body, **attr)


def h1(*body: Node | None, **attr: Any) -> Element:
    return make('h1', *body, **attr)


def h2(*body: Node | None, **attr: Any) -> Element:
    return make('h2', *body, **attr)


def h3(*body: Node | None, **attr: Any) -> Element:
    return make('h3', *body, **attr)


def h4(*body: Node | None, **attr: Any) -> Element:
    return make('h4', *body, **attr)


def button(*body: Node | None, **attr: Any) -> Element:
    return make('button', *body, **attr)


def list_(ordered: bool, *items: Node | None, **attr: Any) -> Element:
    """<ol> if ordered, else <ul>."""
    return make('ol' if ordered else 'ul', *items, **attr)


def list_item(*body: Node | None, **attr: Any) -> Element:
    return make('li', *body, **attr)


def a(href: str, *body: Node | None, **attr: Any) -> Element:
    """<a> with href added after any attributes given in body."""
    return make('a', *body, attrs.href(href), **attr)


def img(src: str, *attributes: Node | None, **attr: Any) -> VoidElement:
    """<img .../> with src added after the given attributes."""
    return make_self_closing('img', *attributes, attrs.src(src), **attr)


def br() -> VoidElement:
    return make_self_closing('br')


def hr() -> VoidElement:
    return make_self_closing('hr')


def code(*body: Node | None, **attr: Any) -> Element:
    return make('code', *body, **attr)


def pre(*body: Node | None, **attr: Any) -> Element:
    return make('pre', *body, **attr)


def form(*body: Node | None, **attr: Any) -> Element:
    return make('form', *body, **attr)


def input_(*body: Node | None, **attr: Any) -> Element:
    """<input ...></input>; h.input builds the void form."""
    return make('input', *body, **attr)


def textarea(*body: Node | None, **attr: Any) -> Element:
    return make('textarea', *body, **attr)


def select(*body: Node | None, **attr: Any) -> Element:
    return make('select', *body, **attr)


def option(*body: Node | None, **attr: Any) -> Element:
    return make('option', *body, **attr)


def label(for_name: str, *body: Node | None, **attr: Any) -> Element:
    """<label> with a ``for`` attribute appended after everything else."""
    return join(make('label', *body, **attr), attrs.for_(for_name))
