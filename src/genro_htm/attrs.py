# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Named attribute constructors.

Names that clash with Python builtins or keywords carry a trailing
underscore (id_, class_, type_, for_).
"""

from __future__ import annotations

from .builder import attr
from .node import Attribute


def id_(value: str) -> Attribute:
    return attr('id', value)


def class_(value: str) -> Attribute:
    return attr('class', value)


def name(value: str) -> Attribute:
    return attr('name', value)


def type_(value: str) -> Attribute:
    return attr('type', value)


def style(value: str) -> Attribute:
    return attr('style', value)


def rel(value: str) -> Attribute:
    return attr('rel', value)


def href(value: str) -> Attribute:
    return attr('href', value)


def alt(value: str) -> Attribute:
    return attr('alt', value)


def src(value: str) -> Attribute:
    return attr('src', value)


def for_(value: str) -> Attribute:
    return attr('for', value)
