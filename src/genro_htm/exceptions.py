# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""genro-htm exceptions."""

from __future__ import annotations


class HtmError(Exception):
    """Base exception for genro-htm errors."""

    pass


class InvalidNodeError(HtmError, TypeError):
    """Raised when a value that is not a Node is used as one.

    Construction and join accept Node instances and None; anything else
    (a bare string, a number) is rejected here instead of failing later
    during rendering.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"expected a Node or None, got {type(value).__name__}: {value!r}"
        )
