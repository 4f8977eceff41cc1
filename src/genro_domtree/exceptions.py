# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""DomTree exceptions."""

from __future__ import annotations


class DomTreeError(Exception):
    """Base exception for DomTree errors."""

    pass


class InvalidTagError(DomTreeError):
    """Raised when an element is created without a tag name."""

    pass


class VoidElementError(DomTreeError):
    """Raised when a child is added to a void element."""

    pass


class LockedBranchError(DomTreeError):
    """Raised when branch content is added after the else block."""

    pass


class MapperChildError(DomTreeError):
    """Raised when children are inserted directly into an ArrayMapNode."""

    pass


class UnsupportedChildError(DomTreeError):
    """Raised in strict mode when a child cannot be rendered."""

    pass
