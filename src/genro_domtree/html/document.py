# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlDocument - the root <html> element preceded by the doctype line."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .element import HtmlNode


class HtmlDocument(HtmlNode):
    """An <html> element rendered as a complete document.

    Usage:
        >>> doc = HtmlDocument(attrs={'lang': 'en'})
        >>> doc(HtmlNode('head'), HtmlNode('body', None, ['Hello']))
        >>> print(doc)
        <!DOCTYPE html>
        <html lang="en"><head></head><body>Hello</body></html>

    Attributes:
        DOCTYPE: The line emitted before the element markup.
    """

    __slots__ = ()

    DOCTYPE = '<!DOCTYPE html>'

    def __init__(
        self,
        tag_name: str = 'html',
        attrs: Mapping[Any, Any] | None = None,
        children: Iterable[Any] | None = None,
        is_void: bool = False,
    ) -> None:
        super().__init__(tag_name, attrs, children, is_void)

    def render(self) -> str:
        return f"{self.DOCTYPE}\n{super().render()}"
