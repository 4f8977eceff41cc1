# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Reference ids for cross-linking elements (label ``for``, aria ids...).

Ids come from a :class:`RefSequence` owned by the caller, typically one
per page render, so output is deterministic.

Example:
    >>> refs = RefSequence()
    >>> email = refs.new_ref()
    >>> str(email)
    '_1'
    >>> form = HtmlNode('form')(
    ...     HtmlNode('label', {'for': email}, ['Email']),
    ...     HtmlNode('input', {'id': email, 'type': 'email'}, is_void=True),
    ... )
"""

from __future__ import annotations

_DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'


def to_base36(number: int) -> str:
    """Format a non-negative integer in base 36 (lowercase)."""
    if number < 0:
        raise ValueError(f"Cannot format negative number: {number}")
    if number == 0:
        return '0'
    digits = []
    while number:
        number, rest = divmod(number, 36)
        digits.append(_DIGITS[rest])
    return ''.join(reversed(digits))


class HtmlRef:
    """A reference id, usable as an attribute value or as text.

    Example:
        >>> str(HtmlRef('main'))
        'main'
    """

    __slots__ = ('ref',)

    def __init__(self, ref: str) -> None:
        if not ref:
            raise ValueError("HtmlRef requires a non-empty id; use RefSequence.new_ref()")
        self.ref = ref

    def __str__(self) -> str:
        return self.ref

    def __repr__(self) -> str:
        return f"HtmlRef({self.ref!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HtmlRef):
            return self.ref == other.ref
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.ref)


class RefSequence:
    """Monotonic counter producing ``'_' + base36(n)`` reference ids.

    Attributes:
        counter: The last number handed out.
    """

    __slots__ = ('counter', 'prefix')

    def __init__(self, start: int = 0, prefix: str = '_') -> None:
        """Initialize a RefSequence.

        Args:
            start: The first id is ``start + 1``.
            prefix: String prepended to every id.
        """
        self.counter = start
        self.prefix = prefix

    def __repr__(self) -> str:
        return f"RefSequence(counter={self.counter})"

    def next_id(self) -> str:
        """Advance the counter and return the new id string."""
        self.counter += 1
        return f"{self.prefix}{to_base36(self.counter)}"

    def new_ref(self, ref: str = '') -> HtmlRef:
        """Return HtmlRef(ref), or a fresh id from this sequence if ref is empty."""
        return HtmlRef(ref or self.next_id())
