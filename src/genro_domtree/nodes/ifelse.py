# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""IfElseNode - if / elif / else rendering inside a tree.

An IfElseNode holds ordered ``(condition, block)`` pairs and a terminal
else block. At render time conditions are evaluated in order and only
the block of the first truthy condition is rendered; later conditions
and blocks are never touched, so side effects in them do not run.

Building follows a small state machine:

    Building --else_(...) with content--> Locked

While Building, ``node(...)`` appends to the current block and
``elseif(cond)`` opens a new one. Once Locked, ``node(...)`` raises
LockedBranchError.

Example:
    >>> node = (
    ...     IfElseNode(condition=lambda: user.is_admin)('Admin panel')
    ...     .elseif(lambda: user.is_staff)('Staff tools')
    ...     .else_('Welcome')
    ... )
    >>> str(node)
    'Staff tools'
"""

from __future__ import annotations

from typing import Any, Iterable

from ..exceptions import LockedBranchError
from ..node import Node, is_thunk
from ..utils import call_thunk


class IfElseNode(Node):
    """A node rendering the first block whose condition holds.

    Conditions may be booleans, any value tested for truthiness, or
    callables called with this node at render time.

    Attributes:
        branches: List of ``(condition, block)`` pairs in declaration order.
    """

    __slots__ = ('branches', '_else_children')

    def __init__(
        self,
        children: Iterable[Any] | None = None,
        else_children: Iterable[Any] | None = None,
        condition: Any = None,
    ) -> None:
        """Initialize an IfElseNode with its first branch.

        Args:
            children: Content of the first (if) block.
            else_children: Content of the else block.
            condition: Condition of the first block.
        """
        super().__init__()
        self.branches: list[tuple[Any, list[Any]]] = []
        self._else_children: list[Any] = []
        self.push_branch(condition)
        if children:
            self(*children)
        if else_children:
            self.else_(*else_children)

    def __repr__(self) -> str:
        return (
            f"IfElseNode(branches={len(self.branches)}, "
            f"locked={self.locked})"
        )

    # ==================== Building ====================

    @property
    def locked(self) -> bool:
        """True once the else block has content."""
        return bool(self._else_children)

    @property
    def else_children(self) -> list[Any]:
        """A copy of the else block."""
        return list(self._else_children)

    @property
    def children(self) -> list[Any]:
        """All branch blocks followed by the else block, flattened."""
        flat: list[Any] = []
        for _, block in self.branches:
            flat.extend(block)
        flat.extend(self._else_children)
        return flat

    def _adopt(self, block: list[Any], children: Iterable[Any]) -> None:
        for child in children:
            if child is None:
                continue
            if isinstance(child, Node):
                child.parent = self
            block.append(child)

    def push_branch(self, condition: Any) -> IfElseNode:
        """Open a new ``(condition, block)`` pair and make it current."""
        self.branches.append((condition, []))
        return self

    def elseif(self, condition: Any) -> IfElseNode:
        """Open an elif branch; fill it by calling the node.

        Example:
            >>> node.elseif(is_premium)('Premium content')
        """
        return self.push_branch(condition)

    def else_(self, *children: Any) -> IfElseNode:
        """Append children to the else block, locking the node."""
        self._adopt(self._else_children, children)
        return self

    def __call__(self, *children: Any) -> IfElseNode:
        """Append children to the current branch block.

        Raises:
            LockedBranchError: If the else block already has content.
        """
        if self.locked:
            raise LockedBranchError(
                "Cannot add branch content after the else block"
            )
        _, block = self.branches[-1]
        self._adopt(block, children)
        return self

    def append_child(self, child: Any) -> IfElseNode:
        if child is None:
            return self
        return self(child)

    def clear_children(self) -> IfElseNode:
        """Empty every block, keeping the conditions. Unlocks the node."""
        self.branches = [(condition, []) for condition, _ in self.branches]
        self._else_children = []
        return self

    # ==================== Rendering ====================

    def _evaluate(self, condition: Any) -> bool:
        if is_thunk(condition):
            condition = call_thunk(condition, self)
        return bool(condition)

    def active_block(self) -> list[Any]:
        """Return the block that would render now, evaluating conditions."""
        for condition, block in self.branches:
            if self._evaluate(condition):
                return block
        return self._else_children

    def render(self) -> str:
        return self._render_children(self.active_block())
