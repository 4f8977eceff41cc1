# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Specialized nodes - raw, slot, conditional, echo and mapping nodes."""

from .echo import EchoBuffer, EchoNode
from .ifelse import IfElseNode
from .mapping import ArrayMap, ArrayMapNode
from .raw import RawNode
from .slot import SlotNode

__all__ = [
    'ArrayMap',
    'ArrayMapNode',
    'EchoBuffer',
    'EchoNode',
    'IfElseNode',
    'RawNode',
    'SlotNode',
]
