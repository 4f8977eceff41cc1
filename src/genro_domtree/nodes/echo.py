# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""EchoNode - hosts side-effecting rendering code.

Callable children of an EchoNode are run inside a capture scope: they
receive an :class:`EchoBuffer` to write into, anything they ``print()``
lands in the same buffer, and their return value (if not None) is
appended right after. Nothing under an EchoNode is escaped.

Example:
    >>> def legacy(out):
    ...     out.echo('<ul>')
    ...     for item in ('a', 'b'):
    ...         print(f'<li>{item}</li>', end='')
    ...     return '</ul>'
    >>> str(EchoNode([legacy]))
    '<ul><li>a</li><li>b</li></ul>'

Note:
    ``print()`` capture swaps ``sys.stdout`` for the duration of the
    render, which is process-wide. Rendering EchoNodes from several
    threads at once is not supported; write to the buffer argument
    instead of printing when that matters.
"""

from __future__ import annotations

import io
from contextlib import redirect_stdout
from typing import Any

from ..node import Node, is_thunk
from ..utils import call_thunk


class EchoBuffer(io.StringIO):
    """Output sink handed to EchoNode callables.

    Attributes:
        node: The EchoNode being rendered.
    """

    def __init__(self, node: EchoNode) -> None:
        super().__init__()
        self.node = node

    def echo(self, *values: Any) -> EchoBuffer:
        """Write the string form of each value, with no separator."""
        for value in values:
            if value is not None:
                self.write(str(value))
        return self


class EchoNode(Node):
    """A node that captures the output of its callable children."""

    __slots__ = ()

    def render(self) -> str:
        buffer = EchoBuffer(self)
        with redirect_stdout(buffer):
            for child in self._children:
                if is_thunk(child):
                    result = call_thunk(child, buffer)
                    if result is not buffer:
                        buffer.echo(result)
                else:
                    buffer.echo(child)
        return buffer.getvalue()
