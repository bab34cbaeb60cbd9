"""
Per-run translation state.

One ``TranslationContext`` is created for every translation run and passed
to each component, so two runs never share bindings or block state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class BlockState(str, Enum):
    """Whether the current line sits inside a function body.

    There is no nesting counter: a block opened while already ``INSIDE`` is
    not tracked, and the first lone ``}`` returns to ``OUTSIDE``.
    """

    OUTSIDE = "outside"
    INSIDE = "inside"


@dataclass
class TranslationContext:
    """Mutable state shared by the components of one translation run."""

    bindings: dict[str, str] = field(default_factory=dict)
    """Variable name -> expression bound by ``name = f"{expr}"`` (last write wins)"""

    block_state: BlockState = BlockState.OUTSIDE

    def bind(self, name: str, expression: str) -> None:
        self.bindings[name] = expression

    @property
    def inside_function(self) -> bool:
        return self.block_state is BlockState.INSIDE
