from __future__ import annotations

from enum import IntEnum
from typing import Optional, Sequence


class Instruction(IntEnum):
    PTR_INC = 0     # >  move the data pointer right
    PTR_DEC = 1     # <  move the data pointer left
    CELL_INC = 2    # +  increment the current cell
    CELL_DEC = 3    # -  decrement the current cell
    OUTPUT = 4      # .  write the current cell to the output sink
    INPUT = 5       # ,  read one byte from the input source into the current cell
    LOOP_START = 6  # [  jump to the matching ] if the current cell is zero
    LOOP_END = 7    # ]  jump back to the matching [ if the current cell is nonzero

    @property
    def symbol(self) -> str:
        return SYMBOLS[self.value]

    @classmethod
    def from_symbol(cls, ch: str) -> Optional["Instruction"]:
        return _BY_SYMBOL.get(ch)


SYMBOLS = "><+-.,[]"

_BY_SYMBOL = {ch: Instruction(i) for i, ch in enumerate(SYMBOLS)}

Program = Sequence[Instruction]
