from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

DEFAULT_TAPE_SIZE = 32768


def _new_tape(size: int) -> np.ndarray:
    if not isinstance(size, int) or isinstance(size, bool) or size < 1:
        raise ValueError(f"tape size must be a positive integer, got {size!r}")
    return np.zeros(size, dtype=np.uint8)


@dataclass
class MachineState:
    tape: np.ndarray = field(default_factory=lambda: _new_tape(DEFAULT_TAPE_SIZE))
    data_pointer: int = 0
    instruction_pointer: int = 0
    step_count: int = 0
    trace: List[str] = field(default_factory=list)
    is_tracing: bool = False
    # when set, trace lines go here as they happen instead of into ``trace``
    trace_sink: Optional[Callable[[str], None]] = None

    @classmethod
    def fresh(
        cls,
        tape_size: int = DEFAULT_TAPE_SIZE,
        *,
        is_tracing: bool = False,
        trace_sink: Optional[Callable[[str], None]] = None,
    ) -> "MachineState":
        return cls(tape=_new_tape(tape_size), is_tracing=is_tracing, trace_sink=trace_sink)

    @property
    def tape_size(self) -> int:
        return len(self.tape)

    @property
    def current_cell(self) -> int:
        return int(self.tape[self.data_pointer])

    def reset(self, *, tape_size: Optional[int] = None) -> None:
        if tape_size is not None and tape_size != len(self.tape):
            self.tape = _new_tape(tape_size)
        else:
            self.tape[:] = 0
        self.data_pointer = 0
        self.instruction_pointer = 0
        self.step_count = 0
        self.trace.clear()

    def add_trace(self, message: str) -> None:
        if not self.is_tracing:
            return
        if self.trace_sink is not None:
            self.trace_sink(message)
        else:
            self.trace.append(message)
