from __future__ import annotations

import sys
from typing import BinaryIO, Callable, Optional

from .brackets import find_matching_loop_end, find_matching_loop_start
from .errors import make_input_exhausted
from .instructions import Instruction, Program
from .state import DEFAULT_TAPE_SIZE, MachineState


class VM:
    """Fetch-decode-execute engine over a fixed-size tape of 8-bit cells.

    The tape wraps in both directions and cells wrap modulo 256. Loop
    boundaries are matched by scanning the program each time one is crossed.
    Input and output are explicit byte streams; when omitted they fall back to
    the process stdin/stdout buffers at the moment they are used.
    """

    def __init__(
        self,
        tape_size: int = DEFAULT_TAPE_SIZE,
        *,
        input_source: Optional[BinaryIO] = None,
        output_sink: Optional[BinaryIO] = None,
        trace: bool = False,
        trace_sink: Optional[Callable[[str], None]] = None,
    ):
        self.input_source = input_source
        self.output_sink = output_sink
        self.state = MachineState.fresh(
            tape_size, is_tracing=trace or trace_sink is not None, trace_sink=trace_sink,
        )

    @property
    def tape_size(self) -> int:
        return self.state.tape_size

    def reset(self) -> None:
        self.state.reset()

    def run(self, program: Program) -> None:
        self.reset()
        while self.state.instruction_pointer < len(program):
            self._execute(program)

    def step(self, program: Program) -> bool:
        """Execute a single instruction. Returns False once the program has ended."""
        if self.state.instruction_pointer >= len(program):
            return False
        self._execute(program)
        return self.state.instruction_pointer < len(program)

    def _execute(self, program: Program) -> None:
        st = self.state
        ip = st.instruction_pointer
        # plain ints are accepted; anything outside the eight opcodes is a ValueError
        op = Instruction(program[ip])

        if st.is_tracing:
            st.add_trace(
                f"step {st.step_count}: ip={ip} op={op.symbol} dp={st.data_pointer} cell={st.current_cell}"
            )

        if op is Instruction.PTR_INC:
            st.data_pointer = (st.data_pointer + 1) % len(st.tape)
        elif op is Instruction.PTR_DEC:
            st.data_pointer = (st.data_pointer - 1) % len(st.tape)
        elif op is Instruction.CELL_INC:
            st.tape[st.data_pointer] = (st.current_cell + 1) & 0xFF
        elif op is Instruction.CELL_DEC:
            st.tape[st.data_pointer] = (st.current_cell - 1) & 0xFF
        elif op is Instruction.OUTPUT:
            self._write(st.current_cell)
        elif op is Instruction.INPUT:
            st.tape[st.data_pointer] = self._read(program, ip)
        elif op is Instruction.LOOP_START:
            if st.current_cell == 0:
                ip = find_matching_loop_end(ip, program)
        elif op is Instruction.LOOP_END:
            if st.current_cell != 0:
                ip = find_matching_loop_start(ip, program)

        # a taken jump lands on the matching bracket itself; this moves past it
        st.instruction_pointer = ip + 1
        st.step_count += 1

    def _write(self, value: int) -> None:
        sink = self.output_sink if self.output_sink is not None else sys.stdout.buffer
        sink.write(bytes((value,)))
        flush = getattr(sink, 'flush', None)
        if flush is not None:
            flush()

    def _read(self, program: Program, address: int) -> int:
        source = self.input_source if self.input_source is not None else sys.stdin.buffer
        data = source.read(1)
        if not data:
            raise make_input_exhausted(program=program, address=address)
        return data[0]
