from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .instructions import Program
from .lexer import tokenize
from .state import DEFAULT_TAPE_SIZE
from .vm import VM


@dataclass(frozen=True)
class RunOptions:
    tape_size: int = DEFAULT_TAPE_SIZE
    trace: bool = False


@dataclass(frozen=True)
class RunResult:
    output: bytes
    tape: bytes
    data_pointer: int
    steps: int
    trace: Tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return self.output.decode('latin-1')


def run_program(program: Program, *, stdin: bytes = b"", options: Optional[RunOptions] = None) -> RunResult:
    opts = options or RunOptions()
    out = io.BytesIO()
    vm = VM(opts.tape_size, input_source=io.BytesIO(stdin), output_sink=out, trace=opts.trace)
    vm.run(program)
    st = vm.state
    return RunResult(
        output=out.getvalue(),
        tape=st.tape.tobytes(),
        data_pointer=st.data_pointer,
        steps=st.step_count,
        trace=tuple(st.trace),
    )


def run_string(source: str, *, stdin: bytes = b"", options: Optional[RunOptions] = None) -> RunResult:
    return run_program(tokenize(source), stdin=stdin, options=options)


def run_file(
    path: str | Path,
    *,
    stdin: bytes = b"",
    options: Optional[RunOptions] = None,
    encoding: str = "utf-8",
) -> RunResult:
    return run_string(read_source(path, encoding=encoding), stdin=stdin, options=options)


def read_source(path: str | Path, *, encoding: str = "utf-8") -> str:
    """Read program text. Undecodable bytes can only be comments, so they are replaced."""
    return Path(path).read_text(encoding=encoding, errors="replace")


def dump_tape(tape, *, cells: int = 64, width: int = 8) -> str:
    """Render the first ``cells`` tape values as rows of ``width`` decimals."""
    values = [int(b) for b in tape[:cells]]
    rows = []
    for i in range(0, len(values), width):
        row = " ".join(f"{v:3d}" for v in values[i:i + width])
        rows.append(f"{i:6d}: {row}")
    return "\n".join(rows)
