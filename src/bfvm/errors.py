from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .instructions import Program
from .lexer import to_source


def _build_context(program: Program, address: int, *, context: int = 12) -> str:
    source = to_source(program)
    if not source:
        return "       | (empty program)"

    idx = min(max(0, address), len(source) - 1)
    start = max(0, idx - context)
    end = min(len(source), idx + context + 1)

    window = source[start:end]
    caret = ' ' * (idx - start) + '^'
    return f"{start:6d} | {window}\n       | {caret}"


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'loop_start':
        return 'Every "[" needs a "]" later in the program. Check for a missing "]" or an extra "[".'
    if kind == 'loop_end':
        return 'Every "]" needs a "[" earlier in the program. Check for a missing "[" or an extra "]".'
    if kind == 'input':
        return 'The program read more bytes than were supplied. Provide more input on stdin.'
    return None


@dataclass
class VMError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class UnbalancedLoopStart(VMError):
    address: int
    context: str


@dataclass
class UnbalancedLoopEnd(VMError):
    address: int
    context: str


@dataclass
class InputExhausted(VMError):
    address: int
    context: str


def _format(title: str, detail: str, *, program: Program, address: int, kind: str) -> Tuple[str, str]:
    ctx = _build_context(program, address)
    hint = _hint_for(kind)
    hint_block = f"\nHint: {hint}" if hint else ""
    return f"{title}: {detail} (address {address})\n{ctx}{hint_block}", ctx


def make_unbalanced_loop_start(*, program: Program, address: int) -> UnbalancedLoopStart:
    message, ctx = _format(
        'UnbalancedLoopStart', 'no matching "]" found',
        program=program, address=address, kind='loop_start',
    )
    return UnbalancedLoopStart(message=message, address=address, context=ctx)


def make_unbalanced_loop_end(*, program: Program, address: int) -> UnbalancedLoopEnd:
    message, ctx = _format(
        'UnbalancedLoopEnd', 'no matching "[" found',
        program=program, address=address, kind='loop_end',
    )
    return UnbalancedLoopEnd(message=message, address=address, context=ctx)


def make_input_exhausted(*, program: Program, address: int) -> InputExhausted:
    message, ctx = _format(
        'InputExhausted', 'input source is empty',
        program=program, address=address, kind='input',
    )
    return InputExhausted(message=message, address=address, context=ctx)
