from typing import List

from .instructions import Instruction, Program


def is_code_char(ch: str) -> bool:
    return Instruction.from_symbol(ch) is not None


def tokenize(source: str) -> List[Instruction]:
    """Translate source text into instructions.

    Every one of the eight symbols maps to exactly one instruction, in source
    order. Anything else (whitespace, letters, digits, punctuation) is a
    comment and is dropped without complaint.
    """
    program: List[Instruction] = []
    for ch in source:
        if is_code_char(ch):
            program.append(Instruction.from_symbol(ch))
    return program


def to_source(program: Program) -> str:
    return ''.join(Instruction(op).symbol for op in program)
