"""Loop boundary matching.

Both scans run every time a loop boundary is crossed; matched pairs are not
remembered between calls, so each crossing costs O(len(program)). A one-time
jump table would turn that into a dict lookup.
"""
from __future__ import annotations

from .errors import make_unbalanced_loop_end, make_unbalanced_loop_start
from .instructions import Instruction, Program


def find_matching_loop_end(start_address: int, program: Program) -> int:
    """Return the address of the ``]`` closing the ``[`` at ``start_address``."""
    assert program[start_address] == Instruction.LOOP_START

    depth = 0
    ip = start_address + 1
    while ip < len(program):
        op = program[ip]
        if op == Instruction.LOOP_START:
            depth += 1
        elif op == Instruction.LOOP_END:
            if depth == 0:
                return ip
            depth -= 1
        ip += 1

    raise make_unbalanced_loop_start(program=program, address=start_address)


def find_matching_loop_start(end_address: int, program: Program) -> int:
    """Return the address of the ``[`` opening the ``]`` at ``end_address``.

    A ``]`` at address 0 has nothing before it and is always unbalanced.
    """
    assert program[end_address] == Instruction.LOOP_END

    depth = 0
    ip = end_address - 1
    while ip >= 0:
        op = program[ip]
        if op == Instruction.LOOP_END:
            depth += 1
        elif op == Instruction.LOOP_START:
            if depth == 0:
                return ip
            depth -= 1
        ip -= 1

    raise make_unbalanced_loop_end(program=program, address=end_address)
