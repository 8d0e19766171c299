#!/usr/bin/env python3
"""
Source text to instruction translation.
"""

import os
import sys
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfvm import SYMBOLS, Instruction, tokenize, to_source
from bfvm.lexer import is_code_char


def test_all_symbols_in_order():
    assert tokenize("><+-.,[]") == [
        Instruction.PTR_INC,
        Instruction.PTR_DEC,
        Instruction.CELL_INC,
        Instruction.CELL_DEC,
        Instruction.OUTPUT,
        Instruction.INPUT,
        Instruction.LOOP_START,
        Instruction.LOOP_END,
    ]


def test_unknown_characters_are_ignored():
    assert tokenize("1234567890qwertyuiopasdfghjklzxcvbnm\n\r\t") == []


def test_comments_between_instructions_keep_order():
    program = tokenize("add one: + then move > (done) and print .")
    assert program == [Instruction.CELL_INC, Instruction.PTR_INC, Instruction.OUTPUT]


def test_to_source_renders_symbols():
    source = "++[>+<-]>."
    assert to_source(tokenize(source)) == source


def test_symbol_lookup():
    for ch in SYMBOLS:
        assert is_code_char(ch)
        assert Instruction.from_symbol(ch).symbol == ch
    assert Instruction.from_symbol("x") is None
    assert not is_code_char(" ")


def test_instruction_set_is_closed_and_ordered():
    members = list(Instruction)
    assert len(members) == 8
    assert members == sorted(members)
    assert Instruction.PTR_INC < Instruction.LOOP_END


def test_is_code_char_takes_single_symbols_only():
    assert not is_code_char("")
    assert not is_code_char("><")
    assert not is_code_char("+-")


def test_to_source_accepts_plain_opcodes():
    assert to_source([2, 2, 4]) == "++."
