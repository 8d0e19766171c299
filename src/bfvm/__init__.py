
from .instructions import SYMBOLS, Instruction
from .lexer import tokenize, to_source
from .brackets import find_matching_loop_end, find_matching_loop_start
from .errors import InputExhausted, UnbalancedLoopEnd, UnbalancedLoopStart, VMError
from .state import DEFAULT_TAPE_SIZE, MachineState
from .vm import VM
from .api import RunOptions, RunResult, dump_tape, read_source, run_file, run_program, run_string

__all__ = [
    'SYMBOLS',
    'Instruction',
    'tokenize',
    'to_source',
    'find_matching_loop_end',
    'find_matching_loop_start',
    'VMError',
    'UnbalancedLoopStart',
    'UnbalancedLoopEnd',
    'InputExhausted',
    'DEFAULT_TAPE_SIZE',
    'MachineState',
    'VM',
    'RunOptions',
    'RunResult',
    'dump_tape',
    'run_program',
    'run_string',
    'run_file',
    'read_source',
]
