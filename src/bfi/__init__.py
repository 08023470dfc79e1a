from .instruction import Add, Sub, Right, Left, Out, In, Open, Close, Instruction
from .parser import parse, emit
from .optimizer import optimize
from .interpreter import Brainfuck
from .errors import BFIError, BFIReadError, BFIWriteError, BFIUnbalancedParensError, format_error
from .api import RunOptions, RunResult, run_file, run_string

__all__ = [
    'Add', 'Sub', 'Right', 'Left', 'Out', 'In', 'Open', 'Close', 'Instruction',
    'parse',
    'emit',
    'optimize',
    'Brainfuck',
    'BFIError',
    'BFIReadError',
    'BFIWriteError',
    'BFIUnbalancedParensError',
    'format_error',
    'RunOptions',
    'RunResult',
    'run_string',
    'run_file',
]
