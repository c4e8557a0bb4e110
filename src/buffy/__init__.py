from .interpreter import UNLIMITED, Interpreter, execute
from .errors import (
    BuffyError,
    InvalidConfigurationError,
    LoopLimitExceededError,
    MalformedProgramError,
    UnmatchedCloseError,
    UnmatchedOpenError,
)
from .inputs import console, first_byte, lines_from, stream_lines
from .api import ExecuteOptions, ExecuteResult, run_file, run_string

__all__ = [
    'Interpreter',
    'execute',
    'UNLIMITED',
    'BuffyError',
    'InvalidConfigurationError',
    'MalformedProgramError',
    'UnmatchedCloseError',
    'UnmatchedOpenError',
    'LoopLimitExceededError',
    'console',
    'first_byte',
    'lines_from',
    'stream_lines',
    'ExecuteOptions',
    'ExecuteResult',
    'run_string',
    'run_file',
]
