"""Step-by-step engines for visualizing data structures and algorithms."""

from .dispatcher import dispatch_and_generate, generate_trace, list_algorithms, run
from .errors import (AlgoVizError, InputFormatError, InvalidOperation,
                     IterationCapExceeded, PreconditionViolation, UnknownAlgorithm)
from .player import StepPlayer
from .steps import Step, StepSequence

__version__ = "0.1.0"

__all__ = [
    "AlgoVizError",
    "InputFormatError",
    "InvalidOperation",
    "IterationCapExceeded",
    "PreconditionViolation",
    "Step",
    "StepPlayer",
    "StepSequence",
    "UnknownAlgorithm",
    "dispatch_and_generate",
    "generate_trace",
    "list_algorithms",
    "run",
]
