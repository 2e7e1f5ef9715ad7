import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from algoviz.steps import StepSequence


def collect(generator):
    """Drain a tracker generator; returns (steps, result)."""
    sequence = StepSequence(generator)
    steps = list(sequence)
    return steps, sequence.result


@pytest.fixture
def sample_array():
    return [64, 34, 25, 12, 22, 11, 90, 50]
