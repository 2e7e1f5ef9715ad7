import dataclasses

import pytest

from algoviz.default_styles import DEFAULT_STYLES, KIND_STYLE_KEYS
from algoviz.sort import track_bubble_sort
from algoviz.steps import STEP_KINDS, SWAP, Step, StepSequence


def test_steps_are_immutable():
    step = Step(SWAP, [0, 1], "Swap", (2, 1), meta={"i": 0})
    assert step.indices == (0, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        step.kind = "compare"
    with pytest.raises(TypeError):
        step.meta["i"] = 5


def test_every_kind_has_a_defined_style():
    for kind in STEP_KINDS:
        assert KIND_STYLE_KEYS[kind] in DEFAULT_STYLES["elementStyles"]


def test_sequence_exposes_result_only_when_done():
    sequence = StepSequence(track_bubble_sort([2, 1]), "bubble_sort")
    first = next(sequence)
    assert first.kind == "compare"
    assert not sequence.done and sequence.result is None

    assert list(sequence)[-1].kind == SWAP
    assert sequence.done
    assert sequence.result == (1, 2)
    assert sequence.step_count == 2
    assert list(sequence) == []


def test_closed_sequence_yields_nothing_more():
    sequence = StepSequence(track_bubble_sort([3, 2, 1]))
    next(sequence)
    sequence.close()
    assert sequence.closed
    assert list(sequence) == []
    assert sequence.result is None
    assert sequence.last_step.kind == "compare"


def test_steps_are_hashable():
    first = Step(SWAP, (0, 1), "Swap", (2, 1), line=3, meta={"i": 0})
    same = Step(SWAP, [0, 1], "Swap", (2, 1), line=3, meta={"i": 0})
    assert hash(first) == hash(same)
    assert len({first, same}) == 1

    steps = list(StepSequence(track_bubble_sort([3, 1, 2])))
    assert set(steps) >= {steps[0], steps[-1]}
