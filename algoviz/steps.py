"""Step records and the lazy step sequence every tracker produces."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from .default_styles import style_key_for

COMPARE = "compare"
SWAP = "swap"
SHIFT = "shift"
PLACE = "place"
VISIT = "visit"
FOUND = "found"
NOT_FOUND = "not_found"
DETECT = "detect"
ROTATE = "rotate"
ROTATED = "rotated"
COMPLETE = "complete"

STEP_KINDS = (COMPARE, SWAP, SHIFT, PLACE, VISIT, FOUND, NOT_FOUND,
              DETECT, ROTATE, ROTATED, COMPLETE)


@dataclass(frozen=True)
class Step:
    """One atomic, observable unit of algorithm progress.

    `indices` holds array positions for array engines and node values for
    tree engines. `snapshot` is the structure right after the step was
    applied: a tuple for arrays, an immutable TreeNode for trees.
    """

    kind: str
    indices: Tuple[int, ...] = ()
    narration: str = ""
    snapshot: Any = field(default=None, hash=False)
    line: Optional[int] = None
    meta: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "indices", tuple(self.indices))
        object.__setattr__(self, "meta", MappingProxyType(dict(self.meta)))

    def to_delta(self):
        """Render the step as a JSON-ready delta dict."""
        operations = []
        if self.indices:
            operations.append({"op": "updateStyle", "params": {
                "indices": list(self.indices), "styleKey": style_key_for(self.kind)}})
        return {
            "kind": self.kind,
            "indices": list(self.indices),
            "narration": self.narration,
            "code_highlight": self.line,
            "meta": dict(self.meta),
            "operations": operations,
            "snapshot": snapshot_to_json(self.snapshot),
        }


def snapshot_to_json(snapshot):
    if snapshot is None:
        return None
    if hasattr(snapshot, "to_dict"):
        return snapshot.to_dict()
    return list(snapshot)


class StepSequence:
    """Lazy, finite, non-restartable sequence of Steps.

    Wraps a tracker generator. Once the generator is exhausted its return
    value becomes `result` and `done` turns true. Closing the sequence closes
    the generator at its current suspension point, so nothing past the last
    yielded step is ever applied.
    """

    def __init__(self, steps, algorithm_id=None):
        self.algorithm_id = algorithm_id
        self._steps = steps
        self.result = None
        self.done = False
        self.closed = False
        self.last_step = None
        self.step_count = 0

    def __iter__(self):
        return self

    def __next__(self):
        if self.done or self.closed:
            raise StopIteration
        try:
            step = next(self._steps)
        except StopIteration as stop:
            self.done = True
            self.result = stop.value
            raise StopIteration from None
        self.last_step = step
        self.step_count += 1
        return step

    def close(self):
        if not self.closed and not self.done:
            self._steps.close()
        self.closed = True

    def run_to_end(self):
        for _ in self:
            pass
        return self.result
