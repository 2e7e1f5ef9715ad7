# trace.py
#
# Assembles a finished run into a JSON-ready trace object:
#   {"trace_version", "algorithm", "initial_frame", "deltas", "outcome"}
# The layout is described by trace_schema.json and checked by validate.py.

import json
from pathlib import Path

from .config import TRACE_VERSION
from .default_styles import DEFAULT_STYLES
from .steps import snapshot_to_json


def array_data_state(values):
    return {
        "type": "array",
        "data": [{"index": i, "value": val, "state": "idle"} for i, val in enumerate(values)],
    }


def tree_data_state(root):
    return {"type": "tree", "data": root.to_dict() if root is not None else None}


def outcome_to_json(result, family):
    if result is None:
        return {}
    if hasattr(result, "to_dict"):
        return result.to_dict()
    key = "sorted" if family == "Sorting" else "order"
    return {key: snapshot_to_json(result)}


def build_trace(algorithm_id, algorithm_info, pseudocode, data_state, steps, result):
    """Build the trace object from already-collected steps and the run's result."""
    initial_frame = {
        "data_state": data_state,
        "pseudocode": list(pseudocode),
        "code_highlight": 1,
        "styles": DEFAULT_STYLES,
    }
    return {
        "trace_version": TRACE_VERSION,
        "algorithm": {"id": algorithm_id, **algorithm_info},
        "initial_frame": initial_frame,
        "deltas": [step.to_delta() for step in steps],
        "outcome": outcome_to_json(result, algorithm_info.get("family")),
    }


def write_trace(trace, output_path):
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(trace, f, indent=2, ensure_ascii=False)
    return output_path
