# validate.py
import json
import logging
from pathlib import Path

import jsonschema
from tqdm import tqdm

logger = logging.getLogger(__name__)

SCHEMA_FILE = Path(__file__).resolve().parent / "trace_schema.json"


def load_schema(schema_path=SCHEMA_FILE):
    return json.loads(Path(schema_path).read_text(encoding='utf-8'))


def validate_trace(data, schema=None):
    """Raise jsonschema.ValidationError if `data` is not a valid trace object."""
    jsonschema.validate(instance=data, schema=schema or load_schema())


def validate_trace_file(json_path, schema=None):
    """Validate one trace file. Returns (ok, message)."""
    json_path = Path(json_path)
    try:
        data = json.loads(json_path.read_text(encoding='utf-8'))
        validate_trace(data, schema)
    except jsonschema.exceptions.ValidationError as e:
        return False, f"{json_path.name} failed validation: {e.message} (path: {list(e.path)})"
    except FileNotFoundError:
        return False, f"File not found: {json_path}"
    except json.JSONDecodeError:
        return False, f"File content is not valid JSON format: {json_path}"
    return True, f"{json_path.name} conforms to the trace schema."


def collect_trace_files(paths):
    files = []
    for path in map(Path, paths):
        if path.is_dir():
            files.extend(sorted(path.rglob("*.json")))
        else:
            files.append(path)
    return files


def validate_paths(paths, show_progress=True):
    """
    Validate every .json file under `paths` (files or directories).
    Returns (success_count, failures) where failures is a list of messages.
    """
    files = collect_trace_files(paths)
    if not files:
        logger.warning("No .json files found in %s", [str(p) for p in paths])
        return 0, []

    schema = load_schema()
    success_count = 0
    failures = []
    for json_file in tqdm(files, desc="Validating", unit="file", disable=not show_progress):
        ok, message = validate_trace_file(json_file, schema)
        if ok:
            success_count += 1
            logger.debug(message)
        else:
            failures.append(message)
            tqdm.write(f"[Failed] {message}")

    logger.info("Validation complete. Total: %d files, Success: %d, Failed: %d",
                len(files), success_count, len(failures))
    return success_count, failures
