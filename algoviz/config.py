# config.py
#
# Project-wide defaults. Runtime choices (values, delay, algorithm) come from
# the CLI; AI credentials come from the environment via ChatConfig.from_env().

TRACE_VERSION = "1.0"

# Pacing
DEFAULT_DELAY_MS = 500
ALGORITHM_DELAYS_MS = {
    "binary_search": 800,
}
# Multipliers applied to the base delay after a step of the given kind.
DEFAULT_DELAY_SCHEDULE = {
    "rotated": 0.5,
}

# Tree engine
AVL_MAX_ITERATIONS = 50

# Deeper trees are rejected by trace export (nested JSON snapshots)
MAX_EXPORT_TREE_HEIGHT = 256

# Accepted range for values typed on the command line
VALUE_MIN = -9999
VALUE_MAX = 9999

# Sample inputs used when the CLI gets no --values
SAMPLE_ARRAY = [64, 34, 25, 12, 22, 11, 90, 50]
SAMPLE_SORTED_ARRAY = [10, 20, 30, 40, 50, 60, 70, 80]
SAMPLE_TREE = [50, 30, 70, 20, 40, 60, 80]

# DSA chat
CHAT_PROVIDER = "openai-compatible"
CHAT_ENDPOINT = "https://ai.gateway.lovable.dev/v1/chat/completions"
CHAT_MODEL = "google/gemini-2.5-flash"
CHAT_FALLBACK_MODELS = ["google/gemini-2.5-pro"]
CHAT_TIMEOUT = 60.0


def delay_for(algorithm_id):
    return ALGORITHM_DELAYS_MS.get(algorithm_id, DEFAULT_DELAY_MS)
