# default_styles.py
#
# Standard default style library for exported traces.
# Every exported trace embeds DEFAULT_STYLES in its initial frame, and each
# step kind maps onto one of the element style keys below.

DEFAULT_STYLES = {

  "elementStyles": {
    "idle":             {"fill": "#FFFFFF", "stroke": "#424242", "strokeWidth": 1.5},
    "compare":          {"fill": "#FFECB3", "stroke": "#FFB300", "strokeWidth": 2},
    "sorted":           {"fill": "#E3F2FD", "stroke": "#2196F3", "strokeWidth": 1.5},
    "swapping":         {"fill": "#FFCDD2", "stroke": "#D32F2F", "strokeWidth": 2.5},
    "shifting":         {"fill": "#BBDEFB", "stroke": "#1976D2"},
    "key_element":      {"fill": "#D1F2EB", "stroke": "#009688", "strokeWidth": 2.5},

    "current_node":     {"fill": "#FFF9C4", "stroke": "#FBC02D", "strokeWidth": 3},
    "visited_node":     {"fill": "#E8EAF6", "stroke": "#3F51B5", "strokeWidth": 2},
    "found_node":       {"fill": "#C8E6C9", "stroke": "#4CAF50", "strokeWidth": 2.5},
    "imbalanced_node":  {"fill": "#FFCDD2", "stroke": "#C62828", "strokeWidth": 3},
    "rotating_node":    {"fill": "#FFE0B2", "stroke": "#F9A825", "strokeWidth": 3},
    "balanced_node":    {"fill": "#E8F5E9", "stroke": "#66BB6A", "strokeWidth": 2},
  },

  "animationStyles": {
      "default_move": {"type": "ease-in-out", "duration": 500}
  }
}

# Step kind -> element style key
KIND_STYLE_KEYS = {
    "compare": "compare",
    "swap": "swapping",
    "shift": "shifting",
    "place": "key_element",
    "visit": "current_node",
    "found": "found_node",
    "not_found": "idle",
    "detect": "imbalanced_node",
    "rotate": "rotating_node",
    "rotated": "balanced_node",
    "complete": "sorted",
}


def style_key_for(kind):
    return KIND_STYLE_KEYS.get(kind, "idle")
