# errors.py
#
# Error taxonomy shared by every engine. Each error carries a short `kind`
# string and a `context` dict so a caller can build its own message.


class AlgoVizError(Exception):
    kind = "algoviz_error"

    def __init__(self, message, **context):
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self):
        return {"kind": self.kind, "message": self.message, "context": dict(self.context)}


class InvalidOperation(AlgoVizError):
    """Operation not allowed in the container's current state (pop on empty, ...)."""
    kind = "invalid_operation"


class PreconditionViolation(AlgoVizError):
    """An algorithm step was asked to run on input that breaks its precondition."""
    kind = "precondition_violation"


class IterationCapExceeded(AlgoVizError):
    """The AVL balancer did not converge within its safety bound."""
    kind = "iteration_cap_exceeded"


class InputFormatError(AlgoVizError):
    kind = "input_format_error"


class UnknownAlgorithm(AlgoVizError):
    kind = "unknown_algorithm"


def require_int(value, name="value"):
    """Return `value` if it is a real integer, raise InputFormatError otherwise.

    bool is rejected even though it subclasses int, and nothing is coerced.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InputFormatError(
            f"{name} must be an integer, got {value!r}", name=name, value=repr(value)
        )
    return value


def require_ints(values, name="values"):
    values = list(values)
    for position, value in enumerate(values):
        require_int(value, f"{name}[{position}]")
    return values


def parse_int(text, minimum=None, maximum=None, name="value"):
    """Parse user-typed text into an integer within [minimum, maximum]."""
    try:
        value = int(str(text).strip())
    except ValueError:
        raise InputFormatError(
            f"Please enter a valid number for {name}, got {text!r}", name=name, value=text
        ) from None
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        raise InputFormatError(
            f"{name} must be between {minimum} and {maximum}, got {value}",
            name=name, value=value, minimum=minimum, maximum=maximum,
        )
    return value
