"""Request classifier turning a decoded JSON body into one typed operation.

Classification logic:
- Filters the body keys down to the recognized operation names.
- Rejects bodies where that filtered count is not exactly one. Unrecognized
  keys are ignored and never counted.
- Validates the payload shape of the selected key in the same pass.

Integer semantics:
- JSON does not distinguish `5` from `5.0`, so integral floats are accepted
  and converted to `int`.
- Booleans, NaN, infinities, non-integral floats, and non-numbers are rejected.
- Array elements beyond +/-(2**53 - 1) are rejected; JSON numbers past that
  bound are not exact integers.

Failure handling:
- Every rejection raises `RequestValidationError` carrying the message that is
  returned to the caller with HTTP 400.
"""

import math

from bfhl.core.operations import (
    OPERATION_KEYS,
    AIOperation,
    FibonacciOperation,
    HcfOperation,
    LcmOperation,
    Operation,
    PrimeOperation,
)


FIBONACCI_MIN = 1
FIBONACCI_MAX = 50
MAX_ARRAY_LENGTH = 1000
# Largest integer a JSON number carries exactly (IEEE-754 double).
MAX_SAFE_INTEGER = 2**53 - 1

EXACTLY_ONE_MESSAGE = (
    "Request body must contain exactly one of: " + ", ".join(OPERATION_KEYS)
)

_ARRAY_OPERATIONS = {
    "prime": PrimeOperation,
    "lcm": LcmOperation,
    "hcf": HcfOperation,
}


class RequestValidationError(ValueError):
    """Raised when the request body does not describe exactly one valid operation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _as_integer(value) -> int | None:
    """Return `value` as an `int` when it is a finite integral JSON number, else `None`."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return None


def _classify_fibonacci(value) -> FibonacciOperation:
    count = _as_integer(value)
    if count is None:
        raise RequestValidationError("fibonacci must be an integer")
    if count < FIBONACCI_MIN or count > FIBONACCI_MAX:
        raise RequestValidationError(
            f"fibonacci must be between {FIBONACCI_MIN} and {FIBONACCI_MAX}"
        )
    return FibonacciOperation(count=count)


def _classify_array(key: str, value) -> Operation:
    if not isinstance(value, list) or not value:
        raise RequestValidationError(f"{key} must be a non-empty array of integers")

    numbers = []
    for item in value:
        number = _as_integer(item)
        if number is None or abs(number) > MAX_SAFE_INTEGER:
            raise RequestValidationError(f"{key} array must contain only integers")
        numbers.append(number)

    # Size is checked only once the content is known to be valid.
    if len(numbers) > MAX_ARRAY_LENGTH:
        raise RequestValidationError(f"{key} array is too large")

    return _ARRAY_OPERATIONS[key](values=tuple(numbers))


def _classify_ai(value) -> AIOperation:
    if not isinstance(value, str) or not value.strip():
        raise RequestValidationError("AI must be a non-empty string question")
    return AIOperation(question=value.strip())


def classify_request(body) -> Operation:
    """Route a decoded JSON body to exactly one typed operation.

    Args:
        body: Decoded JSON value. Anything other than an object is treated as
            a body without recognized keys.

    Returns:
        The typed `Operation` for the single recognized key.

    Raises:
        RequestValidationError: Zero or several recognized keys, or a payload
            of the wrong shape for the selected key.
    """
    if not isinstance(body, dict):
        raise RequestValidationError(EXACTLY_ONE_MESSAGE)

    keys = [key for key in body if key in OPERATION_KEYS]
    if len(keys) != 1:
        raise RequestValidationError(EXACTLY_ONE_MESSAGE)

    key = keys[0]
    value = body[key]

    if key == "fibonacci":
        return _classify_fibonacci(value)
    if key in _ARRAY_OPERATIONS:
        return _classify_array(key, value)
    return _classify_ai(value)
