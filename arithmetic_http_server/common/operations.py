"""Arithmetic operations, their name registry and single-precision computation."""
from enum import Enum
import math
import operator
import struct
from types import MappingProxyType
from typing import Callable, Mapping, Optional


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]


class Operation(str, Enum):
    """The four supported operations, valued by their name in the URL."""

    ADD = "plus"
    SUBTRACT = "minus"
    DIVIDE = "div"
    MULTIPLY = "mul"


# Mapping of operations to the function computing them
OPERATORS: Mapping[Operation, OperatorFn] = MappingProxyType({
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.DIVIDE: operator.truediv,
    Operation.MULTIPLY: operator.mul,
})

# Read-only name -> operation table, built once at import
OPERATION_REGISTRY: Mapping[str, Operation] = MappingProxyType(
    {operation.value: operation for operation in Operation}
)


def resolve_operation(
    name: str, registry: Mapping[str, Operation] = OPERATION_REGISTRY
) -> Optional[Operation]:
    """
    Look up an operation by name, ignoring case.

    :param str name: Operation name taken from the URL
    :param Mapping registry: Name to operation table

    :return: The matching operation, or None when the name is unknown
    :rtype: Optional[Operation]
    """
    return registry.get(name.lower())


def to_float32(value: float) -> float:
    """
    Round a float to the nearest IEEE-754 single-precision value.

    Values beyond the float32 range become infinities of the same sign.

    :param float value: Double-precision value

    :return: The float32 value, widened back to a Python float
    :rtype: float
    """
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def compute(operation: Operation, first: float, second: float) -> float:
    """
    Apply an operation to two operands in single precision.

    Both operands are rounded to float32 and so is the result. Computing in double precision
    and rounding once gives the correctly rounded float32 result for these four operations.

    :param Operation operation: Operation to apply
    :param float first: Left operand
    :param float second: Right operand

    :return: float32 result, which may be infinite on overflow
    :rtype: float
    :raises ZeroDivisionError: If dividing by zero
    """
    left = to_float32(first)
    right = to_float32(second)
    if operation is Operation.DIVIDE and right == 0:
        raise ZeroDivisionError("Division by zero")
    return to_float32(OPERATORS[operation](left, right))
