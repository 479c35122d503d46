"""Label construction for tree nodes.

Primitive values are rendered the way a JavaScript viewer shows them:
strings in double quotes, ``null``/``undefined`` as words, booleans as
``true``/``false`` and numbers in their shortest textual form (integral
floats lose the trailing ``.0``).
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from json_tree_graph.tree.nodes import UNDEFINED, NodeKind

# Decimal exponent range JavaScript prints without exponent notation:
# 1e-7 < |v| < 1e21, expressed on the point position of 0.ddd x 10**n.
_JS_MIN_POINT = -6
_JS_MAX_POINT = 21


def classify(value: Any) -> NodeKind:
    """Return the NodeKind for a JSON value.

    ``str`` and ``bytes`` are sequences in Python but are primitives here.
    """
    if isinstance(value, Mapping):
        return NodeKind.OBJECT
    if isinstance(value, (list, tuple)):
        return NodeKind.ARRAY
    return NodeKind.PRIMITIVE


def _shortest_digits(value: float) -> tuple[str, int]:
    """Return (digits, n) with abs(value) == 0.digits x 10**n.

    Digits come from repr(), which is the shortest round-tripping form, the
    same digit string JavaScript uses.
    """
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    trimmed = len(digit_tuple) - len(digits)
    return digits, len(digits) + int(exponent) + trimmed


def _format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, n = _shortest_digits(value)
    k = len(digits)
    if k <= n <= _JS_MAX_POINT:
        return sign + digits + "0" * (n - k)
    if 0 < n <= _JS_MAX_POINT:
        return f"{sign}{digits[:n]}.{digits[n:]}"
    if _JS_MIN_POINT < n <= 0:
        return f"{sign}0.{'0' * -n}{digits}"

    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    exponent = n - 1
    return f"{sign}{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def format_value(value: Any) -> str:
    """Render a primitive value for display."""
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    # bool before int: bool subclasses int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (int, float)):
        return _format_number(value)
    return str(value)


def make_label(key: str | int, value: Any, kind: NodeKind) -> str:
    """Build the node label for ``value`` reached through ``key``.

    Args:
        key:   Property name, array index, or ``"root"`` for the root.
        value: The JSON value at the node.
        kind:  Result of ``classify(value)``.

    Returns:
        ``"key {n}"`` for objects, ``"key [n]"`` for arrays and
        ``"key: <value>"`` for primitives.
    """
    if kind is NodeKind.OBJECT:
        return f"{key} {{{len(value)}}}"
    if kind is NodeKind.ARRAY:
        return f"{key} [{len(value)}]"
    return f"{key}: {format_value(value)}"
