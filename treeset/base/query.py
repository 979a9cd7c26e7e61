from sqlalchemy.sql import operators

from ..logger import logger
from ..helpers.utils import _dedup_members, _as_bounds


def _excluding(ordered_set, members):
    excluded = {id(member) for member in members}
    return [value for value in ordered_set if id(value) not in excluded]


def select(ordered_set, operator, value):
    """
    Return the members of ``ordered_set`` matching ``<member> <operator> value``, in ascending order.

    ``operator`` is one of the ``sqlalchemy.sql.operators`` comparison
    functions: eq, ne, lt, le, gt, ge, in_op, notin_op, between_op and
    not_between_op. Between operators take a ``(low, high)`` pair.
    """

    # Exact matches
    if operator == operators.eq:
        result = list(_dedup_members(ordered_set, [value]))

    elif operator == operators.ne:
        result = _excluding(ordered_set, _dedup_members(ordered_set, [value]))

    elif operator == operators.in_op:
        result = sorted(_dedup_members(ordered_set, value), key=ordered_set.key)

    elif operator == operators.notin_op:
        result = _excluding(ordered_set, _dedup_members(ordered_set, value))

    # Ranges
    elif operator == operators.gt:
        result = list(ordered_set.irange(minimum=value, inclusive=(False, True)))

    elif operator == operators.ge:
        result = list(ordered_set.irange(minimum=value))

    elif operator == operators.lt:
        result = list(ordered_set.irange(maximum=value, inclusive=(True, False)))

    elif operator == operators.le:
        result = list(ordered_set.irange(maximum=value))

    elif operator == operators.between_op:
        low, high = _as_bounds(value)
        result = list(ordered_set.irange(minimum=low, maximum=high))

    elif operator == operators.not_between_op:
        low, high = _as_bounds(value)
        result = _excluding(ordered_set, ordered_set.irange(minimum=low, maximum=high))

    else:
        raise NotImplementedError(f"Unsupported operator: {operator}")

    logger.debug(f"Selected {len(result)} of {len(ordered_set)} values with {operator.__name__} {value!r}")
    return result
