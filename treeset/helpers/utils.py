_MISSING = object()


def _dedup_members(ordered_set, values):
    """
    Yield the stored member for each of ``values`` present in ``ordered_set``.

    Each member is yielded at most once, even when several probe values
    compare equal to it.
    """
    seen = set()
    for value in values:
        member = ordered_set.get(value, _MISSING)
        if member is _MISSING or id(member) in seen:
            continue
        seen.add(id(member))
        yield member


def _as_bounds(value):
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        raise ValueError(f"Expected a (low, high) pair, got {value!r}")
    return value[0], value[1]
