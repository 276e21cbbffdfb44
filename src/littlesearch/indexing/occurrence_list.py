"""Frequency-descending occurrence lists and their incremental insertion step."""

from littlesearch.data_models.occurrence import Occurrence


def insert_last(occs: list[Occurrence]) -> list[int]:
    """Move the last occurrence of occs into place, in descending frequency order.

    occs[:-1] must already be sorted by descending frequency. The position is
    found by binary search over that prefix; an equal frequency stops the
    search and the new occurrence lands at the probed index, ahead of the
    equal entry. The list is modified in place.

    Returns the midpoint indexes probed by the search, in probe order (empty
    for a single-element list).

    insert_last([A(5), B(3), C(4)])  -> [0, 1], list becomes [A(5), C(4), B(3)]
    """
    if not occs:
        raise ValueError("Cannot insert into an empty occurrence list")
    if len(occs) == 1:
        return []

    last = occs[-1]
    probes: list[int] = []
    lo, hi, mid = 0, len(occs) - 2, 0
    while lo <= hi:
        mid = (lo + hi) // 2
        probes.append(mid)
        probed = occs[mid].frequency
        if last.frequency > probed:
            hi = mid - 1
        elif last.frequency < probed:
            lo = mid + 1
            if hi <= mid:
                mid += 1  # search ends here; the slot is just below mid
        else:
            break

    occs.pop()
    occs.insert(mid, last)
    return probes
