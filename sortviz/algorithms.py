"""
In-place sorting algorithms written as step generators.

Each ``*_steps`` function validates its range, then returns a generator that
mutates the sequence and yields a :class:`~sortviz.observe.Step` after every
event point. The matching ``*_sort`` function drives that generator with an
observer and returns the number of steps observed.

Only ``<`` is used to compare elements, so any totally ordered type works.
"""
import enum

from .observe import (
    CANDIDATE, PIVOT, SWAP, WRITE, Step, check_bounds, check_enclosing, run_steps,
)


class SelectionPolicy(enum.Enum):
    SCAN = "scan"   # notify on every new minimum candidate and on the swap
    SWAP = "swap"   # notify on the swap only


# ============================================================
# ========================= BUBBLE ===========================
# ============================================================

def bubble_steps(arr, first=0, last=None):
    first, last = check_bounds(arr, first, last)
    return _bubble(arr, first, last)


def _bubble(arr, first, last):
    bounds = (first, last)
    end = last
    swapped = True
    while swapped and end - first > 1:
        swapped = False
        for j in range(first, end - 1):
            if arr[j+1] < arr[j]:
                arr[j], arr[j+1] = arr[j+1], arr[j]
                swapped = True
                yield Step(SWAP, (j, j+1), bounds)
        # largest element of [first, end) is now at end-1
        end -= 1


# ============================================================
# ======================== COCKTAIL ==========================
# ============================================================

def cocktail_steps(arr, first=0, last=None):
    first, last = check_bounds(arr, first, last)
    return _cocktail(arr, first, last)


def _cocktail(arr, first, last):
    bounds = (first, last)
    left, right = first, last
    while left < right:
        for i in range(left, right - 1):
            if arr[i+1] < arr[i]:
                arr[i], arr[i+1] = arr[i+1], arr[i]
                yield Step(SWAP, (i, i+1), bounds)
        right -= 1
        # [right, last) holds the largest elements in order
        for i in range(right - 1, left, -1):
            if arr[i] < arr[i-1]:
                arr[i], arr[i-1] = arr[i-1], arr[i]
                yield Step(SWAP, (i-1, i), bounds)
        left += 1
        # [first, left) holds the smallest elements in order


# ============================================================
# ======================== SELECTION =========================
# ============================================================

def selection_steps(arr, first=0, last=None, policy=SelectionPolicy.SCAN):
    first, last = check_bounds(arr, first, last)
    policy = SelectionPolicy(policy)
    return _selection(arr, first, last, policy is SelectionPolicy.SCAN)


def _selection(arr, first, last, show_scan):
    bounds = (first, last)
    for i in range(first, last):
        smallest = i
        for j in range(i + 1, last):
            if arr[j] < arr[smallest]:
                smallest = j
                if show_scan:
                    yield Step(CANDIDATE, (i, smallest), bounds)
        if smallest != i:
            arr[i], arr[smallest] = arr[smallest], arr[i]
            yield Step(SWAP, (i, smallest), bounds)
        # [first, i] is sorted and holds the smallest elements


# ============================================================
# ======================== INSERTION =========================
# ============================================================

def insertion_steps(arr, first=0, last=None, settle_step=False):
    first, last = check_bounds(arr, first, last)
    return _insertion(arr, first, last, settle_step)


def _insertion(arr, first, last, settle_step):
    bounds = (first, last)
    for index in range(first + 1, last):
        held = arr[index]
        pos = index
        while pos > first and held < arr[pos-1]:
            # shift the predecessor right and drop the held value in the hole
            arr[pos] = arr[pos-1]
            arr[pos-1] = held
            pos -= 1
            yield Step(WRITE, (pos, pos+1), bounds)
        if settle_step:
            arr[pos] = held
            yield Step(WRITE, (pos,), bounds)
        # [first, index] is sorted


# ============================================================
# ========================= QUICK ============================
# ============================================================

def quick_steps(arr, first=0, last=None, bounds=None):
    """
    Lomuto quicksort with the last element as pivot.

    ``bounds`` is the range the observer renders; it defaults to the
    ``[first, last)`` of this call and must enclose it. Every sub-range
    reports these same bounds.
    """
    first, last = check_bounds(arr, first, last)
    bounds = (first, last) if bounds is None else check_bounds(arr, *bounds)
    check_enclosing(bounds, first, last)
    return _quick(arr, first, last, bounds)


def _quick(arr, first, last, bounds):
    # explicit stack of pending ranges, popped left partition first so the
    # steps come out in the same order as the recursive definition
    pending = [(first, last)]
    while pending:
        lo, hi = pending.pop()
        if hi - lo <= 1:
            continue
        p = yield from _partition(arr, lo, hi, bounds)
        pending.append((p + 1, hi))
        pending.append((lo, p))


def _partition(arr, lo, hi, bounds):
    pivot = arr[hi-1]
    p = lo
    for j in range(lo, hi - 1):
        if arr[j] < pivot:
            arr[p], arr[j] = arr[j], arr[p]
            p += 1
            yield Step(SWAP, (p-1, j), bounds)
    # [lo, p) < pivot <= [p, hi-1)
    arr[p], arr[hi-1] = arr[hi-1], arr[p]
    yield Step(PIVOT, (p, hi-1), bounds)
    return p


# ============================================================
# ====================== SORT FUNCTIONS ======================
# ============================================================

def bubble_sort(arr, observer=None, first=0, last=None) -> int:
    return run_steps(arr, bubble_steps(arr, first, last), observer)


def cocktail_sort(arr, observer=None, first=0, last=None) -> int:
    return run_steps(arr, cocktail_steps(arr, first, last), observer)


def selection_sort(arr, observer=None, first=0, last=None, policy=SelectionPolicy.SCAN) -> int:
    return run_steps(arr, selection_steps(arr, first, last, policy), observer)


def insertion_sort(arr, observer=None, first=0, last=None, settle_step=False) -> int:
    return run_steps(arr, insertion_steps(arr, first, last, settle_step), observer)


def quick_sort(arr, observer=None, first=0, last=None, bounds=None) -> int:
    return run_steps(arr, quick_steps(arr, first, last, bounds), observer)


ALGORITHMS = [
    ("Bubble Sort",     "bubble"),
    ("Cocktail Shaker", "shaker"),
    ("Selection Sort",  "selection"),
    ("Insertion Sort",  "insertion"),
    ("Quick Sort",      "quick"),
]

_SORTS = {
    "bubble":    bubble_sort,
    "shaker":    cocktail_sort,
    "selection": selection_sort,
    "insertion": insertion_sort,
    "quick":     quick_sort,
}


def get_algorithm(key):
    if key in _SORTS: return _SORTS[key]
    raise KeyError(f"Unknown key: {key}")


def algorithm_name(key) -> str:
    for name, k in ALGORITHMS:
        if k == key: return name
    raise KeyError(f"Unknown key: {key}")
