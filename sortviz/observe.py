import logging
from typing import NamedTuple

log = logging.getLogger(__name__)

# ============================================================
# ========================= ERRORS ===========================
# ============================================================

class SortvizError(Exception):
    pass


class BoundsError(SortvizError, ValueError):
    """Caller passed an index range that does not fit the sequence."""


class SortAborted(SortvizError):
    """Raised when an observer asks for the current sort to stop."""


# ============================================================
# ====================== STEP / BOUNDS =======================
# ============================================================

SWAP      = "swap"
WRITE     = "write"
CANDIDATE = "candidate"
PIVOT     = "pivot"


class Step(NamedTuple):
    kind: str
    active: tuple
    bounds: tuple


def check_bounds(seq, first=0, last=None):
    """Resolve ``last=None`` to ``len(seq)`` and validate ``[first, last)``."""
    n = len(seq)
    if last is None:
        last = n
    if first < 0 or last > n or first > last:
        raise BoundsError(f"bad range [{first}, {last}) for sequence of length {n}")
    return first, last


def check_enclosing(bounds, first, last):
    lo, hi = bounds
    if not (lo <= first <= last <= hi):
        raise BoundsError(f"range [{first}, {last}) is not inside original bounds [{lo}, {hi})")


# ============================================================
# ========================= VIEW =============================
# ============================================================

class SequenceView:
    """
    Read-only window onto the sequence being sorted.

    Attributes
    ----------
    bounds : tuple  -- (first, last) range the observer should render
    active : tuple  -- indices touched by the step that produced this view
    kind   : str    -- step kind ("swap", "write", "candidate", "pivot")
    """
    __slots__ = ('_seq', 'bounds', 'active', 'kind')

    def __init__(self, seq, bounds, active=(), kind=""):
        self._seq   = seq
        self.bounds = tuple(bounds)
        self.active = tuple(active)
        self.kind   = kind

    def __len__(self):
        return len(self._seq)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return [self._seq[j] for j in range(*i.indices(len(self._seq)))]
        return self._seq[i]

    def __iter__(self):
        for i in range(len(self._seq)):
            yield self._seq[i]

    def snapshot(self) -> list:
        return list(self)

    def window(self) -> list:
        lo, hi = self.bounds
        return [self._seq[i] for i in range(lo, hi)]

    def __repr__(self):
        return f"SequenceView({self.snapshot()!r}, bounds={self.bounds}, kind={self.kind!r})"


# ============================================================
# ======================= OBSERVERS ==========================
# ============================================================

class Observer:
    """
    Base step observer.

    ``notify`` is called synchronously once per step and may block for as
    long as it likes. Setting ``stop_requested`` makes the driver abort the
    sort right after the current step.
    """
    stop_requested = False

    def notify(self, view: SequenceView, bounds: tuple) -> None:
        pass

    def request_stop(self):
        self.stop_requested = True

    def clear_stop(self):
        self.stop_requested = False


class NullObserver(Observer):
    pass


class CallbackObserver(Observer):
    def __init__(self, fn):
        self.fn = fn

    def notify(self, view, bounds):
        self.fn(view, bounds)


class Recorder(Observer):
    """Keeps a copy of every observed state; mostly for tests."""

    def __init__(self, limit=None):
        self.limit  = limit
        self.states = []
        self.kinds  = []
        self.active = []
        self.bounds = []

    def notify(self, view, bounds):
        self.states.append(view.snapshot())
        self.kinds.append(view.kind)
        self.active.append(view.active)
        self.bounds.append(tuple(bounds))
        if self.limit is not None and len(self.states) >= self.limit:
            self.request_stop()

    def __len__(self):
        return len(self.states)

    def count(self, kind) -> int:
        return sum(1 for k in self.kinds if k == kind)


class LoggingObserver(Observer):
    def __init__(self, logger=None, level=logging.DEBUG):
        self.logger = logger or log
        self.level  = level
        self.steps  = 0

    def notify(self, view, bounds):
        self.steps += 1
        self.logger.log(self.level, "step %d %s %s bounds=%s", self.steps,
                        view.kind, list(view.active), bounds)


# ============================================================
# ========================= DRIVER ===========================
# ============================================================

def run_steps(seq, steps, observer=None) -> int:
    """
    Drive a step generator, calling ``observer.notify`` once per step.

    The generator only resumes after ``notify`` returns, so observed states
    follow the exact mutation order. An observer whose ``stop_requested`` is
    already set aborts the run before any mutation. Returns the number of
    steps observed.
    """
    if observer is None:
        observer = NullObserver()
    count = 0
    try:
        if observer.stop_requested:
            raise SortAborted("observer asked to stop before the first step")
        for step in steps:
            count += 1
            observer.notify(SequenceView(seq, step.bounds, step.active, step.kind), step.bounds)
            if observer.stop_requested:
                log.debug("stop requested after %d steps", count)
                raise SortAborted(f"sort stopped by observer after {count} steps")
    finally:
        steps.close()
    return count
