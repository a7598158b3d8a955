from .algorithms import (
    ALGORITHMS, SelectionPolicy, bubble_sort, cocktail_sort, get_algorithm,
    insertion_sort, quick_sort, selection_sort,
)
from .arrays import ArrayMode, identity_array, make_array, random_array, shuffle
from .bench import RunRecord, benchmark, time_sort
from .observe import (
    BoundsError, CallbackObserver, LoggingObserver, NullObserver, Observer,
    Recorder, SequenceView, SortAborted, SortvizError, Step, run_steps,
)

__version__ = "0.1.0"
