import json
import logging
import os
from dataclasses import dataclass, field, fields, replace

from .algorithms import ALGORITHMS, SelectionPolicy
from .arrays import ArrayMode

log = logging.getLogger(__name__)

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

WINDOW_WIDTH   = 500
WINDOW_HEIGHT  = 500
WINDOW_TITLE   = "Sorting Algorithms"
FPS            = 240          # 0 = draw as fast as possible

ARRAY_SIZE     = 50
ARRAY_BOUND    = None         # None = same as ARRAY_SIZE
ARRAY_MODE     = "identity"   # "identity" (then shuffled) or "random"
SEED           = None

COUNTDOWN_SECS = 3
PAUSE_MS       = 1000         # pause before/after each sort

BACKGROUND_COLOR = (51, 77, 77)
ACTIVE_COLOR     = (255, 255, 255)
BAR_SPACING      = 1
LABEL_COLOR      = (200, 200, 210)

SELECTION_POLICY = "scan"

# JSON file in the working directory, read if present
CONFIG_FILE = "sortviz.json"


@dataclass
class Settings:
    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    title: str = WINDOW_TITLE
    fps: int = FPS
    size: int = ARRAY_SIZE
    bound: object = ARRAY_BOUND
    mode: str = ARRAY_MODE
    seed: object = SEED
    countdown: int = COUNTDOWN_SECS
    pause_ms: int = PAUSE_MS
    background: tuple = BACKGROUND_COLOR
    active_color: tuple = ACTIVE_COLOR
    bar_spacing: int = BAR_SPACING
    label_color: tuple = LABEL_COLOR
    selection_policy: str = SELECTION_POLICY
    algorithms: list = field(default_factory=lambda: ["bubble", "shaker", "selection", "insertion", "quick"])

    def update(self, **overrides):
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


_COLOR_KEYS = ("background", "active_color", "label_color")


def _int(lo, optional=False):
    def check(v):
        if v is None:
            return optional
        return isinstance(v, int) and not isinstance(v, bool) and v >= lo
    return check


def _color(v):
    return (isinstance(v, (list, tuple)) and len(v) == 3
            and all(isinstance(c, int) and 0 <= c <= 255 for c in v))


_VALID = {
    "width":            _int(1),
    "height":           _int(1),
    "title":            lambda v: isinstance(v, str),
    "fps":              _int(0),
    "size":             _int(0),
    "bound":            _int(1, optional=True),
    "mode":             lambda v: v in [m.value for m in ArrayMode],
    "seed":             _int(0, optional=True),
    "countdown":        _int(0),
    "pause_ms":         _int(0),
    "bar_spacing":      _int(0),
    "selection_policy": lambda v: v in [p.value for p in SelectionPolicy],
    "algorithms":       lambda v: isinstance(v, list) and all(k in [key for _, key in ALGORITHMS] for k in v),
}
for _k in _COLOR_KEYS:
    _VALID[_k] = _color


def _read_config_json(path) -> dict:
    if not os.path.exists(path):
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        log.warning("ignoring config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        log.warning("ignoring config %s: top level must be an object", path)
        return {}
    return data


def load_settings(path=None) -> Settings:
    """
    Defaults from the constants above, overridden by the JSON file at
    ``path`` (or ``CONFIG_FILE`` when ``path`` is None). Unknown keys are
    logged and skipped, and so are values of the wrong type or range.
    """
    if path is None:
        path = CONFIG_FILE
    elif not os.path.exists(path):
        log.warning("config file %s not found, using defaults", path)
    data = _read_config_json(path)
    known = {f.name for f in fields(Settings)}
    overrides = {}
    for key, value in data.items():
        if key not in known:
            log.warning("unknown setting %r in %s", key, path)
            continue
        if not _VALID[key](value):
            log.warning("bad value for setting %r in %s: %r", key, path, value)
            continue
        overrides[key] = tuple(value) if key in _COLOR_KEYS else value
    if overrides:
        log.debug("settings from %s: %s", path, overrides)
    return Settings().update(**overrides)
