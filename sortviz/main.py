import argparse
import logging
import sys

from .algorithms import ALGORITHMS, SelectionPolicy, algorithm_name
from .arrays import ArrayMode, make_array, shuffle
from .bench import time_sort
from .observe import NullObserver, SortAborted
from .settings import load_settings

log = logging.getLogger("sortviz")

ALGORITHM_KEYS = [key for _, key in ALGORITHMS]


def parse_algos(text):
    keys = [a.strip() for a in text.split(",") if a.strip()]
    unknown = [k for k in keys if k not in ALGORITHM_KEYS]
    if unknown:
        raise argparse.ArgumentTypeError(f"unknown algorithms {unknown}, choose from {ALGORITHM_KEYS}")
    return keys


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="sortviz", description="Animate in-place sorting algorithms as bar charts.")
    p.add_argument("--size", type=int, help="Number of elements")
    p.add_argument("--bound", type=int, help="Largest value for --mode random (default: size)")
    p.add_argument("--seed", type=int, help="Seed for array generation and shuffling")
    p.add_argument("--mode", choices=[m.value for m in ArrayMode], help="Initial array contents")
    p.add_argument("--algos", type=parse_algos, help=f"Comma-separated subset of {','.join(ALGORITHM_KEYS)}")
    p.add_argument("--fps", type=int, help="Frames per second while sorting (0 = unlimited)")
    p.add_argument("--selection-policy", choices=[s.value for s in SelectionPolicy],
                   help="Selection sort: show every new minimum (scan) or swaps only (swap)")
    p.add_argument("--config", help="JSON settings file")
    p.add_argument("--headless", action="store_true", help="Sort and time without opening a window")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def sort_options(key, cfg) -> dict:
    if key == "selection":
        return {"policy": cfg.selection_policy}
    return {}


def countdown(renderer, arr, cfg):
    print("starting in", end=" ", flush=True)
    for j in range(cfg.countdown, 0, -1):
        print(j, end=" ", flush=True)
        renderer.show(arr, label=str(j))
        if not renderer.wait(1000):
            print()
            return False
    print("now")
    renderer.show(arr, label="")
    return True


def run_all(arr, cfg, renderer=None) -> list:
    """Shuffle and sort ``arr`` once per configured algorithm, printing timings."""
    observer = renderer if renderer is not None else NullObserver()
    records = []
    for n, key in enumerate(cfg.algorithms):
        name = algorithm_name(key)
        print(f"\nperforming {name.lower()} on {len(arr)} elements...")
        if renderer is not None:
            renderer.label = name
            renderer.show(arr)
            renderer.wait(cfg.pause_ms)
        shuffle(arr, None if cfg.seed is None else cfg.seed + n)
        if renderer is not None:
            renderer.show(arr)
            if not renderer.wait(cfg.pause_ms):
                raise SortAborted("window closed")
        rec = time_sort(key, arr, observer, **sort_options(key, cfg))
        records.append(rec)
        print(f"finished {name.lower()} in {rec.seconds:.6f} seconds or {rec.minutes:.6f} minutes ({rec.steps} steps)")
        if not rec.correct:
            log.error("%s left the array unsorted", name)
        if renderer is not None:
            renderer.show(arr, label=name + "  [SORTED]")
            renderer.wait(cfg.pause_ms)
    return records


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    cfg = load_settings(args.config).update(
        size=args.size, bound=args.bound, seed=args.seed, mode=args.mode,
        algorithms=args.algos, fps=args.fps, selection_policy=args.selection_policy,
    )
    arr = make_array(cfg.size, cfg.bound, cfg.seed, cfg.mode)
    log.debug("settings: %s", cfg)

    if args.headless:
        records = run_all(arr, cfg)
        return 0 if all(r.correct for r in records) else 1

    from .render import BarRenderer
    renderer = BarRenderer(cfg).open()
    try:
        if not countdown(renderer, arr, cfg):
            return 0
        records = run_all(arr, cfg, renderer)
    except SortAborted as e:
        log.info("stopped: %s", e)
        return 0
    finally:
        renderer.close()
    return 0 if all(r.correct for r in records) else 1


if __name__ == "__main__":
    sys.exit(main())
