import json

import pytest

from sortviz.main import main, parse_args, run_all
from sortviz.settings import Settings


@pytest.fixture(autouse=True)
def _no_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_headless_runs_every_algorithm(capsys):
    assert main(["--headless", "--size", "40", "--seed", "7"]) == 0
    out = capsys.readouterr().out
    for name in ("bubble sort", "cocktail shaker", "selection sort", "insertion sort", "quick sort"):
        assert f"finished {name} in" in out


def test_headless_subset_and_random_mode(capsys):
    assert main(["--headless", "--size", "25", "--mode", "random", "--bound", "5",
                 "--algos", "quick,insertion", "--selection-policy", "swap"]) == 0
    out = capsys.readouterr().out
    assert "performing quick sort on 25 elements" in out
    assert "bubble" not in out


def test_config_file_is_read(tmp_path, capsys):
    (tmp_path / "sortviz.json").write_text(json.dumps({"size": 6, "algorithms": ["shaker"]}))
    assert main(["--headless"]) == 0
    assert "performing cocktail shaker on 6 elements" in capsys.readouterr().out


def test_unknown_algorithm_is_a_usage_error():
    with pytest.raises(SystemExit):
        parse_args(["--algos", "bubble,bogo"])


def test_run_all_is_reproducible():
    cfg = Settings(algorithms=["bubble", "quick"], seed=3)
    a, b = list(range(1, 31)), list(range(1, 31))
    ra = run_all(a, cfg)
    rb = run_all(b, cfg)
    assert [r.steps for r in ra] == [r.steps for r in rb]
    assert all(r.correct for r in ra)
    assert a == b == list(range(1, 31))


def test_bad_config_values_fall_back_to_defaults(tmp_path, capsys):
    (tmp_path / "sortviz.json").write_text(json.dumps(
        {"mode": "bogus", "selection_policy": "x", "seed": "abc", "size": 8, "algorithms": ["selection"]}))
    assert main(["--headless"]) == 0
    assert "performing selection sort on 8 elements" in capsys.readouterr().out
