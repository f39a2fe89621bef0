import logging

import pytest

from main import SAMPLE_MAP, climbing_validator, main, read_elevation_map, solve
from grid_navigation import Coordinate


def test_read_elevation_map_marks_start_and_goal():
    start, goal, grid = read_elevation_map(SAMPLE_MAP)
    assert start == Coordinate(0, 0)
    assert goal == Coordinate(5, 2)
    assert grid.get(start) == "a"
    assert grid.get(goal) == "z"
    assert grid.width() == 8
    assert grid.height() == 5


def test_read_elevation_map_requires_markers():
    with pytest.raises(ValueError):
        read_elevation_map("abc\ndef")


def test_climbing_validator():
    climb = climbing_validator()
    assert climb("a", "b")
    assert climb("c", "a")
    assert not climb("a", "c")
    descend = climbing_validator(reverse=True)
    assert descend("c", "b")
    assert not descend("c", "a")


def test_solve_sample(caplog):
    with caplog.at_level(logging.DEBUG):
        assert solve(SAMPLE_MAP) == (31, 29)


def test_main_prints_solutions(tmp_path, capsys):
    map_file = tmp_path / "input.txt"
    map_file.write_text("SbcdefghijklmnopqrstuvwxyE\n")
    main([str(map_file)])
    out = capsys.readouterr().out
    assert "Solution1: 25" in out
    assert "Solution2: 25" in out


def test_solve_skips_rendering_without_debug_logging(monkeypatch, caplog):
    import main as demo

    def fail_render(*args, **kwargs):
        raise AssertionError("path rendered while DEBUG is disabled")

    monkeypatch.setattr(demo, "render_path", fail_render)
    with caplog.at_level(logging.INFO, logger="main"):
        assert demo.solve(SAMPLE_MAP) == (31, 29)
