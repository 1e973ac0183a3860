import io

import pytest

from cell_pattern import EMPTY, FILLED, UNCERTAIN
from render import print_grid, render_lines
from solver_config import SolverConfig

GRID = [[FILLED, UNCERTAIN], [EMPTY, FILLED]]


def test_render_lines_default_symbols():
    assert render_lines(GRID, SolverConfig()) == ["X?", " X"]


def test_render_lines_custom_symbols():
    config = SolverConfig(empty_symbol=".", uncertain_symbol="~", filled_symbol="##")
    assert render_lines(GRID, config) == ["##~", ".##"]


def test_print_grid_trace_adds_blank_line():
    out = io.StringIO()
    print_grid(GRID, SolverConfig(), final=False, file=out)
    assert out.getvalue() == "X?\n X\n\n"


def test_symbol_for_unknown_value():
    with pytest.raises(ValueError):
        SolverConfig().symbol_for(7)
