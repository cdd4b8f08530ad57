import logging

import numpy as np

from circuitgen import paths
from circuitgen.geometry import Point
from circuitgen.logging_utils import _safe_repr, debug_log_call
from circuitgen.rng import RNG


def test_safe_repr_summarises_geometry_and_arrays():
    segment = (Point(1, 2), Point(3.456, 4))

    assert _safe_repr(Point(1, 2)) == "(1.00, 2.00)"
    assert _safe_repr(segment) == "(1.00, 2.00)->(3.46, 4.00)"
    assert _safe_repr(list(range(10))) == "[0, 1, 2, 3, ... 10 total]"
    assert _safe_repr(np.zeros((3, 2))).startswith("ndarray(shape=(3, 2), dtype=float64)")


def test_debug_log_call_traces_only_at_debug(caplog):
    logger = logging.getLogger("circuitgen.tests.trace")

    @debug_log_call(logger)
    def add(a, b):
        return a + b

    with caplog.at_level(logging.INFO, logger=logger.name):
        assert add(1, 2) == 3
    assert "Entering add" not in caplog.text

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        assert add(1, 2) == 3
    assert "Entering add (1, 2)" in caplog.text
    assert "Exiting add -> 3" in caplog.text


def test_path_selection_is_traced(caplog):
    assert getattr(paths.pick_path, "_debug_logging_wrapped", False)

    with caplog.at_level(logging.DEBUG, logger="circuitgen.paths"):
        paths.pick_path((Point(0, 0), Point(10, 0)), [], RNG(1), {paths.PathKind.LINE: 1.0})

    assert "Entering pick_path" in caplog.text
