import numpy as np
import pytest

from mandelbrot_canvas import Viewport, escape_time, escape_time_grid, sample_grid


def test_far_point_escapes_immediately():
    assert escape_time(3 + 0j, 50) in (0, 1)


@pytest.mark.parametrize("max_iterations", [1, 10, 500])
def test_origin_never_escapes(max_iterations):
    assert escape_time(0j, max_iterations) == max_iterations


@pytest.mark.parametrize("c", [2.5j, -2.1 + 0j, 1.5 + 1.5j, -3 - 3j, 2.01 + 0j])
def test_points_outside_radius_two_escape(c):
    assert escape_time(c, 100) < 100


def test_tip_of_the_needle_stays_bounded():
    # -2 maps to 2 and then to itself forever; |z|**2 == 4 is not an escape.
    assert escape_time(-2 + 0j, 1000) == 1000


def test_known_escape_count():
    assert escape_time(-0.5 - 1j, 50) == 3


def test_zero_budget_returns_cap():
    assert escape_time(5 + 5j, 0) == 0


def test_grid_matches_scalar_engine():
    cx, cy = sample_grid(48, 32, Viewport(-2.0, 1.0, -1.2, 1.2))
    counts = escape_time_grid(cx, cy, 64)

    expected = np.array(
        [[escape_time(complex(x, y), 64) for x, y in zip(row_x, row_y)] for row_x, row_y in zip(cx, cy)]
    )
    np.testing.assert_array_equal(counts, expected)


def test_grid_preserves_shape_and_cap():
    cx = np.zeros((3, 5))
    cy = np.zeros((3, 5))
    counts = escape_time_grid(cx, cy, 20)
    assert counts.shape == (3, 5)
    assert (counts == 20).all()


def test_grid_handles_empty_input():
    counts = escape_time_grid(np.zeros((4, 0)), np.zeros((4, 0)), 10)
    assert counts.shape == (4, 0)
