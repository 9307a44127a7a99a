import numpy as np
import pytest

from bezier_curves import (
    BezierCurve,
    InvalidArgument,
    bernstein_basis,
    closed_form,
    cubic,
    cubic_points,
    de_casteljau,
    evaluate,
    linear,
    linear_points,
    quadratic,
    quadratic_points,
    sample_parameters,
)
from bezier_curves.constants import DEFAULT_STOPS


def test_linear_scenario() -> None:
    points = linear((0, 0), (10, 0), stops=10)
    assert points.shape == (11, 2)
    assert points[:, 0].tolist() == list(range(11))
    assert points[:, 1].tolist() == [0] * 11


def test_quadratic_scenario() -> None:
    points = quadratic((0, 0), (5, 10), (10, 0), stops=2)
    assert points.tolist() == [[0, 0], [5, 5], [10, 0]]


def test_cubic_midpoint() -> None:
    # B(0.5) = (P0 + 3 P1 + 3 P2 + P3) / 8
    points = cubic((0, 0), (0, 80), (80, 80), (80, 0), stops=2, truncate=False)
    np.testing.assert_allclose(points[1], [40.0, 60.0])


def test_linear_endpoints_are_exact() -> None:
    points = linear((3, 7), (-12, 41), stops=7)
    assert points[0].tolist() == [3, 7]
    assert points[-1].tolist() == [-12, 41]


@pytest.mark.parametrize("n_points", [2, 3, 4, 5, 8])
def test_curve_starts_and_ends_at_anchors(n_points: int) -> None:
    rng = np.random.default_rng(n_points)
    ctrl = rng.uniform(-500, 500, size=(n_points, 2))
    points = evaluate(ctrl, stops=17, truncate=False)
    assert points.shape == (18, 2)
    np.testing.assert_array_equal(points[0], ctrl[0])
    np.testing.assert_array_equal(points[-1], ctrl[-1])


def test_truncation_rounds_toward_zero() -> None:
    points = linear((0, 0), (-3, 3), stops=2)
    # t = 0.5 gives (-1.5, 1.5)
    assert points[1].tolist() == [-1, 1]
    assert points.dtype.kind == 'i'


def test_float_output_when_not_truncated() -> None:
    points = linear((0, 0), (-3, 3), stops=2, truncate=False)
    assert points[1].tolist() == [-1.5, 1.5]


def test_quadratic_closed_form_matches_de_casteljau() -> None:
    p0, p1, p2 = np.array([12.0, 40.0]), np.array([230.0, -75.0]), np.array([400.0, 310.0])
    ts = sample_parameters(64)
    closed = (
        ((1 - ts) ** 2)[:, None] * p0
        + (2 * (1 - ts) * ts)[:, None] * p1
        + (ts ** 2)[:, None] * p2
    )
    general = evaluate([p0, p1, p2], stops=64, truncate=False)
    np.testing.assert_allclose(general, closed, atol=1e-9)


@pytest.mark.parametrize("n_points", [2, 3, 4, 6, 10])
def test_bernstein_and_de_casteljau_agree(n_points: int) -> None:
    rng = np.random.default_rng(100 + n_points)
    ctrl = rng.uniform(0, 800, size=(n_points, 2))
    a = evaluate(ctrl, stops=50, method="de_casteljau", truncate=False)
    b = evaluate(ctrl, stops=50, method="bernstein", truncate=False)
    np.testing.assert_allclose(a, b, atol=1e-8)


def test_evaluate_is_deterministic_and_does_not_mutate_input() -> None:
    ctrl = np.array([[0.0, 0.0], [40.0, 90.0], [120.0, -30.0], [200.0, 10.0], [260.0, 80.0]])
    original = ctrl.copy()
    first = evaluate(ctrl, stops=33)
    second = evaluate(ctrl, stops=33)
    np.testing.assert_array_equal(first, second)
    np.testing.assert_array_equal(ctrl, original)


def test_higher_dimensions_are_evaluated_per_coordinate() -> None:
    ctrl = [(0, 0, 0), (10, 20, 30), (20, 0, 60)]
    points = evaluate(ctrl, stops=4, truncate=False)
    xy = evaluate([p[:2] for p in ctrl], stops=4, truncate=False)
    np.testing.assert_allclose(points[:, :2], xy)
    np.testing.assert_allclose(points[:, 2], np.linspace(0, 60, 5))


def test_zero_stops_uses_default() -> None:
    assert evaluate([(0, 0), (1, 1)], stops=0).shape == (DEFAULT_STOPS + 1, 2)
    assert quadratic((0, 0), (1, 1), (2, 0), stops=0).shape == (DEFAULT_STOPS + 1, 2)


@pytest.mark.parametrize("points", [[], [(0, 0)], [1, 2, 3]])
def test_evaluate_rejects_too_few_points(points) -> None:
    with pytest.raises(InvalidArgument):
        evaluate(points, stops=10)


@pytest.mark.parametrize("stops", [-1, 2.5, True])
def test_evaluate_rejects_bad_stops(stops) -> None:
    with pytest.raises(InvalidArgument):
        evaluate([(0, 0), (1, 1)], stops=stops)


def test_evaluate_rejects_unknown_method() -> None:
    with pytest.raises(InvalidArgument):
        evaluate([(0, 0), (1, 1)], stops=4, method="horner")


def test_invalid_argument_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        evaluate([(0, 0)], stops=4)


@pytest.mark.parametrize(
    "func, count",
    [(linear_points, 2), (quadratic_points, 3), (cubic_points, 4)],
)
def test_shape_specific_entry_points_check_arity(func, count: int) -> None:
    for n_points in (count - 1, count + 1):
        with pytest.raises(InvalidArgument):
            func([(i, i) for i in range(n_points)], stops=4)
    assert func([(i, i) for i in range(count)], stops=4).shape == (5, 2)


def test_de_casteljau_scalar_and_array() -> None:
    ctrl = [(0, 0), (5, 10), (10, 0)]
    np.testing.assert_allclose(de_casteljau(ctrl, 0.5), [5.0, 5.0])
    assert de_casteljau(ctrl, [0.0, 0.25, 1.0]).shape == (3, 2)


def test_de_casteljau_rejects_parameters_outside_unit_interval() -> None:
    with pytest.raises(InvalidArgument):
        de_casteljau([(0, 0), (1, 1)], 1.5)


def test_bernstein_basis_is_partition_of_unity() -> None:
    basis = bernstein_basis(5, np.linspace(0, 1, 11))
    assert basis.shape == (11, 6)
    np.testing.assert_allclose(basis.sum(axis=1), 1.0)


def test_sample_parameters_closed_interval() -> None:
    ts = sample_parameters(4)
    assert ts.tolist() == [0.0, 0.25, 0.5, 0.75, 1.0]


def test_bezier_curve_object() -> None:
    curve = BezierCurve([(0, 0), (5, 10), (10, 0)])
    assert curve.degree == 2
    assert curve.dimension == 2
    np.testing.assert_allclose(curve.point(0.5), [5.0, 5.0])
    assert curve.sample(2).tolist() == [[0, 0], [5, 5], [10, 0]]
    with pytest.raises(ValueError):
        curve.control_points[0, 0] = 1.0


def test_bezier_curve_elevate_degree() -> None:
    curve = BezierCurve([(0, 0), (5, 10), (10, 0)])
    elevated = curve.elevate_degree()
    assert elevated.degree == 3
    np.testing.assert_allclose(
        elevated.sample(40, truncate=False), curve.sample(40, truncate=False), atol=1e-9
    )


def _pixel_curve(formula, stops):
    """Per-sample loop with int() truncation, one coordinate pair at a time."""
    result = []
    for i in range(stops + 1):
        t = i / stops
        result.append([int(formula(t, axis)) for axis in (0, 1)])
    return result


def _linear_pixels(p, stops):
    return _pixel_curve(lambda t, a: p[0][a] + (p[1][a] - p[0][a]) * t, stops)


def _quadratic_pixels(p, stops):
    return _pixel_curve(
        lambda t, a: ((1.0 - t) * (1.0 - t)) * p[0][a]
        + 2.0 * (1.0 - t) * t * p[1][a]
        + (t * t) * p[2][a],
        stops,
    )


def _cubic_pixels(p, stops):
    return _pixel_curve(
        lambda t, a: ((1.0 - t) * (1.0 - t) * (1.0 - t)) * p[0][a]
        + t * p[1][a] * (3.0 * ((1.0 - t) * (1.0 - t)))
        + p[2][a] * (3.0 * (1.0 - t) * (t * t))
        + p[3][a] * (t * t * t),
        stops,
    )


@pytest.mark.parametrize("func, pixels, count", [
    (linear_points, _linear_pixels, 2),
    (quadratic_points, _quadratic_pixels, 3),
    (cubic_points, _cubic_pixels, 4),
])
def test_shape_specific_curves_are_pixel_exact(func, pixels, count: int) -> None:
    rng = np.random.default_rng(800 + count)
    for _ in range(300):
        ctrl = [tuple(float(v) for v in p) for p in rng.integers(0, 800, size=(count, 2))]
        assert func(ctrl, stops=200).tolist() == pixels(ctrl, 200)


def test_linear_wrapper_matches_truncated_closed_form_near_integers() -> None:
    # 10 - 10 * t lands on an integer for every t = i / 10
    expected = _linear_pixels([(10.0, 0.0), (0.0, 10.0)], 10)
    assert linear((10, 0), (0, 10), stops=10).tolist() == expected
    assert evaluate([(10, 0), (0, 10)], stops=10, method="closed_form").tolist() == expected


def test_de_casteljau_can_differ_from_closed_form_by_one_pixel() -> None:
    rng = np.random.default_rng(2024)
    differing = 0
    for _ in range(2000):
        ctrl = rng.integers(0, 800, size=(2, 2)).astype(float)
        general = evaluate(ctrl, stops=200)
        exact = evaluate(ctrl, stops=200, method="closed_form")
        assert np.abs(general - exact).max() <= 1
        differing += int(np.any(general != exact))
    assert differing > 0


def test_closed_form_falls_back_for_higher_degrees() -> None:
    ctrl = [(0, 0), (10, 90), (40, -40), (60, 120), (100, 50)]
    np.testing.assert_array_equal(
        evaluate(ctrl, stops=30, method="closed_form"), evaluate(ctrl, stops=30)
    )
    with pytest.raises(InvalidArgument):
        closed_form(ctrl, 0.5)
