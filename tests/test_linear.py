import numpy as np
import pytest

from polyapprox import (
    DegenerateSamplesError,
    InvalidInputError,
    LinearApproximation,
    create_approximation,
    interpolate,
)
from polyapprox.interpolation import available_methods


def test_linear_requires_two_samples():
    linear = LinearApproximation()
    assert linear.required_sample_count(1) == 2
    assert linear.required_sample_count(5) == 2


def test_linear_matches_lagrange_on_two_samples():
    xs, ys = [1.0, 3.0], [2.0, -1.0, 6.0, 5.0]
    for x in (0.0, 1.0, 2.2, 3.0, 4.5):
        np.testing.assert_allclose(
            LinearApproximation().interpolate(x, xs, ys, 2),
            interpolate(x, xs, ys, 2),
        )


def test_linear_fills_buffer():
    buffer = [0.0]
    assert LinearApproximation().interpolate(0.25, [0, 1], [0, 8], 1, buffer) is buffer
    assert buffer == pytest.approx([2.0])


@pytest.mark.parametrize("x_table, y_table", [([0], [0]), ([0, 1, 2], [0, 1, 2])])
def test_linear_rejects_other_table_lengths(x_table, y_table):
    with pytest.raises(InvalidInputError):
        LinearApproximation().interpolate(0.5, x_table, y_table, 1)


def test_linear_rejects_duplicates():
    with pytest.raises(DegenerateSamplesError):
        LinearApproximation().interpolate(0.5, [2, 2], [0, 1], 1)


@pytest.mark.parametrize("name, cls", [("lagrange", "LagrangePolynomialApproximation"),
                                        ("LINEAR", "LinearApproximation"),
                                        ("Linear", "LinearApproximation")])
def test_factory_is_case_insensitive(name, cls):
    assert type(create_approximation(name)).__name__ == cls


def test_factory_rejects_unknown_method():
    with pytest.raises(ValueError, match="Available: LAGRANGE, LINEAR"):
        create_approximation("HERMITE")


def test_available_methods():
    assert available_methods() == ["LAGRANGE", "LINEAR"]
