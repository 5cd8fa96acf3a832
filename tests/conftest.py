import pytest

from polyapprox import SampledSeries, SeriesSettings


@pytest.fixture
def quadratic_table():
    # y = x^2 sampled at 0, 1, 2
    return [0.0, 1.0, 2.0], [0.0, 1.0, 4.0]


@pytest.fixture
def track_table():
    # (t, t^2, t^3) sampled at t = 0..5
    xs = [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
    ys = []
    for t in xs:
        ys.extend([t, t ** 2, t ** 3])
    return xs, ys


@pytest.fixture
def cubic_series(track_table):
    xs, ys = track_table
    series = SampledSeries(3, SeriesSettings(degree=3))
    series.add_samples(xs, ys)
    return series
