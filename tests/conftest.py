import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

from flight_config import COLUMNS
from flight_data import encode_flights, model_frame


def make_flights(n=600, n_canceled=100, seed=7):
    """Synthetic flights: canceled rows first, winter months and AA over-represented."""
    rng = np.random.default_rng(seed)
    canceled = np.r_[np.ones(n_canceled, dtype=int), np.zeros(n - n_canceled, dtype=int)]

    winter = rng.integers(1, 5, size=n)
    any_month = rng.integers(1, 13, size=n)
    month = np.where((canceled == 1) & (rng.random(n) < 0.7), winter, any_month)

    carrier = rng.choice(['AA', 'DL', 'UA'], size=n, p=[0.3, 0.4, 0.3])
    carrier = np.where((canceled == 1) & (rng.random(n) < 0.4), 'AA', carrier)

    flight_time = rng.integers(60, 300, size=n)
    distance = flight_time * 7 + rng.integers(-50, 50, size=n)
    dep_time = rng.integers(600, 2200, size=n)

    arr_delay = np.where(canceled == 1, 0, rng.normal(5, 20, size=n).round())
    dep_delay = np.where(canceled == 1, 0, rng.normal(8, 15, size=n).round())

    return pd.DataFrame({
        'Canceled': canceled,
        'Month': month,
        'DepartureTime': dep_time,
        'UniqueCarrier': carrier,
        'ScheduledFlightTime': flight_time,
        'ArrivalDelay': arr_delay,
        'DepartureDelay': dep_delay,
        'Distance': distance,
    }, columns=COLUMNS)


@pytest.fixture
def raw_flights():
    return make_flights()


@pytest.fixture
def flights_csv(tmp_path, raw_flights):
    path = tmp_path / "flights.csv"
    raw_flights.to_csv(path, header=False, index=False)
    return path


@pytest.fixture
def encoded_flights(raw_flights):
    return encode_flights(raw_flights)


@pytest.fixture
def flight_frame(encoded_flights):
    return model_frame(encoded_flights)
