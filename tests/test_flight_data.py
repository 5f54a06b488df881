import pandas as pd
import pytest

from flight_config import COLUMNS, FEATURES, POSDICTIVE, TARGET
from flight_data import (
    bucket_month, cancellations_by_month, check_posdictive, decode_carrier,
    encode_carrier, encode_flights, load_flights, missing_value_report, model_frame
)


def test_load_flights_names_columns(flights_csv, raw_flights):
    df = load_flights(flights_csv)
    assert list(df.columns) == COLUMNS
    assert len(df) == len(raw_flights)
    assert df['UniqueCarrier'].iloc[0] == raw_flights['UniqueCarrier'].iloc[0]


def test_load_flights_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_flights(tmp_path / "nope.csv")


def test_missing_value_report(raw_flights):
    raw_flights.loc[3, 'Distance'] = None
    report = missing_value_report(raw_flights)
    assert report['Distance'] == 1
    assert report.drop('Distance').sum() == 0


@pytest.mark.parametrize("month,band", [
    (1, 1), (4, 1), (5, 2), (8, 2), (9, 3), (12, 3)
])
def test_bucket_month_boundaries(month, band):
    assert bucket_month(month) == band


@pytest.mark.parametrize("month", [0, 13, -1])
def test_bucket_month_out_of_range(month):
    with pytest.raises(ValueError):
        bucket_month(month)


def test_bucket_month_series():
    bands = bucket_month(pd.Series(range(1, 13)))
    assert bands.tolist() == [1] * 4 + [2] * 4 + [3] * 4


def test_carrier_codes_are_bijective():
    for name in ['AA', 'DL', 'UA']:
        assert decode_carrier(encode_carrier(name)) == name
    assert sorted(encode_carrier(pd.Series(['UA', 'AA', 'DL'])).tolist()) == [1, 2, 3]


def test_unknown_carrier_rejected():
    with pytest.raises(ValueError):
        encode_carrier('WN')
    with pytest.raises(ValueError):
        encode_carrier(pd.Series(['AA', 'B6']))
    with pytest.raises(ValueError):
        decode_carrier(4)


def test_encode_flights_does_not_touch_input(raw_flights):
    encoded = encode_flights(raw_flights)
    assert set(encoded['Month'].unique()) <= {1, 2, 3}
    assert set(encoded['UniqueCarrier'].unique()) <= {1, 2, 3}
    assert set(raw_flights['UniqueCarrier']) <= {'AA', 'DL', 'UA'}
    assert raw_flights['Month'].max() > 3


def test_posdictive_delays_are_zero_for_canceled(encoded_flights):
    assert check_posdictive(encoded_flights).empty


def test_posdictive_violation_detected(encoded_flights):
    encoded_flights.loc[0, 'ArrivalDelay'] = 12
    violations = check_posdictive(encoded_flights)
    assert list(violations.index) == [0]


def test_cancellations_by_month(raw_flights):
    by_month = cancellations_by_month(raw_flights)
    assert by_month['Flights_Canceled'].sum() == raw_flights[TARGET].sum()
    assert by_month['Month'].between(1, 12).all()


def test_model_frame_excludes_posdictive(encoded_flights):
    frame = model_frame(encoded_flights)
    assert list(frame.columns) == FEATURES + [TARGET]
    for col in POSDICTIVE:
        assert col not in frame.columns


def test_load_flights_rejects_short_row(tmp_path):
    path = tmp_path / "short.csv"
    path.write_text("0,3,814,UA,134,5,2,679\n1,4,900,AA,120\n")
    with pytest.raises(ValueError):
        load_flights(path)


def test_load_flights_rejects_extra_column(tmp_path):
    path = tmp_path / "wide.csv"
    path.write_text("0,0,3,814,UA,134,5,2,679\n1,1,4,900,AA,120,0,0,500\n")
    with pytest.raises(ValueError):
        load_flights(path)


def test_load_flights_allows_empty_delays(tmp_path):
    path = tmp_path / "canceled.csv"
    path.write_text("1,3,814,UA,134,,,679\n0,7,900,DL,120,4,3,500\n")
    df = load_flights(path)
    assert df.loc[0, 'ArrivalDelay'] != df.loc[0, 'ArrivalDelay']
    assert df.loc[1, 'Distance'] == 500


def test_load_flights_strips_carrier(tmp_path):
    path = tmp_path / "spaced.csv"
    path.write_text("0,3,814,AA ,134,5,2,679\n0,4,900, AA,120,1,1,500\n")
    df = load_flights(path)
    assert df['UniqueCarrier'].tolist() == ['AA', 'AA']
