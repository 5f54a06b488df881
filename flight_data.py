"""
Loading, cleaning and encoding of the flight cancellation dataset.

The raw file has no header; columns are named positionally from
``flight_config.COLUMNS``.
"""
import numpy as np
import pandas as pd

from flight_config import (
    CARRIER_CODES, COLUMNS, FEATURES, POSDICTIVE, TARGET
)

MONTH_BINS = [0, 4, 8, 12]
MONTH_LABELS = [1, 2, 3]

CARRIER_NAMES = {code: name for name, code in CARRIER_CODES.items()}


def load_flights(path):
    """
    Read the headerless flight CSV into a DataFrame with named columns.

    Every row must carry the eight positional fields; only the delay
    columns may be empty.
    """
    df = pd.read_csv(path, header=None, skipinitialspace=True)
    if df.shape[1] != len(COLUMNS):
        raise ValueError(f"Expected {len(COLUMNS)} columns, got {df.shape[1]}")
    df.columns = COLUMNS

    incomplete = df[[TARGET] + FEATURES].isna().any(axis=1)
    if incomplete.any():
        rows = (df.index[incomplete] + 1).tolist()
        raise ValueError(f"Rows with missing fields: {rows[:10]}")

    df['UniqueCarrier'] = df['UniqueCarrier'].astype(str).str.strip()
    return df


def missing_value_report(df):
    return df.isna().sum()


def bucket_month(month):
    """
    Collapse a month (1-12) into a season band.

    Jan-Apr -> 1, May-Aug -> 2, Sep-Dec -> 3. Accepts a scalar or a Series.
    """
    if np.isscalar(month):
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {month}")
        if month <= 4:
            return 1
        if month <= 8:
            return 2
        return 3

    months = pd.Series(month)
    if months.isna().any() or not months.between(1, 12).all():
        raise ValueError("Month values must be between 1 and 12")
    bands = pd.cut(months, bins=MONTH_BINS, labels=MONTH_LABELS)
    return bands.astype(int)


def encode_carrier(carrier):
    """AA -> 1, DL -> 2, UA -> 3. Accepts a scalar or a Series."""
    if isinstance(carrier, str):
        if carrier not in CARRIER_CODES:
            raise ValueError(f"Unknown carrier: {carrier}")
        return CARRIER_CODES[carrier]

    carriers = pd.Series(carrier).astype(str).str.strip()
    unknown = set(carriers.unique()) - set(CARRIER_CODES)
    if unknown:
        raise ValueError(f"Unknown carriers: {sorted(unknown)}")
    return carriers.map(CARRIER_CODES).astype(int)


def decode_carrier(code):
    if isinstance(code, (int, np.integer)):
        if code not in CARRIER_NAMES:
            raise ValueError(f"Unknown carrier code: {code}")
        return CARRIER_NAMES[code]

    codes = pd.Series(code)
    unknown = set(codes.unique()) - set(CARRIER_NAMES)
    if unknown:
        raise ValueError(f"Unknown carrier codes: {sorted(unknown)}")
    return codes.map(CARRIER_NAMES)


def encode_flights(df):
    """Bucket the month, encode the carrier and cast the target to int."""
    encoded = df.copy()
    encoded['Month'] = bucket_month(encoded['Month']).values
    encoded['UniqueCarrier'] = encode_carrier(encoded['UniqueCarrier']).values
    encoded[TARGET] = encoded[TARGET].astype(int)
    return encoded


def check_posdictive(df):
    """Return canceled rows that carry a non-zero arrival or departure delay."""
    canceled = df[df[TARGET] == 1]
    delays = canceled[POSDICTIVE].fillna(0)
    return canceled[(delays != 0).any(axis=1)]


def cancellations_by_month(df):
    canceled = df[df[TARGET] == 1]
    by_month = canceled.groupby('Month')[TARGET].sum().reset_index()
    by_month.columns = ['Month', 'Flights_Canceled']
    return by_month


def model_frame(df):
    # Posdictive delays are dropped here and never reach a model
    return df[FEATURES + [TARGET]].copy()
