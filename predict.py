import pandas as pd

from flight_config import FEATURES, THRESHOLD
from flight_data import bucket_month, encode_carrier


def flight_record(month, distance, departure_time, flight_time, carrier):
    """One-row feature frame built from raw, human-readable flight details."""
    row = {
        'Month': bucket_month(month),
        'DepartureTime': float(departure_time),
        'UniqueCarrier': encode_carrier(carrier),
        'ScheduledFlightTime': float(flight_time),
        'Distance': float(distance),
    }
    return pd.DataFrame([row], columns=FEATURES)


def is_flight_canceled(model, month, distance, departure_time, flight_time, carrier,
                       threshold=THRESHOLD):
    """
    Predict whether a single flight will be canceled.

    Returns ``(canceled, probability)``.
    """
    record = flight_record(month, distance, departure_time, flight_time, carrier)
    prob = float(model.predict_proba(record)[0, 1])
    return prob >= threshold, prob


def describe_outcome(outcome):
    canceled, prob = outcome
    if canceled:
        return f"The flight will get cancelled with a probability of {prob:.2f}"
    return "The flight will not get cancelled"
