"""
Carrier reliability: observed cancellations, model-predicted cancellation
risk and average delays, combined into one ranking.
"""
import numpy as np
import pandas as pd

from flight_config import CARRIER_SAMPLE_SIZE, FEATURES, SEED, TARGET
from flight_data import decode_carrier


def carrier_cancellations(raw):
    """Canceled flights, total flights and percent canceled per carrier."""
    cancellations = raw.groupby('UniqueCarrier').agg(
        Cancelled_Flights=(TARGET, 'sum'),
        Total_Flights=(TARGET, 'count')
    ).reset_index()
    cancellations['Percent_Cancelled'] = (
        cancellations['Cancelled_Flights'] / cancellations['Total_Flights'] * 100
    ).round(2)
    return cancellations


def average_cancellation_probability(model, encoded, sample_size=CARRIER_SAMPLE_SIZE, seed=SEED):
    """
    Mean predicted cancellation probability per carrier.

    Each carrier contributes the same number of flights, drawn at random
    without replacement; a carrier with fewer flights uses all of them.
    """
    rows = []
    for code, group in encoded.groupby('UniqueCarrier'):
        n = min(sample_size, len(group))
        sample = group.sample(n=n, random_state=seed)
        probs = model.predict_proba(sample[FEATURES])[:, 1]
        rows.append({
            'UniqueCarrier': decode_carrier(int(code)),
            'Sampled_Flights': n,
            'Avg_Cancel_Prob': round(float(np.mean(probs)), 2)
        })
    return pd.DataFrame(rows)


def average_delays(raw):
    """
    Mean arrival and departure delay per carrier, counting late flights only.

    Early or on-time values (<= 0) are ignored, which also drops the zeros
    recorded for canceled flights.
    """
    delays = raw[['UniqueCarrier', 'ArrivalDelay', 'DepartureDelay']].copy()
    delays['ArrivalDelay'] = delays['ArrivalDelay'].where(delays['ArrivalDelay'] > 0)
    delays['DepartureDelay'] = delays['DepartureDelay'].where(delays['DepartureDelay'] > 0)

    average_delay = delays.groupby('UniqueCarrier').agg(
        avg_arrival_delay=('ArrivalDelay', 'mean'),
        avg_departure_delay=('DepartureDelay', 'mean')
    ).round(2).reset_index()
    return average_delay


def rank_carriers(cancellations, probabilities, delays):
    ranking = cancellations.merge(probabilities, on='UniqueCarrier', how='outer')
    ranking = ranking.merge(delays, on='UniqueCarrier', how='outer')
    ranking = ranking.sort_values(
        ['Avg_Cancel_Prob', 'Percent_Cancelled', 'avg_arrival_delay'],
        na_position='last'
    ).reset_index(drop=True)
    ranking.insert(0, 'Rank', np.arange(1, len(ranking) + 1))
    return ranking


def recommend_carrier(ranking):
    if ranking.empty:
        raise ValueError("No carriers to rank")
    return ranking.iloc[0]['UniqueCarrier']
