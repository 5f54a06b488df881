"""
Class rebalancing: SMOTE oversampling of the canceled flights followed by
random undersampling of the flights that flew.
"""
import pandas as pd
from imblearn.over_sampling import SMOTENC
from imblearn.under_sampling import RandomUnderSampler

from flight_config import (
    CATEGORICAL_FEATURES, FEATURES, SEED, SMOTE_K, SMOTE_PERC_OVER,
    SMOTE_PERC_UNDER, TARGET
)


def smote_counts(n_minority, n_majority, perc_over=SMOTE_PERC_OVER, perc_under=SMOTE_PERC_UNDER):
    """
    Class sizes after balancing, as ``(minority, majority)``.

    ``perc_over`` of 100 or more creates ``perc_over // 100`` synthetic rows
    per minority row; below 100 it creates ``perc_over`` percent of the
    minority count. The majority keeps ``perc_under`` percent of the number
    of synthetic rows, capped at what exists. DMwR draws the majority with
    replacement and never caps; here majority rows are never duplicated, so a
    request above the available count keeps every majority row instead.
    """
    if perc_over <= 0 or perc_under <= 0:
        raise ValueError("perc_over and perc_under must be positive")

    if perc_over >= 100:
        n_synthetic = (perc_over // 100) * n_minority
    else:
        n_synthetic = int(perc_over / 100 * n_minority)
    if n_synthetic == 0:
        raise ValueError("No synthetic rows would be generated")

    n_keep = int(perc_under / 100 * n_synthetic)
    if n_keep > n_majority:
        print(f"   -> Only {n_majority} majority rows available, wanted {n_keep}.")
        n_keep = n_majority

    return n_minority + n_synthetic, n_keep


def class_balance(target):
    counts = target.value_counts().sort_index()
    return pd.DataFrame({
        'Count': counts,
        'Share': (counts / counts.sum()).round(4),
    })


def smote_balance(df, perc_over=SMOTE_PERC_OVER, perc_under=SMOTE_PERC_UNDER,
                  k_neighbors=SMOTE_K, seed=SEED):
    """
    Rebalance an encoded model frame (features + target).

    Month band and carrier are treated as nominal so synthetic rows always
    carry a real code.
    """
    X = df[FEATURES]
    y = df[TARGET].astype(int)

    counts = y.value_counts()
    if len(counts) != 2:
        raise ValueError("Balancing needs both classes present")
    minority, majority = counts.idxmin(), counts.idxmax()
    n_minority, n_majority = counts[minority], counts[majority]

    if n_minority <= k_neighbors:
        raise ValueError(
            f"Need more than {k_neighbors} minority rows for SMOTE, got {n_minority}"
        )

    target_minority, target_majority = smote_counts(n_minority, n_majority, perc_over, perc_under)

    categorical = [FEATURES.index(col) for col in CATEGORICAL_FEATURES]
    over = SMOTENC(
        categorical_features=categorical,
        sampling_strategy={minority: target_minority},
        k_neighbors=k_neighbors,
        random_state=seed,
    )
    X_over, y_over = over.fit_resample(X, y)

    under = RandomUnderSampler(sampling_strategy={majority: target_majority}, random_state=seed)
    X_bal, y_bal = under.fit_resample(X_over, y_over)

    balanced = pd.DataFrame(X_bal, columns=FEATURES)
    for col in FEATURES:
        balanced[col] = balanced[col].astype(int if col in CATEGORICAL_FEATURES else float)
    balanced[TARGET] = pd.Series(y_bal).astype(int).values
    return balanced.reset_index(drop=True)
