import numpy as np
import pandas as pd

from flight_config import FEATURES


def _output_features(model):
    """Names of the columns the estimator sees, mapped back to input features."""
    names = model.named_steps['preprocessor'].get_feature_names_out()
    mapped = []
    for name in names:
        short = name.split('__', 1)[-1]
        # one-hot columns look like Month_2
        owner = next((f for f in FEATURES if short == f or short.startswith(f + '_')), short)
        mapped.append(owner)
    return mapped


def _share(values):
    values = np.asarray(values, dtype=float)
    total = values.sum()
    if total == 0:
        return values
    return values / total


def feature_importance(model):
    """
    Importance table for a fitted model pipeline, one row per input feature.

    XGBoost reports Gain, Cover and Frequency like ``xgb.importance``;
    the random forest reports impurity Gain; logistic regression reports the
    share of absolute coefficients as Gain. All columns sum to 1.
    """
    estimator = model.named_steps['model']
    columns = _output_features(model)

    if hasattr(estimator, 'get_booster'):
        booster = estimator.get_booster()
        table = {}
        for measure, kind in [('Gain', 'total_gain'), ('Cover', 'total_cover'), ('Frequency', 'weight')]:
            scores = booster.get_score(importance_type=kind)
            table[measure] = [scores.get(f"f{i}", scores.get(col, 0.0)) for i, col in enumerate(columns)]
        raw = pd.DataFrame(table)
    elif hasattr(estimator, 'feature_importances_'):
        raw = pd.DataFrame({'Gain': estimator.feature_importances_})
    elif hasattr(estimator, 'coef_'):
        raw = pd.DataFrame({'Gain': np.abs(estimator.coef_).ravel()})
    else:
        raise ValueError(f"Cannot extract importances from {type(estimator).__name__}")

    raw['Feature'] = columns
    imp = raw.groupby('Feature', sort=False).sum()
    for col in imp.columns:
        imp[col] = _share(imp[col])

    imp = imp.sort_values('Gain', ascending=False).reset_index()
    return imp
