import joblib
import pandas as pd
from sklearn.model_selection import GridSearchCV, StratifiedKFold

from classify import make_estimator
from flight_config import CV_FOLDS, PARAM_GRIDS, SEED


def param_grid_for(name):
    if name not in PARAM_GRIDS:
        raise ValueError(f"No parameter grid for model: {name}")
    return PARAM_GRIDS[name]


def grid_search(name, X, y, folds=CV_FOLDS, grid=None, seed=SEED):
    """
    Exhaustive search over the grid for one model variant.

    Returns ``(best_params, best_score, cv_table)``; the score is a
    percentage and the table holds one row per parameter combination,
    best first.
    """
    grid = grid if grid is not None else param_grid_for(name)
    cv = StratifiedKFold(n_splits=folds, shuffle=True, random_state=seed)

    search = GridSearchCV(
        estimator=make_estimator(name, seed),
        param_grid=grid,
        scoring='accuracy',
        cv=cv,
        n_jobs=-1,
    )
    search.fit(X, y)

    cv_table = pd.DataFrame(search.cv_results_)
    keep = [c for c in cv_table.columns if c.startswith('param_')]
    cv_table = cv_table[keep + ['mean_test_score', 'std_test_score', 'rank_test_score']]
    cv_table = cv_table.sort_values('rank_test_score').reset_index(drop=True)

    return search.best_params_, search.best_score_ * 100, cv_table


def refit_final(name, params, X_train, y_train, seed=SEED):
    model = make_estimator(name, seed, **params)
    model.fit(X_train, y_train)
    return model


def save_model(model, path):
    joblib.dump(model, path)
    print(f"Saved {path}")


def load_model(path):
    return joblib.load(path)
