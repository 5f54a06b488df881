import numpy as np
import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.ensemble import RandomForestClassifier
from sklearn.linear_model import LogisticRegression
from sklearn.metrics import accuracy_score, confusion_matrix, roc_auc_score
from sklearn.model_selection import StratifiedKFold, cross_val_score, train_test_split
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OneHotEncoder, StandardScaler
from xgboost import XGBClassifier

from flight_config import (
    CATEGORICAL_FEATURES, CV_FOLDS, FEATURES, MODEL_NAMES, NUMERIC_FEATURES,
    SEED, SPLIT_RATIO, TARGET, THRESHOLD
)


def split_train_test(df, ratio=SPLIT_RATIO, seed=SEED):
    """Stratified split of a model frame into X_train, X_test, y_train, y_test."""
    X = df[FEATURES]
    y = df[TARGET].astype(int)
    return train_test_split(X, y, train_size=ratio, stratify=y, random_state=seed)


def build_preprocessor(one_hot=False):
    """
    Scale the numeric columns; codes either pass through or get one-hot encoded.

    Lives inside each model pipeline so the scaler is only ever fitted on
    training rows.
    """
    if one_hot:
        cat = OneHotEncoder(handle_unknown='ignore', sparse_output=False)
    else:
        cat = 'passthrough'
    return ColumnTransformer(
        transformers=[
            ('num', StandardScaler(), NUMERIC_FEATURES),
            ('cat', cat, CATEGORICAL_FEATURES)
        ]
    )


def make_estimator(name, seed=SEED, **params):
    if name == 'Logistic Regression':
        model = LogisticRegression(max_iter=1000)
    elif name == 'Random Forest':
        model = RandomForestClassifier(n_estimators=100, random_state=seed, n_jobs=-1)
    elif name == 'XGBoost':
        model = XGBClassifier(
            n_estimators=10,
            objective='binary:logistic',
            eval_metric='logloss',
            random_state=seed,
            n_jobs=1,
        )
    else:
        raise ValueError(f"Unknown model: {name}")

    pipe = Pipeline(steps=[
        ('preprocessor', build_preprocessor(one_hot=(name == 'Logistic Regression'))),
        ('model', model)
    ])
    if params:
        pipe.set_params(**params)
    return pipe


def build_models(seed=SEED):
    return {name: make_estimator(name, seed) for name in MODEL_NAMES}


def confusion_table(y_true, y_pred):
    cm = confusion_matrix(y_true, y_pred, labels=[0, 1])
    return pd.DataFrame(
        cm,
        index=pd.Index([0, 1], name='Actual'),
        columns=pd.Index([0, 1], name='Predicted')
    )


def evaluate_model(name, model, X_train, y_train, X_test, y_test,
                   folds=CV_FOLDS, seed=SEED, threshold=THRESHOLD):
    """
    Fit on the training partition and score on the test partition.

    Accuracy and CV accuracy are percentages; AUC is computed from the
    predicted probabilities.
    """
    model.fit(X_train, y_train)

    y_prob = model.predict_proba(X_test)[:, 1]
    y_pred = (y_prob >= threshold).astype(int)

    acc = accuracy_score(y_test, y_pred)
    auc = roc_auc_score(y_test, y_prob)

    cv = StratifiedKFold(n_splits=folds, shuffle=True, random_state=seed)
    cv_scores = cross_val_score(model, X_train, y_train, cv=cv, scoring='accuracy')

    return {
        'Name': name,
        'Model': model,
        'Confusion': confusion_table(y_test, y_pred),
        'Accuracy': acc * 100,
        'AUC': auc,
        'CV Accuracy': np.mean(cv_scores) * 100,
        'Probs': y_prob
    }


def compare_models(models, X_train, y_train, X_test, y_test, folds=CV_FOLDS, seed=SEED):
    results = {}

    print(f"--- Training {len(models)} Models ---")
    for name, model in models.items():
        print(f"Running {name}...")
        res = evaluate_model(name, model, X_train, y_train, X_test, y_test, folds=folds, seed=seed)
        results[name] = res
        print(res['Confusion'])
        print(f"   -> Accuracy: {res['Accuracy']:.2f}% | AUC: {res['AUC']:.2f} | "
              f"CV Accuracy: {res['CV Accuracy']:.2f}%")

    metrics = ['Accuracy', 'AUC', 'CV Accuracy']
    report = pd.DataFrame(
        [[res[m] for m in metrics] for res in results.values()],
        index=pd.Index(list(results), name='Model'),
        columns=metrics
    )
    report = report.sort_values(['AUC', 'Accuracy'], ascending=False).round(2)
    return results, report


def select_best(report):
    return report.index[0]
