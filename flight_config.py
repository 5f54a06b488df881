import os

# Configuration
DATA_FILE = os.environ.get('FLIGHT_DATA', 'Data_PredictingFlightDelays.csv')
OUTPUT_DIR = os.environ.get('FLIGHT_OUTPUT_DIR', 'output')
SKIP_GRID = os.environ.get('FLIGHT_SKIP_GRID', '0') == '1'

SEED = 123
FINAL_SEED = 3

COLUMNS = [
    'Canceled', 'Month', 'DepartureTime', 'UniqueCarrier',
    'ScheduledFlightTime', 'ArrivalDelay', 'DepartureDelay', 'Distance'
]
TARGET = 'Canceled'

# Arrival/departure delays are only recorded for flights that flew
POSDICTIVE = ['ArrivalDelay', 'DepartureDelay']

FEATURES = ['Month', 'DepartureTime', 'UniqueCarrier', 'ScheduledFlightTime', 'Distance']
NUMERIC_FEATURES = ['DepartureTime', 'ScheduledFlightTime', 'Distance']
CATEGORICAL_FEATURES = ['Month', 'UniqueCarrier']

CARRIER_CODES = {'AA': 1, 'DL': 2, 'UA': 3}
SEASON_LABELS = {1: 'Jan-Apr', 2: 'May-Aug', 3: 'Sep-Dec'}

# SMOTE (percentages as in the classic DMwR formulation)
SMOTE_PERC_OVER = 150
SMOTE_PERC_UNDER = 300
SMOTE_K = 5

SPLIT_RATIO = 0.75
CV_FOLDS = 10
THRESHOLD = 0.5

MODEL_NAMES = ['Logistic Regression', 'Random Forest', 'XGBoost']

PARAM_GRIDS = {
    'Logistic Regression': {
        'model__C': [0.01, 0.1, 1.0, 10.0],
    },
    'Random Forest': {
        'model__n_estimators': [100, 200],
        'model__max_depth': [None, 7, 10],
        'model__max_features': ['sqrt', 0.5],
    },
    'XGBoost': {
        'model__n_estimators': [10, 20, 40],
        'model__learning_rate': [0.1, 0.2, 0.3],
        'model__max_depth': [3, 7, 10],
        'model__gamma': [0],
        'model__min_child_weight': [1],
        'model__colsample_bytree': [0.5, 0.75, 1.0],
        'model__subsample': [0.5, 0.7, 0.9],
    },
}

# Best XGBoost configuration found by the grid on the reference data
FINAL_XGB_PARAMS = {
    'model__n_estimators': 40,
    'model__learning_rate': 0.2,
    'model__max_depth': 7,
    'model__gamma': 0,
    'model__min_child_weight': 1,
    'model__colsample_bytree': 0.5,
    'model__subsample': 0.9,
}

CARRIER_SAMPLE_SIZE = 1500

# Sample flight for the prediction demo
SAMPLE_FLIGHT = {
    'month': 3,
    'distance': 679,
    'departure_time': 814,
    'flight_time': 134,
    'carrier': 'UA',
}

# Output files
MODEL_FILE = 'cancel_model.joblib'
COMPARISON_FILE = 'model_comparison.csv'
GRID_FILE = 'grid_search_results.csv'
IMPORTANCE_FILE = 'feature_importance.csv'
CANCELLATIONS_FILE = 'carrier_cancellations.csv'
RECOMMENDATION_FILE = 'carrier_recommendation.csv'
