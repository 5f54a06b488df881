import os
import sys

import pandas as pd

import flight_config as cfg
from balance import class_balance, smote_balance
from classify import build_models, compare_models, select_best, split_train_test
from eda import (
    plot_cancellations_by_month, plot_carrier_cancellations, plot_class_balance,
    plot_feature_importance, plot_roc_curves
)
from flight_data import (
    cancellations_by_month, check_posdictive, encode_flights, load_flights,
    missing_value_report, model_frame
)
from importance import feature_importance
from predict import describe_outcome, is_flight_canceled
from recommend import (
    average_cancellation_probability, average_delays, carrier_cancellations,
    rank_carriers, recommend_carrier
)
from tune import grid_search, refit_final, save_model


def out_path(name):
    return os.path.join(cfg.OUTPUT_DIR, name)


def main():
    os.makedirs(cfg.OUTPUT_DIR, exist_ok=True)

    # ==========================================
    # CHUNK 1: Loading
    # ==========================================
    print("--- 1. Loading Flight Data ---")
    try:
        raw = load_flights(cfg.DATA_FILE)
    except FileNotFoundError as e:
        print(f"Error loading files: {e}")
        sys.exit(1)
    print(f"Data Loaded: {len(raw):,} flights.")

    print("\nMissing values per column:")
    print(missing_value_report(raw))

    # ==========================================
    # CHUNK 2: Bucketing & Encoding
    # ==========================================
    print("\n--- 2. Bucketing Month & Encoding Carrier ---")
    by_month = cancellations_by_month(raw)
    print(by_month)
    plot_cancellations_by_month(by_month, cfg.OUTPUT_DIR)

    encoded = encode_flights(raw)

    violations = check_posdictive(encoded)
    print(f"Canceled flights with recorded delays: {len(violations)}")
    print("ArrivalDelay / DepartureDelay are posdictive and excluded from the model.")

    flights = model_frame(encoded)
    before = class_balance(flights[cfg.TARGET])
    print("Class Balance (Original):")
    print(before)
    plot_class_balance(before, cfg.OUTPUT_DIR)

    # ==========================================
    # CHUNK 3: SMOTE
    # ==========================================
    print("\n--- 3. Rebalancing with SMOTE ---")
    dataset = smote_balance(flights, seed=cfg.SEED)
    after = class_balance(dataset[cfg.TARGET])
    print("Class Balance (SMOTE):")
    print(after)
    plot_class_balance(after, cfg.OUTPUT_DIR, name='class_balance_smote.png', title='Canceled (SMOTE)')

    # ==========================================
    # CHUNK 4: Split
    # ==========================================
    print("\n--- 4. Splitting Train / Test ---")
    X_train, X_test, y_train, y_test = split_train_test(dataset, cfg.SPLIT_RATIO, cfg.SEED)
    print(f"Data Ready. Training on {len(X_train)} rows, Testing on {len(X_test)} rows.")

    # ==========================================
    # CHUNK 5: Model Comparison
    # ==========================================
    print("\n--- 5. Training & Comparing Models ---")
    models = build_models(cfg.SEED)
    results, report = compare_models(models, X_train, y_train, X_test, y_test, folds=cfg.CV_FOLDS, seed=cfg.SEED)

    print("\n" + "=" * 50)
    print("MODEL COMPARISON")
    print("=" * 50)
    print(report)
    print("* Accuracy - Test set accuracy ; AUC - Area under curve ; CV Accuracy - Cross validation accuracy")
    report.to_csv(out_path(cfg.COMPARISON_FILE))
    plot_roc_curves(results, y_test, cfg.OUTPUT_DIR)

    best = select_best(report)
    print(f"\nBest model: {best}")

    # ==========================================
    # CHUNK 6: Tuning
    # ==========================================
    print(f"\n--- 6. Tuning {best} ---")
    if cfg.SKIP_GRID and best == 'XGBoost':
        print("   -> Grid search skipped, using stored parameters.")
        params = cfg.FINAL_XGB_PARAMS
    else:
        params, score, cv_table = grid_search(best, X_train, y_train, folds=cfg.CV_FOLDS, seed=cfg.SEED)
        print(f"   -> Best CV Accuracy: {score:.2f}%")
        cv_table.to_csv(out_path(cfg.GRID_FILE), index=False)
    print(f"   -> Parameters: {params}")

    final_model = refit_final(best, params, X_train, y_train, seed=cfg.FINAL_SEED)
    _, final_report = compare_models(
        {f"{best} (tuned)": final_model}, X_train, y_train, X_test, y_test,
        folds=cfg.CV_FOLDS, seed=cfg.SEED
    )
    print(final_report)
    save_model(final_model, out_path(cfg.MODEL_FILE))

    # ==========================================
    # CHUNK 7: Interpretation & Prediction
    # ==========================================
    print("\n--- 7. Feature Importance ---")
    imp = feature_importance(final_model)
    print(imp.round(3))
    imp.to_csv(out_path(cfg.IMPORTANCE_FILE), index=False)
    plot_feature_importance(imp, cfg.OUTPUT_DIR)

    print("\nSample flight:", cfg.SAMPLE_FLIGHT)
    outcome = is_flight_canceled(final_model, **cfg.SAMPLE_FLIGHT)
    print(describe_outcome(outcome))

    # ==========================================
    # CHUNK 8: Carrier Recommendation
    # ==========================================
    print("\n--- 8. Most Reliable Carrier ---")
    cancellations = carrier_cancellations(raw)
    print(cancellations)
    cancellations.to_csv(out_path(cfg.CANCELLATIONS_FILE), index=False)
    plot_carrier_cancellations(cancellations, cfg.OUTPUT_DIR)

    probabilities = average_cancellation_probability(
        final_model, encoded, sample_size=cfg.CARRIER_SAMPLE_SIZE, seed=cfg.SEED
    )
    print(probabilities)

    delays = average_delays(raw)
    print(delays)

    ranking = rank_carriers(cancellations, probabilities, delays)
    ranking.to_csv(out_path(cfg.RECOMMENDATION_FILE), index=False)
    with pd.option_context('display.width', 200):
        print(ranking)

    carrier = recommend_carrier(ranking)
    print(f"\nRecommendation: carrier '{carrier}' is the most reliable airline.")
    print("Done.")


if __name__ == '__main__':
    main()
