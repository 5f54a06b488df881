import os

import joblib
import pytest

import flight_config
import run_pipeline
from flight_config import (
    CANCELLATIONS_FILE, COMPARISON_FILE, FINAL_XGB_PARAMS, GRID_FILE,
    IMPORTANCE_FILE, MODEL_FILE, RECOMMENDATION_FILE
)

from conftest import make_flights


@pytest.fixture
def pipeline_env(tmp_path, monkeypatch):
    data = tmp_path / "flights.csv"
    make_flights().to_csv(data, header=False, index=False)
    out_dir = tmp_path / "output"

    monkeypatch.setattr(flight_config, 'DATA_FILE', str(data))
    monkeypatch.setattr(flight_config, 'OUTPUT_DIR', str(out_dir))
    monkeypatch.setattr(flight_config, 'SKIP_GRID', True)
    monkeypatch.setattr(flight_config, 'CV_FOLDS', 3)
    monkeypatch.setattr(flight_config, 'CARRIER_SAMPLE_SIZE', 100)
    # the stored parameters only apply to XGBoost
    monkeypatch.setattr(run_pipeline, 'select_best', lambda report: 'XGBoost')
    return out_dir


def test_main_writes_outputs(pipeline_env):
    run_pipeline.main()

    for name in [COMPARISON_FILE, IMPORTANCE_FILE, CANCELLATIONS_FILE,
                 RECOMMENDATION_FILE, MODEL_FILE]:
        assert os.path.exists(pipeline_env / name), name


def test_skip_grid_uses_stored_parameters(pipeline_env):
    run_pipeline.main()

    assert not os.path.exists(pipeline_env / GRID_FILE)
    model = joblib.load(pipeline_env / MODEL_FILE)
    params = model.get_params()
    for key, value in FINAL_XGB_PARAMS.items():
        assert params[key] == value


def test_missing_input_exits_with_status_1(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(flight_config, 'DATA_FILE', str(tmp_path / "missing.csv"))
    monkeypatch.setattr(flight_config, 'OUTPUT_DIR', str(tmp_path / "output"))

    with pytest.raises(SystemExit) as exc:
        run_pipeline.main()

    assert exc.value.code == 1
    assert "Error loading files" in capsys.readouterr().out
