import os

import pandas as pd
import plotly.express as px
import streamlit as st

from flight_config import (
    CANCELLATIONS_FILE, COMPARISON_FILE, GRID_FILE, IMPORTANCE_FILE, OUTPUT_DIR,
    RECOMMENDATION_FILE
)

st.set_page_config(page_title="Flight Cancellation Risk", layout="wide")

st.title("Predicting Flight Cancellations")
st.markdown("""
Results of the cancellation model: three classifiers trained on a SMOTE-balanced
sample of AA, DL and UA flights, the tuned final model, and a carrier reliability ranking.
Run `python run_pipeline.py` to (re)generate the files shown here.
""")


# --- Helper to load data safely ---
@st.cache_data
def load_csv(filename):
    path = os.path.join(OUTPUT_DIR, filename)
    if os.path.exists(path):
        return pd.read_csv(path)
    return None


# --- 1. Model Comparison ---
st.header("1. Model Comparison")
st.markdown("""
- **Accuracy:** share of test flights classified correctly (%).
- **AUC:** area under the ROC curve; 0.5 is a coin flip.
- **CV Accuracy:** mean accuracy over 10 cross-validation folds of the training set.
""")
df_models = load_csv(COMPARISON_FILE)
if df_models is not None:
    best = df_models.iloc[0]
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric(label="Best Model", value=best['Model'])
    with col2:
        st.metric(label="Test Accuracy", value=f"{best['Accuracy']:.2f}%")
    with col3:
        st.metric(label="AUC", value=f"{best['AUC']:.2f}")

    fig_models = px.bar(
        df_models.melt(id_vars='Model', value_vars=['Accuracy', 'CV Accuracy']),
        x="Model",
        y="value",
        color="variable",
        barmode="group",
        labels={"value": "Accuracy (%)", "variable": ""},
    )
    st.plotly_chart(fig_models, use_container_width=True)
else:
    st.info("Model comparison not found. Run run_pipeline.py first.")

df_grid = load_csv(GRID_FILE)
if df_grid is not None:
    with st.expander("View Grid Search Results"):
        st.dataframe(df_grid, use_container_width=True, hide_index=True)

# --- 2. Feature Importance ---
st.header("2. What Drives Cancellations?")
df_feat = load_csv(IMPORTANCE_FILE)
if df_feat is not None:
    fig_feat = px.bar(
        df_feat.sort_values(by="Gain", ascending=True),
        x="Gain",
        y="Feature",
        orientation="h",
        color="Gain",
        color_continuous_scale="Blues"
    )
    st.plotly_chart(fig_feat, use_container_width=True)
else:
    st.info("Feature importance data not found. Run run_pipeline.py first.")

# --- 3. Carrier Reliability ---
st.header("3. Most Reliable Carrier")
df_cancel = load_csv(CANCELLATIONS_FILE)
df_rank = load_csv(RECOMMENDATION_FILE)
if df_cancel is not None and df_rank is not None:
    col1, col2 = st.columns([1, 1], gap="large")
    with col1:
        fig_cancel = px.bar(
            df_cancel,
            x="UniqueCarrier",
            y="Percent_Cancelled",
            color="UniqueCarrier",
            labels={"UniqueCarrier": "Carrier", "Percent_Cancelled": "% Canceled"}
        )
        st.plotly_chart(fig_cancel, use_container_width=True)
    with col2:
        fig_prob = px.bar(
            df_rank,
            x="UniqueCarrier",
            y="Avg_Cancel_Prob",
            color="UniqueCarrier",
            labels={"UniqueCarrier": "Carrier", "Avg_Cancel_Prob": "Avg. Cancellation Probability"}
        )
        st.plotly_chart(fig_prob, use_container_width=True)

    st.success(f"Carrier **{df_rank.iloc[0]['UniqueCarrier']}** has the lowest cancellation risk.")
    st.dataframe(df_rank, use_container_width=True, hide_index=True)
else:
    st.info("Carrier statistics not found. Run run_pipeline.py first.")
