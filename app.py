# app.py
import io

import pandas as pd
import streamlit as st

from simkit import SCORER_REGISTRY, Algorithm, InvalidArgumentError
from simkit.batch import score_columns

st.set_page_config(page_title="Text similarity comparator", layout="wide")
st.title("📒 Text similarity comparator")

st.write("Upload an .xlsx or .xls file and score two of its columns.")

with st.sidebar:
    st.write("Scorers loaded:", [str(a) for a in SCORER_REGISTRY])
    algorithm = st.selectbox("Algorithm", options=[a.value for a in Algorithm], index=0)
    mode = st.selectbox("Length mode", options=["graphemes", "codepoints", "bytes"], index=0)
    granularity = st.selectbox("Granularity", options=["token", "word", "character"], index=0)
    case_sensitive = st.checkbox("case_sensitive", value=False)
    threshold = st.slider("threshold", min_value=0.0, max_value=1.0, value=0.0, step=0.05)

    options = {
        "granularity": granularity,
        "case_sensitive": bool(case_sensitive),
        "threshold": float(threshold),
    }
    selected = Algorithm.parse(algorithm)
    if selected is Algorithm.COSINE_NGRAMS:
        options["n"] = int(st.number_input("n", min_value=1, value=3, step=1))
        options["weighting"] = st.selectbox(
            "weighting",
            options=["binary", "tf", "log", "augmented", "double-normalization-0.5", "tfidf"],
            index=0,
        )
    if selected.composite:
        options["secondary_metric"] = st.selectbox(
            "secondary_metric",
            options=[a.value for a in Algorithm if not a.composite],
            index=[a for a in Algorithm if not a.composite].index(Algorithm.JARO_WINKLER),
        )
        options["tau"] = st.slider("tau", min_value=0.0, max_value=1.0, value=0.9, step=0.05)
    if selected in (Algorithm.JACCARD, Algorithm.SORENSEN_DICE):
        options["token_set"] = st.checkbox("token_set", value=True)

uploaded = st.file_uploader("Choose Excel file", type=["xlsx", "xls"])


@st.cache_data(show_spinner=False)
def get_sheets(bytes_data: bytes):
    # Sheet names only (serializable types)
    xls = pd.ExcelFile(io.BytesIO(bytes_data))
    return xls.sheet_names


@st.cache_data(show_spinner=False)
def read_sheet(bytes_data: bytes, sheet: str, header_row: int) -> pd.DataFrame:
    return pd.read_excel(
        io.BytesIO(bytes_data), sheet_name=sheet, header=header_row, engine="openpyxl"
    )


if uploaded is not None:
    try:
        bytes_data = uploaded.getvalue()
        sheet = st.selectbox("Select sheet", get_sheets(bytes_data), index=0)
        header_row = st.number_input("Header row (0-index)", min_value=0, value=0, step=1)
        df = read_sheet(bytes_data, sheet, int(header_row))

        st.caption(f"Sheet **{sheet}** — {df.shape[0]:,} rows × {df.shape[1]:,} columns")

        cols = list(df.columns.astype(str))
        df.columns = cols
        c1, c2 = st.columns(2)
        with c1:
            left_col = st.selectbox("Left column", options=cols, index=0 if cols else None)
        with c2:
            right_col = st.selectbox("Right column", options=cols, index=min(1, len(cols) - 1) if cols else None)

        if cols:
            df_out = score_columns(df, left_col, right_col, selected, options, mode)
            st.dataframe(df_out, use_container_width=True)
            csv = df_out.to_csv(index=False).encode("utf-8")
            st.download_button("Download scores (CSV)", csv, file_name="scores.csv")

    except InvalidArgumentError as e:
        st.error(f"Invalid options: {e}")
    except Exception as e:
        st.error(f"❌ Error: {e}")
