import matplotlib
matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

from bankruptcy.data import DATA_DIR, RAW_FILE, TARGET_COL, ZERO_VARIANCE_COL

N_ROWS = 1000
N_BANKRUPT = 32


@pytest.fixture
def frame():
    rng = np.random.default_rng(0)
    y = np.zeros(N_ROWS, dtype=int)
    y[rng.choice(N_ROWS, N_BANKRUPT, replace=False)] = 1
    df = pd.DataFrame({TARGET_COL: y})
    for i, name in enumerate(["ROA(A)", "Operating Gross Margin", "Cash Flow Rate",
                              "Quick Ratio", "Total Asset Turnover", "Interest Coverage Ratio"]):
        df[name] = rng.normal(loc=i, scale=1 + i, size=N_ROWS) + 0.5 * y
    df["Debt ratio %"] = rng.uniform(0, 1, N_ROWS)
    df["Net worth/Assets"] = 1 - df["Debt ratio %"]
    df["Current Liabilities/Liability"] = rng.uniform(0, 1, N_ROWS)
    df["Current Liability to Liability"] = df["Current Liabilities/Liability"]
    df["ROA(B)"] = df["ROA(A)"] + rng.normal(scale=0.1, size=N_ROWS)
    df[ZERO_VARIANCE_COL] = 1
    return df


@pytest.fixture
def workbook(frame, tmp_path):
    path = tmp_path / "data.xlsx"
    padded = frame.rename(columns=lambda c: c if c == TARGET_COL else f" {c}")
    padded.to_excel(path, index=False)
    return path


@pytest.fixture
def real_data():
    path = DATA_DIR / RAW_FILE
    if not path.exists():
        pytest.skip("data/data.xlsx not available")
    from bankruptcy.data import load_raw_data
    return load_raw_data(path)
