from typing import List, Tuple
import numpy as np
import pandas as pd
from sklearn.impute import SimpleImputer
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler

from bankruptcy.data import TARGET_COL

CORR_THRESHOLD = 0.9
EXACT_CORR_TOL = 1e-6

def zero_variance_columns(df: pd.DataFrame, target_col: str = TARGET_COL) -> List[str]:
    # float rounding leaves a tiny non-zero std on constant columns
    features = df.drop(columns=[target_col], errors="ignore")
    unique = features.nunique(dropna=False)
    return unique[unique <= 1].index.tolist()

def drop_zero_variance(df: pd.DataFrame, target_col: str = TARGET_COL) -> pd.DataFrame:
    return df.drop(columns=zero_variance_columns(df, target_col))

def correlated_pairs(df: pd.DataFrame, threshold: float = CORR_THRESHOLD,
                     target_col: str = TARGET_COL) -> pd.DataFrame:
    corr = df.drop(columns=[target_col], errors="ignore").corr()
    rows, cols = np.triu_indices(len(corr), k=1)
    pairs = pd.DataFrame({
        "feature_a": corr.index[rows],
        "feature_b": corr.columns[cols],
        "corr": corr.to_numpy()[rows, cols],
    })
    pairs = pairs[pairs["corr"].abs() >= threshold]
    order = pairs["corr"].abs().sort_values(ascending=False).index
    return pairs.loc[order].reset_index(drop=True)

def redundant_columns(df: pd.DataFrame, tol: float = EXACT_CORR_TOL,
                      target_col: str = TARGET_COL) -> List[str]:
    """Columns perfectly correlated (up to ``tol``) with an earlier kept column."""
    corr = df.drop(columns=[target_col], errors="ignore").corr().abs()
    kept, dropped = [], []
    for col in corr.columns:
        if any(corr.at[col, k] >= 1 - tol for k in kept):
            dropped.append(col)
        else:
            kept.append(col)
    return dropped

def drop_redundant(df: pd.DataFrame, tol: float = EXACT_CORR_TOL,
                   target_col: str = TARGET_COL) -> pd.DataFrame:
    return df.drop(columns=redundant_columns(df, tol, target_col))

def make_scaler() -> Pipeline:
    return Pipeline([
        ("imputer", SimpleImputer(strategy="median")),
        ("scaler", StandardScaler()),
    ]).set_output(transform="pandas")

def scale_per_split(X_train: pd.DataFrame, X_test: pd.DataFrame) -> Tuple[pd.DataFrame, pd.DataFrame]:
    # each split is centred and scaled with its own statistics
    return make_scaler().fit_transform(X_train), make_scaler().fit_transform(X_test)
