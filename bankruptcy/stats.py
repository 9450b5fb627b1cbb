import numpy as np
import pandas as pd

from bankruptcy.data import TARGET_COL

def describe_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Mean, median, spread and missing count for every numeric column."""
    numeric = df.select_dtypes(include=[np.number])
    summary = numeric.agg(["mean", "median", "std", "min", "max"]).T
    summary["missing"] = df[numeric.columns].isnull().sum()
    summary["unique"] = numeric.nunique()
    return summary

def class_balance(y: pd.Series) -> pd.DataFrame:
    return pd.DataFrame({
        "count": y.value_counts().sort_index(),
        "proportion": y.value_counts(normalize=True).sort_index(),
    })

def target_correlations(df: pd.DataFrame, target_col: str = TARGET_COL) -> pd.Series:
    corr = df.corr(numeric_only=True)[target_col].drop(target_col).dropna()
    return corr.reindex(corr.abs().sort_values(ascending=False).index)

def zscore_outliers(df: pd.DataFrame, threshold: float = 3.0, target_col: str = TARGET_COL) -> pd.Series:
    features = df.drop(columns=[target_col], errors="ignore").select_dtypes(include=[np.number])
    std = features.std().replace(0, np.nan)
    z_scores = ((features - features.mean()) / std).abs()
    return (z_scores > threshold).sum().sort_values(ascending=False)

def duplicate_rows(df: pd.DataFrame) -> int:
    return int(df.duplicated().sum())
