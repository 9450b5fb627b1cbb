import pathlib
from typing import Optional, Tuple
import pandas as pd
from sklearn.model_selection import train_test_split

TARGET_COL = "Bankrupt?"
ZERO_VARIANCE_COL = "Net Income Flag"

DATA_DIR = pathlib.Path(__file__).resolve().parents[1] / "data"
RAW_FILE = "data.xlsx"
TRAIN_FILE = "train.xlsx"
TEST_FILE = "test.xlsx"

TEST_SIZE = 0.2
RANDOM_STATE = 42

def check_labels(df: pd.DataFrame, target_col: str = TARGET_COL) -> None:
    if target_col not in df.columns:
        raise ValueError(f"Label column {target_col!r} not found")
    if df[target_col].isna().any():
        raise ValueError(f"Label column {target_col!r} has missing (NaN) labels")
    bad = set(df[target_col].unique()) - {0, 1}
    if bad:
        raise ValueError(f"Label column {target_col!r} must only hold 0/1, got {sorted(map(repr, bad))}")

def load_raw_data(path: Optional[pathlib.Path] = None) -> pd.DataFrame:
    path = pathlib.Path(path) if path is not None else DATA_DIR / RAW_FILE
    df = pd.read_excel(path, engine="openpyxl")
    # the published workbook pads most headers with a leading space
    df.columns = df.columns.str.strip()
    check_labels(df)
    return df

def split_features_target(df: pd.DataFrame, target_col: str = TARGET_COL) -> Tuple[pd.DataFrame, pd.Series]:
    return df.drop(columns=[target_col]), df[target_col]

def stratified_split(df: pd.DataFrame, target_col: str = TARGET_COL,
                     test_size: float = TEST_SIZE, random_state: int = RANDOM_STATE):
    if df.empty:
        raise ValueError("Cannot split an empty table")
    check_labels(df, target_col)
    return train_test_split(
        df,
        test_size=test_size,
        stratify=df[target_col],
        random_state=random_state,
    )

def train_test_xy(train_set: pd.DataFrame, test_set: pd.DataFrame, target_col: str = TARGET_COL):
    X_train, y_train = split_features_target(train_set, target_col)
    X_test, y_test = split_features_target(test_set, target_col)
    return X_train, X_test, y_train, y_test

def export_splits(train_set: pd.DataFrame, test_set: pd.DataFrame,
                  out_dir: Optional[pathlib.Path] = None) -> Tuple[pathlib.Path, pathlib.Path]:
    out_dir = pathlib.Path(out_dir) if out_dir is not None else DATA_DIR
    out_dir.mkdir(parents=True, exist_ok=True)
    train_path = out_dir / TRAIN_FILE
    test_path = out_dir / TEST_FILE
    train_set.to_excel(train_path, index=False)
    test_set.to_excel(test_path, index=False)
    return train_path, test_path
