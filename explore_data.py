import argparse
import pandas as pd
from bankruptcy.data import DATA_DIR, RAW_FILE, TARGET_COL, load_raw_data, split_features_target
from bankruptcy.stats import class_balance, describe_columns, duplicate_rows, target_correlations, zscore_outliers
from bankruptcy.utils import section


def main(data_path):
    print("Loading data...")
    df = load_raw_data(data_path)
    X, y = split_features_target(df)
    print(f"Dataset Shape: {df.shape}")
    print(f"Features: {X.shape[1]}, observations: {X.shape[0]}")

    section(f"Target Distribution ({TARGET_COL}):")
    print(class_balance(y))

    summary = describe_columns(X)
    section("Missing Values:")
    missing = summary["missing"]
    print(missing[missing > 0] if missing.any() else "none")

    section("Numerical Columns Statistics:")
    with pd.option_context("display.max_rows", None, "display.width", 160):
        print(summary)

    section("Constant Columns:")
    print(summary.index[summary["unique"] <= 1].tolist())

    section("Correlations with Target (top 15):")
    print(target_correlations(df).head(15))

    section("Potential Outliers (Z-score > 3, top 15):")
    outliers = zscore_outliers(df)
    for col, count in outliers.head(15).items():
        print(f"{col}: {count} outliers ({count / len(df) * 100:.2f}%)")

    section("Duplicate Rows:")
    print(duplicate_rows(df))


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--data", default=str(DATA_DIR / RAW_FILE))
    args = parser.parse_args()
    main(args.data)
