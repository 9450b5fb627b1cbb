import argparse
from bankruptcy.data import DATA_DIR, RAW_FILE, load_raw_data
from bankruptcy.features import CORR_THRESHOLD, correlated_pairs, drop_zero_variance, redundant_columns

parser = argparse.ArgumentParser()
parser.add_argument("--data", default=str(DATA_DIR / RAW_FILE))
parser.add_argument("--threshold", default=CORR_THRESHOLD, type=float)
args = parser.parse_args()

df = drop_zero_variance(load_raw_data(args.data))

# Pairs above the threshold
pairs = correlated_pairs(df, args.threshold)
print(f"{len(pairs)} pairs with |corr| >= {args.threshold}:")
print(pairs.to_string(index=False))

# Exact duplicates: the earlier column of each pair is kept
print("\nDropped as exactly correlated:")
for col in redundant_columns(df):
    print(f"  - {col}")
