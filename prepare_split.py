import argparse
import pathlib
from bankruptcy.data import (
    DATA_DIR, RAW_FILE, RANDOM_STATE, TARGET_COL, TEST_SIZE, ZERO_VARIANCE_COL,
    export_splits, load_raw_data, stratified_split, train_test_xy,
)
from bankruptcy.features import (
    CORR_THRESHOLD, correlated_pairs, drop_redundant, drop_zero_variance,
    redundant_columns, scale_per_split, zero_variance_columns,
)
from bankruptcy.plots import (
    plot_class_balance, plot_clustered_correlation, plot_correlation_heatmap,
    plot_pca_variance, plot_projection,
)
from bankruptcy.projection import pca_projection, pca_variance_curve, reorder_correlation, tsne_projection
from bankruptcy.utils import seed_everything, timer


def clean(df, tol=1e-6):
    zero_var = zero_variance_columns(df)
    print(f"Zero-variance columns: {zero_var}")
    if ZERO_VARIANCE_COL in df.columns:
        print(f"{ZERO_VARIANCE_COL} std: {df[ZERO_VARIANCE_COL].std()}")
    df = drop_zero_variance(df)
    dropped = redundant_columns(df, tol)
    print(f"Dropping {len(dropped)} exactly-correlated columns: {dropped}")
    return drop_redundant(df, tol)


def analyze(X_train, y_train, out_dir, threshold, tsne_sample, skip_tsne, seed):
    corr = X_train.corr()
    pairs = correlated_pairs(X_train, threshold)
    print(f"{len(pairs)} feature pairs with |corr| >= {threshold}")
    print(pairs.head(20).to_string(index=False))

    plot_class_balance(y_train, out_dir / "class_balance.png")
    plot_correlation_heatmap(corr, out_dir / "correlation.png")
    plot_correlation_heatmap(reorder_correlation(corr), out_dir / "correlation_clustered.png",
                             title="Correlation matrix (hierarchical order)")
    plot_clustered_correlation(corr, out_dir / "correlation_clustermap.png")

    with timer("pca"):
        curve = pca_variance_curve(X_train)
        emb, ratio = pca_projection(X_train, random_state=seed)
    print(f"PCA: 2 components explain {ratio.sum():.3f}, "
          f"{int((curve < 0.95).sum()) + 1} components reach 95%")
    plot_pca_variance(curve, out_dir / "pca_variance.png")
    plot_projection(emb, y_train, out_dir / "pca.png", "PCA (train split)")

    if not skip_tsne:
        with timer("t-sne"):
            emb = tsne_projection(X_train, random_state=seed, sample_size=tsne_sample, y=y_train)
        plot_projection(emb, y_train, out_dir / "tsne.png", "t-SNE (train split)")


def main(data_path=None, out_dir=DATA_DIR, test_size=TEST_SIZE, seed=RANDOM_STATE,
         threshold=CORR_THRESHOLD, tsne_sample=2000, skip_tsne=False, export=True):
    seed_everything(seed)
    out_dir = pathlib.Path(out_dir)
    with timer("load"):
        df = load_raw_data(data_path)
    print(f"Loaded {df.shape[0]} rows x {df.shape[1]} columns, "
          f"{int(df[TARGET_COL].sum())} bankrupt ({df[TARGET_COL].mean():.2%})")

    df = clean(df)
    train_set, test_set = stratified_split(df, test_size=test_size, random_state=seed)
    print(f"Train: {len(train_set)} rows ({train_set[TARGET_COL].mean():.2%} bankrupt), "
          f"test: {len(test_set)} rows ({test_set[TARGET_COL].mean():.2%} bankrupt)")

    X_train, X_test, y_train, y_test = train_test_xy(train_set, test_set)
    X_train, X_test = scale_per_split(X_train, X_test)

    analyze(X_train, y_train, out_dir / "plots", threshold, tsne_sample, skip_tsne, seed)

    if export:
        train_path, test_path = export_splits(train_set, test_set, out_dir)
        print("Saved:", train_path, test_path)
    return X_train, X_test, y_train, y_test


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--data", default=str(DATA_DIR / RAW_FILE))
    parser.add_argument("--out", default=str(DATA_DIR))
    parser.add_argument("--test-size", default=TEST_SIZE, type=float)
    parser.add_argument("--seed", default=RANDOM_STATE, type=int)
    parser.add_argument("--threshold", default=CORR_THRESHOLD, type=float)
    parser.add_argument("--tsne-sample", default=2000, type=int)
    parser.add_argument("--skip-tsne", action="store_true")
    parser.add_argument("--no-export", action="store_true")
    args = parser.parse_args()
    main(args.data, args.out, args.test_size, args.seed, args.threshold,
         args.tsne_sample, args.skip_tsne, not args.no_export)
