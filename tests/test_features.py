import numpy as np

from bankruptcy.data import TARGET_COL, ZERO_VARIANCE_COL, stratified_split, train_test_xy
from bankruptcy.features import (
    correlated_pairs, drop_redundant, drop_zero_variance, make_scaler,
    redundant_columns, scale_per_split, zero_variance_columns,
)


def test_zero_variance_detected(frame):
    assert frame[ZERO_VARIANCE_COL].std() == 0
    assert zero_variance_columns(frame) == [ZERO_VARIANCE_COL]


def test_drop_zero_variance(frame):
    cleaned = drop_zero_variance(frame)
    assert ZERO_VARIANCE_COL not in cleaned.columns
    assert TARGET_COL in cleaned.columns
    assert ZERO_VARIANCE_COL in frame.columns


def test_correlated_pairs(frame):
    pairs = correlated_pairs(drop_zero_variance(frame))
    found = {frozenset(p) for p in zip(pairs["feature_a"], pairs["feature_b"])}
    assert frozenset({"ROA(A)", "ROA(B)"}) in found
    assert frozenset({"Debt ratio %", "Net worth/Assets"}) in found
    assert (pairs["corr"].abs() >= 0.9).all()
    assert pairs["corr"].abs().is_monotonic_decreasing


def test_redundant_columns_keeps_first(frame):
    dropped = redundant_columns(drop_zero_variance(frame))
    assert dropped == ["Net worth/Assets", "Current Liability to Liability"]


def test_no_exact_correlation_after_drop(frame):
    cleaned = drop_redundant(drop_zero_variance(frame))
    corr = cleaned.drop(columns=[TARGET_COL]).corr().abs().to_numpy(copy=True)
    np.fill_diagonal(corr, 0)
    assert (corr < 1 - 1e-6).all()
    assert "ROA(B)" in cleaned.columns


def test_scale_per_split_standardizes_each_split(frame):
    train_set, test_set = stratified_split(drop_zero_variance(frame))
    X_train, X_test, _, _ = train_test_xy(train_set, test_set)
    X_test = X_test + 50
    S_train, S_test = scale_per_split(X_train, X_test)
    for scaled in (S_train, S_test):
        assert np.allclose(scaled.mean(), 0, atol=1e-8)
        assert np.allclose(scaled.std(ddof=0), 1, atol=1e-8)
    assert S_test.index.equals(X_test.index)
    # a scaler fit on train would leave the shifted test split off-centre
    leaked = make_scaler().fit(X_train).transform(X_test)
    assert (leaked.mean() > 1).all()


def test_constant_float_column_is_zero_variance(frame):
    frame["Cash Reinvestment %"] = 0.1
    assert "Cash Reinvestment %" in zero_variance_columns(frame)
    assert "Cash Reinvestment %" not in drop_zero_variance(frame).columns
