import pathlib
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

sns.set_palette("husl")

def _save(fig, path) -> pathlib.Path:
    path = pathlib.Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path

def plot_class_balance(y: pd.Series, path) -> pathlib.Path:
    fig, ax = plt.subplots(figsize=(6, 4))
    sns.countplot(x=y, ax=ax)
    for p in ax.patches:
        ax.annotate(f"{int(p.get_height())}",
                    (p.get_x() + p.get_width() / 2., p.get_height()),
                    ha="center", va="bottom")
    ax.set_title("Class distribution")
    return _save(fig, path)

def plot_correlation_heatmap(corr: pd.DataFrame, path, title: str = "Correlation matrix") -> pathlib.Path:
    size = max(8, len(corr) // 4)
    fig, ax = plt.subplots(figsize=(size, size))
    sns.heatmap(corr, cmap="coolwarm", vmin=-1, vmax=1, center=0,
                xticklabels=True, yticklabels=True, ax=ax)
    ax.tick_params(labelsize=5)
    ax.set_title(title)
    return _save(fig, path)

def plot_clustered_correlation(corr: pd.DataFrame, path) -> pathlib.Path:
    grid = sns.clustermap(corr, cmap="vlag", vmin=-1, vmax=1, center=0,
                          method="average", figsize=(14, 14))
    path = pathlib.Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    grid.savefig(path)
    plt.close(grid.figure)
    return path

def plot_pca_variance(curve: pd.Series, path) -> pathlib.Path:
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(curve.index, curve.values, marker=".")
    ax.axhline(0.95, color="grey", linestyle="--")
    ax.set_xlabel("Number of components")
    ax.set_ylabel("Cumulative explained variance")
    ax.set_ylim(0, 1.05)
    return _save(fig, path)

def plot_projection(emb: pd.DataFrame, y: pd.Series, path, title: str) -> pathlib.Path:
    x_col, y_col = emb.columns[:2]
    data = emb.assign(label=y.loc[emb.index].values)
    fig, ax = plt.subplots(figsize=(7, 6))
    # minority class drawn last so it stays visible
    sns.scatterplot(data=data.sort_values("label"), x=x_col, y=y_col, hue="label",
                    s=10, alpha=0.6, ax=ax)
    ax.set_title(title)
    return _save(fig, path)
