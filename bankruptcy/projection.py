from typing import List, Optional, Tuple
import numpy as np
import pandas as pd
from scipy.cluster.hierarchy import leaves_list, linkage
from scipy.spatial.distance import squareform
from sklearn.decomposition import PCA
from sklearn.manifold import TSNE
from sklearn.model_selection import train_test_split

from bankruptcy.data import RANDOM_STATE

def cluster_order(corr: pd.DataFrame) -> List[str]:
    """Leaf order of an average-linkage clustering on 1 - |corr|."""
    dist = 1 - corr.abs().fillna(0).to_numpy()
    dist = np.clip((dist + dist.T) / 2, 0, None)
    np.fill_diagonal(dist, 0)
    Z = linkage(squareform(dist, checks=False), method="average")
    return corr.columns[leaves_list(Z)].tolist()

def reorder_correlation(corr: pd.DataFrame) -> pd.DataFrame:
    order = cluster_order(corr)
    return corr.loc[order, order]

def pca_projection(X: pd.DataFrame, n_components: int = 2,
                   random_state: int = RANDOM_STATE) -> Tuple[pd.DataFrame, np.ndarray]:
    pca = PCA(n_components=n_components, random_state=random_state)
    emb = pca.fit_transform(X)
    cols = [f"pc_{i + 1}" for i in range(emb.shape[1])]
    return pd.DataFrame(emb, columns=cols, index=X.index), pca.explained_variance_ratio_

def pca_variance_curve(X: pd.DataFrame) -> pd.Series:
    pca = PCA().fit(X)
    curve = np.cumsum(pca.explained_variance_ratio_)
    return pd.Series(curve, index=np.arange(1, len(curve) + 1), name="cumulative_variance")

def tsne_projection(X: pd.DataFrame, perplexity: float = 30.0, random_state: int = RANDOM_STATE,
                    sample_size: Optional[int] = None, y: Optional[pd.Series] = None) -> pd.DataFrame:
    if sample_size is not None and sample_size < len(X):
        # keep the minority class represented in the subsample
        X, _ = train_test_split(
            X,
            train_size=sample_size,
            stratify=y.loc[X.index] if y is not None else None,
            random_state=random_state,
        )
    perplexity = min(perplexity, (len(X) - 1) / 3)
    tsne = TSNE(
        n_components=2,
        perplexity=perplexity,
        init="pca",
        learning_rate="auto",
        random_state=random_state,
    )
    emb = tsne.fit_transform(X.to_numpy())
    return pd.DataFrame(emb, columns=["tsne_1", "tsne_2"], index=X.index)
