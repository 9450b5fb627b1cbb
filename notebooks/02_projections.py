import sys
import os
sys.path.append(os.path.abspath(".."))
import seaborn as sns
import matplotlib.pyplot as plt
from bankruptcy.data import load_raw_data, stratified_split, train_test_xy
from bankruptcy.features import drop_redundant, drop_zero_variance, scale_per_split
from bankruptcy.projection import pca_projection, reorder_correlation, tsne_projection

df = drop_redundant(drop_zero_variance(load_raw_data()))
train_set, test_set = stratified_split(df)
X_train, X_test, y_train, y_test = train_test_xy(train_set, test_set)
X_train, X_test = scale_per_split(X_train, X_test)

sns.heatmap(reorder_correlation(X_train.corr()), cmap="coolwarm", center=0)
plt.show()

emb, ratio = pca_projection(X_train)
print("Explained variance:", ratio)
sns.scatterplot(x=emb["pc_1"], y=emb["pc_2"], hue=y_train, s=10)
plt.show()

emb = tsne_projection(X_train, sample_size=2000, y=y_train)
sns.scatterplot(x=emb["tsne_1"], y=emb["tsne_2"], hue=y_train.loc[emb.index], s=10)
plt.show()
