import sys
import os
sys.path.append(os.path.abspath(".."))
import seaborn as sns
import matplotlib.pyplot as plt
from bankruptcy.data import load_raw_data, TARGET_COL, ZERO_VARIANCE_COL
from bankruptcy.stats import class_balance, describe_columns

df = load_raw_data()
print(df.shape)
print(df.head())
print(class_balance(df[TARGET_COL]))
print(describe_columns(df).loc[[ZERO_VARIANCE_COL]])

sns.countplot(x=df[TARGET_COL])
plt.show()
