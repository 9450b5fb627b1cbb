import os
import random
import time
from contextlib import contextmanager
import numpy as np

from bankruptcy.data import RANDOM_STATE

def seed_everything(seed: int = RANDOM_STATE):
    random.seed(seed)
    np.random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)

@contextmanager
def timer(name: str):
    start = time.time()
    print(f"[{name}] start")
    yield
    print(f"[{name}] done in {time.time() - start:.1f}s")

def section(title: str, width: int = 30):
    print(f"\n{title}")
    print("-" * width)
