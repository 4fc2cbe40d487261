import argparse

import numpy as np

from lockstep import algorithms
from lockstep.utils.print_utils import time_this
from lockstep.zip_view import zip_view


def main():
    parser = argparse.ArgumentParser(description="time traversal of a few zip shapes")
    parser.add_argument("--n", type=int, default=200_000)
    args = parser.parse_args()
    n: int = args.n

    xs = np.random.rand(n)
    labels = [str(i) for i in range(n)]

    with time_this("builtin zip"):
        total = sum(1 for _ in zip(xs, labels))
        print(f"{total} rows")

    view = zip_view(xs, labels)

    with time_this("cursor traversal"):
        total = sum(1 for _ in algorithms.iter_range(view.begin(), view.end()))
        print(f"{total} rows")

    with time_this("indexed traversal"):
        total = sum(1 for i in range(len(view)) if view[i] is not None)
        print(f"{total} rows")

    with time_this("with a generator input"):
        total = sum(1 for _ in zip_view(xs, (i for i in range(n))))
        print(f"{total} rows")


if __name__ == "__main__":
    main()
