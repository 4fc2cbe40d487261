import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from lockstep.config import get_config


def dprint(*args: Any, **kwargs: Any):
    """debug print, only when LOCKSTEP_DEBUG is set"""
    if get_config().debug:
        print("[lockstep]", *args, **kwargs)


@contextmanager
def time_this(label: str = "") -> Iterator[None]:
    """prints the wall time the block took, under `label`"""
    start = time.perf_counter()

    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        prefix = f"{label}: " if label else ""
        print(f"{prefix}{elapsed:.4f}s")
