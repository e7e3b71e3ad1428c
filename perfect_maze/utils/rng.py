"""Random generator handling shared by generation and solving."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar, Union

import numpy as np

T = TypeVar("T")

RandomLike = Union[np.random.Generator, int, None]


def make_rng(rng: RandomLike = None) -> np.random.Generator:
    """
    Normalize a seed or generator to a numpy Generator.

    An existing Generator is returned unchanged, so a caller can thread one
    stream through several operations.
    """
    return np.random.default_rng(rng)


def choose(items: Sequence[T], rng: np.random.Generator) -> T:
    """Uniformly random element of a non-empty sequence."""
    return items[int(rng.integers(len(items)))]
