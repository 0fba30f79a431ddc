# random_source.py
"""
Random number sources for the simulation

Every randomness-consuming operation accepts an explicit numpy Generator.
When none is given the process-wide default generator is used.
"""
from typing import List, Optional

import numpy as np

_default_rng = np.random.default_rng()


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a new generator, seeded when a seed is given"""
    return np.random.default_rng(seed)


def resolve_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else _default_rng


def spawn_seeds(seed: Optional[int], count: int) -> List[np.random.SeedSequence]:
    """
    Independent child seed sequences for parallel workers

    Children of one SeedSequence produce statistically independent streams,
    so each worker can own its generator without sharing state.
    """
    return np.random.SeedSequence(seed).spawn(count)
