from .random_source import make_rng, resolve_rng, spawn_seeds

__all__ = ['make_rng', 'resolve_rng', 'spawn_seeds']
