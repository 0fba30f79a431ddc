# batch_simulator.py
"""
Repeated play of the Monty Hall game

play_n_games is the plain entry point: n rounds against one generator,
collected into a single table. BatchSimulator adds the configuration driven
run with an optional worker pool, where every worker owns an independent
child generator and chunks are reassembled in order.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from multiprocessing import Pool
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from src.montyhall.config.unified_config import UnifiedConfig, ConfigurationError
from src.montyhall.simulation.round_orchestrator import play_round, RESULT_COLUMNS
from src.montyhall.simulation.summary import (
    summarize_results,
    print_summary,
    win_rate_confidence_intervals
)
from src.montyhall.utils.random_source import make_rng, resolve_rng, spawn_seeds

logger = logging.getLogger(__name__)

BATCH_COLUMNS = ['round'] + RESULT_COLUMNS


def validate_rounds(n) -> int:
    """
    Check a repetition count

    Raises:
        ValueError: unless n is a positive integer
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"Number of games must be a positive integer, got {n!r}")
    if n <= 0:
        raise ValueError(f"Number of games must be a positive integer, got {n}")
    return int(n)


def _simulate_rounds(n: int, rng: np.random.Generator, first_round: int = 1) -> List[Tuple[int, str, str]]:
    records = []
    for round_number in range(first_round, first_round + n):
        for strategy, outcome in play_round(rng):
            records.append((round_number, strategy, outcome))
    return records


def _worker_function(args) -> List[Tuple[int, str, str]]:
    """Play one chunk of rounds in a worker process"""
    n_rounds, first_round, seed_sequence = args
    return _simulate_rounds(n_rounds, np.random.default_rng(seed_sequence), first_round)


def play_n_games(n: int = 100, rng: Optional[np.random.Generator] = None,
                 report: bool = True, decimals: int = 2) -> pd.DataFrame:
    """
    Simulate n games and collect the results of both strategies

    Args:
        n: Number of games, a positive integer
        rng: Generator shared by all rounds, the default generator when None
        report: Print the rounded proportion table when True
        decimals: Decimal places of the printed table

    Returns:
        DataFrame with 2n rows and columns round, strategy and outcome

    Raises:
        ValueError: if n is not a positive integer
    """
    n = validate_rounds(n)
    rng = resolve_rng(rng)

    logger.info(f"Playing {n} games")
    results = pd.DataFrame(_simulate_rounds(n, rng), columns=BATCH_COLUMNS)

    if report:
        print_summary(summarize_results(results), decimals)

    return results


@dataclass
class SimulationReport:
    """Everything produced by one batch run"""
    results: pd.DataFrame
    summary: pd.DataFrame
    confidence_intervals: pd.DataFrame
    n_rounds: int
    n_workers: int
    random_seed: Optional[int]
    duration_seconds: float


class BatchSimulator:
    """
    Configuration driven batch runner

    Reads general.random_seed, simulation.default_rounds,
    simulation.max_workers, reporting.decimal_places and
    reporting.confidence_level.
    """

    def __init__(self, config: UnifiedConfig):
        self.config = config
        self._cache_config_values()
        logger.info(f"BatchSimulator initialized: rounds={self.default_rounds}, "
                    f"workers={self.max_workers}, seed={self.random_seed}")

    def _cache_config_values(self):
        """Cache simulation configuration values with validation"""
        general_config = self.config.get_section('general')
        if general_config is None:
            raise ConfigurationError("Missing required section: 'general'", 'general')
        self.random_seed = general_config.get('random_seed')

        try:
            self.default_rounds = validate_rounds(self.config.get_required('simulation', 'default_rounds'))
        except ValueError as e:
            raise ConfigurationError(f"Invalid simulation.default_rounds: {e}", 'simulation') from e

        self.max_workers = self.config.get_required('simulation', 'max_workers')
        if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int) or self.max_workers < 1:
            raise ConfigurationError(f"Invalid simulation.max_workers: {self.max_workers}", 'simulation')

        self.decimal_places = self.config.get_required('reporting', 'decimal_places')
        self.confidence_level = self.config.get_required('reporting', 'confidence_level')

    def run(self, n_rounds: Optional[int] = None, max_workers: Optional[int] = None) -> SimulationReport:
        """
        Run a batch of rounds

        Args:
            n_rounds: Number of rounds, defaults to simulation.default_rounds
            max_workers: Worker processes, defaults to simulation.max_workers

        Returns:
            SimulationReport with the raw table, proportions and intervals
        """
        n_rounds = validate_rounds(self.default_rounds if n_rounds is None else n_rounds)
        n_workers = self.max_workers if max_workers is None else max_workers
        if isinstance(n_workers, bool) or not isinstance(n_workers, int) or n_workers < 1:
            raise ValueError(f"max_workers must be a positive integer, got {n_workers!r}")
        n_workers = min(n_workers, n_rounds)

        logger.info(f"Starting batch of {n_rounds} rounds with {n_workers} worker(s)")
        start_time = datetime.now()

        if n_workers == 1:
            records = _simulate_rounds(n_rounds, make_rng(self.random_seed))
        else:
            records = self._distribute_work(n_rounds, n_workers)

        results = pd.DataFrame(records, columns=BATCH_COLUMNS)
        duration = (datetime.now() - start_time).total_seconds()

        report = SimulationReport(
            results=results,
            summary=summarize_results(results),
            confidence_intervals=win_rate_confidence_intervals(results, self.confidence_level),
            n_rounds=n_rounds,
            n_workers=n_workers,
            random_seed=self.random_seed,
            duration_seconds=duration
        )

        logger.info(f"Batch completed in {duration:.2f}s")
        return report

    def _distribute_work(self, n_rounds: int, n_workers: int) -> List[Tuple[int, str, str]]:
        """Split rounds into contiguous chunks, one per worker, and rejoin them in order"""
        chunk_sizes = [len(chunk) for chunk in np.array_split(np.arange(n_rounds), n_workers)]
        first_rounds = np.cumsum([1] + chunk_sizes[:-1]).tolist()
        seeds = spawn_seeds(self.random_seed, n_workers)

        worker_args = list(zip(chunk_sizes, first_rounds, seeds))
        logger.debug(f"Distributing chunks {chunk_sizes} to {n_workers} workers")

        with Pool(n_workers) as pool:
            chunks = pool.map(_worker_function, worker_args)

        return [record for chunk in chunks for record in chunk]