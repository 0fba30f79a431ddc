# summary.py
"""
Aggregation and reporting of simulation results

summarize_results is pure; format_summary and print_summary only present
what it returns.
"""
import logging
from typing import Optional

import pandas as pd
from scipy import stats

from src.montyhall.game.game_types import Outcome

logger = logging.getLogger(__name__)

OUTCOME_COLUMNS = [Outcome.LOSE.value, Outcome.WIN.value]


def _check_results(results: pd.DataFrame) -> None:
    missing = {'strategy', 'outcome'} - set(results.columns)
    if missing:
        raise ValueError(f"Results table is missing columns: {sorted(missing)}")
    if results.empty:
        raise ValueError("Results table is empty")


def summarize_results(results: pd.DataFrame, decimals: Optional[int] = None) -> pd.DataFrame:
    """
    Row proportions of outcomes per strategy

    Args:
        results: Table with strategy and outcome columns
        decimals: Round proportions to this many places when given

    Returns:
        DataFrame indexed by strategy with LOSE and WIN columns summing to 1
    """
    _check_results(results)

    summary = pd.crosstab(results['strategy'], results['outcome'], normalize='index')
    summary = summary.reindex(columns=OUTCOME_COLUMNS, fill_value=0.0)
    summary.columns.name = 'outcome'

    if decimals is not None:
        summary = summary.round(decimals)
    return summary


def format_summary(summary: pd.DataFrame, decimals: int = 2) -> str:
    """Human-readable proportion table"""
    return summary.round(decimals).to_string(float_format=lambda value: f"{value:.{decimals}f}")


def print_summary(summary: pd.DataFrame, decimals: int = 2) -> None:
    print(format_summary(summary, decimals))


def win_rate_confidence_intervals(results: pd.DataFrame, confidence_level: float = 0.95) -> pd.DataFrame:
    """
    Win rate per strategy with a Wilson score interval

    Args:
        results: Table with strategy and outcome columns
        confidence_level: Coverage of the interval, between 0 and 1

    Returns:
        DataFrame indexed by strategy with wins, rounds, win_rate, ci_low, ci_high
    """
    _check_results(results)
    if not 0 < confidence_level < 1:
        raise ValueError(f"confidence_level must be between 0 and 1, got {confidence_level}")

    rows = []
    for strategy, group in results.groupby('strategy', sort=True):
        rounds = len(group)
        wins = int((group['outcome'] == Outcome.WIN.value).sum())
        interval = stats.binomtest(wins, rounds).proportion_ci(confidence_level=confidence_level, method='wilson')
        rows.append({
            'strategy': strategy,
            'wins': wins,
            'rounds': rounds,
            'win_rate': wins / rounds,
            'ci_low': interval.low,
            'ci_high': interval.high
        })

    intervals = pd.DataFrame(rows).set_index('strategy')
    logger.debug(f"Win rate intervals at {confidence_level:.0%}:\n{intervals}")
    return intervals
