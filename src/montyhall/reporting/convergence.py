# convergence.py
"""
Running win rate of each strategy over the rounds of a batch

Stay should settle near 1/3 and switch near 2/3 as rounds accumulate.
"""
import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd
from matplotlib.figure import Figure

from src.montyhall.game.game_types import Outcome

logger = logging.getLogger(__name__)

REFERENCE_RATES = {'stay': 1 / 3, 'switch': 2 / 3}


def running_win_rates(results: pd.DataFrame) -> pd.DataFrame:
    """
    Cumulative win proportion per strategy

    Args:
        results: Batch table with round, strategy and outcome columns

    Returns:
        DataFrame indexed by round with one column per strategy
    """
    missing = {'round', 'strategy', 'outcome'} - set(results.columns)
    if missing:
        raise ValueError(f"Results table is missing columns: {sorted(missing)}")

    wins = (results['outcome'] == Outcome.WIN.value).astype(float)
    by_round = wins.groupby([results['round'], results['strategy']]).mean().unstack('strategy')
    by_round = by_round.sort_index()

    rounds_played = pd.Series(range(1, len(by_round) + 1), index=by_round.index)
    running = by_round.cumsum().div(rounds_played, axis=0)
    running.columns.name = 'strategy'
    return running


def plot_convergence(results: pd.DataFrame, output_path: Optional[Union[str, Path]] = None):
    """
    Plot the running win rates with the theoretical values for reference

    Args:
        results: Batch table with round, strategy and outcome columns
        output_path: Save the chart here when given

    Returns:
        matplotlib Figure, detached from pyplot so the active backend is left alone
    """
    running = running_win_rates(results)

    fig = Figure(figsize=(10, 5))
    ax = fig.subplots()
    for strategy in running.columns:
        line, = ax.plot(running.index, running[strategy], label=f"{strategy} (observed)")
        if strategy in REFERENCE_RATES:
            ax.axhline(REFERENCE_RATES[strategy], color=line.get_color(), linestyle='--', alpha=0.6,
                       label=f"{strategy} (expected {REFERENCE_RATES[strategy]:.3f})")

    ax.set_xlabel('Round')
    ax.set_ylabel('Win rate')
    ax.set_ylim(0, 1)
    ax.set_title('Monty Hall: running win rate by strategy')
    ax.legend(loc='best')
    ax.grid(True, alpha=0.3)
    fig.tight_layout()

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path)
        logger.info(f"Convergence chart saved to: {output_path}")

    return fig
