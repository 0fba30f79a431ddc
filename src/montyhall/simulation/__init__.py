"""Simulation package - single rounds, batches and their summaries"""
from .round_orchestrator import play_game, play_round
from .batch_simulator import play_n_games, BatchSimulator, SimulationReport, validate_rounds
from .summary import summarize_results, format_summary, print_summary, win_rate_confidence_intervals

__all__ = [
    'play_game',
    'play_round',
    'play_n_games',
    'BatchSimulator',
    'SimulationReport',
    'validate_rounds',
    'summarize_results',
    'format_summary',
    'print_summary',
    'win_rate_confidence_intervals'
]
