from .convergence import running_win_rates, plot_convergence

__all__ = ['running_win_rates', 'plot_convergence']
