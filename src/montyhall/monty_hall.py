# monty_hall.py
# Command line entry point: run a batch and report stay vs switch win rates

import logging
import sys
from typing import Dict, List, Optional

from src.montyhall.config.unified_config import UnifiedConfig
from src.montyhall.reporting.convergence import plot_convergence
from src.montyhall.simulation.batch_simulator import BatchSimulator, SimulationReport

logger = logging.getLogger(__name__)

USAGE = ("usage: monty-hall [--rounds N] [--seed S] [--workers W] "
         "[--plot PATH] [--config PATH] [--env NAME] [--quiet]")


def parse_arguments(argv: List[str]) -> Dict:
    """
    Parse command line overrides

    Raises:
        ValueError: on unknown options, missing option values, non-integer numbers
            or a round or worker count below one
    """
    options = {'rounds': None, 'seed': None, 'workers': None, 'plot': None,
               'config': None, 'env': 'prod', 'quiet': False}
    value_options = {'--rounds': ('rounds', int), '--seed': ('seed', int), '--workers': ('workers', int),
                     '--plot': ('plot', str), '--config': ('config', str), '--env': ('env', str)}

    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == '--quiet':
            options['quiet'] = True
        elif arg in value_options:
            if i + 1 >= len(argv):
                raise ValueError(f"Option {arg} requires a value")
            key, convert = value_options[arg]
            options[key] = convert(argv[i + 1])
            i += 1
        else:
            raise ValueError(f"Unknown option: {arg}")
        i += 1

    for key in ('rounds', 'workers'):
        if options[key] is not None and options[key] < 1:
            raise ValueError(f"--{key} must be a positive integer, got {options[key]}")

    return options


def setup_logging(config: UnifiedConfig, quiet: bool = False) -> None:
    logging_config = config.logging
    level = 'WARNING' if quiet else logging_config.get('level', 'INFO')
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO),
                        format=logging_config.get('format', '%(name)s - %(levelname)s - %(message)s'))


def print_report(report: SimulationReport, decimals: int) -> None:
    print(f"\n{'=' * 50}")
    print(f"MONTY HALL SIMULATION: {report.n_rounds} rounds")
    print(f"{'=' * 50}")
    print("\nOutcome proportions by strategy:")
    print(report.summary.round(decimals).to_string())
    print("\nWin rate confidence intervals:")
    for strategy, row in report.confidence_intervals.iterrows():
        print(f"  {strategy:<8} {row['win_rate']:.{decimals}f} "
              f"[{row['ci_low']:.{decimals}f}, {row['ci_high']:.{decimals}f}]")
    print(f"\nSeed: {report.random_seed}  Workers: {report.n_workers}  "
          f"Duration: {report.duration_seconds:.2f}s")


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    try:
        options = parse_arguments(argv)
    except ValueError as e:
        print(f"{e}\n{USAGE}", file=sys.stderr)
        return 2

    config = UnifiedConfig(config_path=options['config'], environment=options['env'])
    setup_logging(config, options['quiet'])

    if options['seed'] is not None:
        config.update_config({'general': {'random_seed': options['seed']}})

    issues = config.validate_config()
    for warning in issues['warnings']:
        logger.warning(warning)
    if issues['missing_sections'] or issues['invalid_values']:
        for problem in issues['missing_sections'] + issues['invalid_values']:
            logger.error(f"Configuration problem: {problem}")
        return 1

    simulator = BatchSimulator(config)
    try:
        report = simulator.run(n_rounds=options['rounds'], max_workers=options['workers'])
    except ValueError as e:
        print(f"{e}\n{USAGE}", file=sys.stderr)
        return 2
    print_report(report, simulator.decimal_places)

    plot_path = options['plot'] or config.get_section('reporting', {}).get('plot_path')
    if plot_path:
        plot_convergence(report.results, plot_path)
        print(f"\nConvergence chart written to {plot_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
