"""
Main entry point for the heuristics demo.
Runs VNS, adaptive VNS, SA or LNS on the line search or TSP examples.
"""

import argparse
import logging
import sys

from heuristics import (
    AdaptiveSelector, HeuristicsException, InvalidConfigurationError, RandomSelector,
    SequentialSelector, Terminator, make_rng,
)
from heuristics.algorithms import (
    AdaptiveVNSBuilder, CoolingSchedule, LNSBuilder, SABuilder, VNSBuilder,
)
from heuristics.config import ADAPTIVE_CONFIG, SA_CONFIG, TERMINATION_CONFIG
from heuristics.core.logger import get_logger, setup_logger
from heuristics.evaluation.metrics import summarize_history
from examples.linesearch import NeighborSwap, NeighborsUpUntilN, numbers_from
from examples.tsp import (
    GreedyInsertionRepairer, RandomRemovalDestroyer, RegretInsertionRepairer, SwapOperator,
    TwoOptOperator, WorstRemovalDestroyer, distance_matrix, initial_tour, random_cities,
)

LINESEARCH_NUMBERS = [9, 8, 7, 8, 9, 7, 5, 0]


def main():
    """Main application entry point."""
    parser = create_argument_parser()
    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.INFO
    logger = setup_logger('heuristics', level=level)
    logger.info("=" * 60)
    logger.info(f"Heuristics demo: {args.algorithm.upper()} on {args.problem}")
    logger.info("=" * 60)

    try:
        rng = make_rng(args.seed)
        solution, operators, destroyers, repairers = build_problem(args, rng)
        algorithm = build_algorithm(args, rng, operators, destroyers, repairers)

        outcome = algorithm.optimize_timed(solution)
        print_results(algorithm, outcome)

        if args.plot:
            from heuristics.visualization.plotter import Plotter
            Plotter().plot_convergence(
                algorithm.get_convergence_data(),
                title=f"{algorithm.algorithm_name} on {args.problem}",
                save_path=args.plot
            )
            logger.info(f"Convergence plot saved to {args.plot}")

    except HeuristicsException as e:
        logger.error(f"Run failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(130)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Metaheuristic optimization demo (VNS, SA, LNS)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # VNS on the number line with radii 1 and 3
  python main.py --problem linesearch --algorithm vns --iterations 10

  # Simulated annealing with cooling on a random TSP instance
  python main.py --problem tsp --algorithm sa --temperature 50 --cooling 0.001 --seed 42

  # LNS with a time limit, saving the convergence plot
  python main.py --problem tsp --algorithm lns --time-limit 5 --plot lns.png
        """
    )

    parser.add_argument('--problem', choices=['linesearch', 'tsp'], default='linesearch',
                        help='Example problem to solve')
    parser.add_argument('--algorithm', choices=['vns', 'avns', 'sa', 'lns'], default='vns',
                        help='Algorithm to run (avns = adaptive VNS)')

    parser.add_argument('--iterations', type=int, default=TERMINATION_CONFIG['max_iterations'],
                        help='Maximum number of iterations')
    parser.add_argument('--time-limit', type=float, default=TERMINATION_CONFIG['time_limit'],
                        help='Time limit in seconds (combined with --iterations by OR)')
    parser.add_argument('--seed', type=int,
                        help='Random seed for reproducibility')

    parser.add_argument('--temperature', type=float, default=SA_CONFIG['temperature'],
                        help='Initial SA temperature')
    parser.add_argument('--cooling', type=float, default=SA_CONFIG['cooling_factor'],
                        help='SA cooling factor per iteration (0 = constant temperature)')
    parser.add_argument('--cities', type=int, default=30,
                        help='Number of cities for the TSP example')

    parser.add_argument('--plot', type=str, metavar='PATH',
                        help='Save a convergence plot to PATH')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')

    return parser


def build_problem(args, rng):
    """
    Create the initial solution and the problem's operators.

    Returns:
        Tuple (initial solution, operators, destroyers, repairers)
    """
    if args.problem == 'linesearch':
        if args.algorithm == 'lns':
            raise InvalidConfigurationError(parameter='problem', value=args.problem,
                                            expected="tsp when --algorithm lns")
        start = numbers_from(LINESEARCH_NUMBERS)[0]
        if args.algorithm == 'sa':
            operators = [NeighborSwap(LINESEARCH_NUMBERS)]
        else:
            operators = [NeighborsUpUntilN(LINESEARCH_NUMBERS, 1),
                         NeighborsUpUntilN(LINESEARCH_NUMBERS, 3)]
        return start, operators, [], []

    if args.cities < 3:
        # Swap and 2-opt moves need at least two positions after the fixed start
        raise InvalidConfigurationError(parameter='cities', value=args.cities,
                                        expected="integer >= 3")

    distances = distance_matrix(random_cities(args.cities, rng))
    operators = [TwoOptOperator(), SwapOperator()]
    destroyers = [RandomRemovalDestroyer(0.2), WorstRemovalDestroyer(max(1, args.cities // 10))]
    repairers = [GreedyInsertionRepairer(), RegretInsertionRepairer()]
    return initial_tour(distances), operators, destroyers, repairers


def build_algorithm(args, rng, operators, destroyers, repairers):
    """Configure the requested algorithm through its builder."""
    terminator = Terminator.builder().iterations(args.iterations)
    if args.time_limit is not None:
        terminator.time_max(args.time_limit)

    if args.algorithm == 'vns':
        builder = VNSBuilder().selector(SequentialSelector())
        for operator in operators:
            builder.operator(operator)
    elif args.algorithm == 'avns':
        builder = AdaptiveVNSBuilder().decay(ADAPTIVE_CONFIG['decay'])
        for operator in operators:
            builder.operator(operator)
    elif args.algorithm == 'sa':
        builder = SABuilder().selector(RandomSelector()).cooling_schedule(
            CoolingSchedule(args.temperature, args.cooling)
        )
        for operator in operators:
            builder.operator(operator)
    else:
        builder = (LNSBuilder()
                   .selector_destroyer(AdaptiveSelector())
                   .selector_repairer(RandomSelector()))
        for destroyer in destroyers:
            builder.destroyer(destroyer)
        for repairer in repairers:
            builder.repairer(repairer)

    algorithm = builder.terminator(terminator).rng(rng).build()
    get_logger('heuristics').debug(
        f"Configured {algorithm.algorithm_name} with {len(algorithm.selectors())} selector(s)"
    )
    return algorithm


def print_results(algorithm, outcome):
    """Print run statistics."""
    stats = algorithm.get_statistics()
    summary = summarize_history(algorithm.history, stats['initial_objective'])

    print(f"\n{'=' * 60}")
    print(f"{stats['algorithm']} RESULTS")
    print(f"{'=' * 60}")
    print(f"Initial objective:  {stats['initial_objective']:.4f}")
    print(f"Best objective:     {stats['best_objective']:.4f}")
    print(f"Iterations:         {stats['iterations']}")
    print(f"Improvements:       {stats['improvements']}")
    print(f"Accepted/Rejected:  {stats['accepted']}/{stats['rejected']}")
    if summary['relative_improvement'] is not None:
        print(f"Improvement:        {summary['relative_improvement'] * 100:.2f}%")
    print(f"Execution time:     {outcome.duration:.3f}s")
    if summary['operator_usage']:
        print("Operator usage:")
        for choice, count in sorted(summary['operator_usage'].items()):
            print(f"  {choice}: {count}")
    print(f"Best solution:      {outcome.solution}")


if __name__ == "__main__":
    main()
