"""
Main entry point for counting hailstone path crossings.

This CLI parses a trajectory listing, clips every trajectory to the target
area and counts the crossings with the selected solver, using YAML
configuration files.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt
import yaml

from .algorithms.brute_force import BruteForceSolver
from .algorithms.sweep_line import SweepLineSolver
from .core.hail_path import load_hail_paths, segments_in_area
from .core.target_area import TargetArea
from .utils.config_loader import load_area_config, load_algorithm_config, merge_configs


ALGORITHM_MAP = {
    'sweep_line': SweepLineSolver,
    'brute_force': BruteForceSolver
}


def create_area_from_config(area_config: dict) -> TargetArea:
    """
    Create TargetArea object from configuration dictionary.

    Args:
        area_config: Target area configuration from YAML

    Returns:
        TargetArea object
    """
    return TargetArea(area_config['x_min'], area_config['y_min'],
                      area_config['x_max'], area_config['y_max'])


def run_solver(input_path: str,
               algorithm_name: str = 'sweep_line',
               config_dir: str = 'configs',
               area_bounds: Optional[List[float]] = None,
               check_order: bool = False,
               visualize: bool = True,
               save: bool = False) -> Optional[int]:
    """
    Count the crossings of the trajectories in a file.

    Args:
        input_path: Trajectory listing, one "px, py, pz @ vx, vy, vz" per line
        algorithm_name: Name of solver ('sweep_line', 'brute_force')
        config_dir: Directory containing configuration files
        area_bounds: Optional (x_min, y_min, x_max, y_max) overriding area.yaml
        check_order: Verify the sweep's active order after every event
        visualize: Whether to show the plot
        save: Whether to save output files

    Returns:
        Number of crossings inside the target area, None for an unknown solver
    """
    if algorithm_name not in ALGORITHM_MAP:
        print(f"Error: Unknown algorithm '{algorithm_name}'")
        print(f"Available algorithms: {', '.join(ALGORITHM_MAP.keys())}")
        return None

    print(f"\n{'='*60}")
    print(f"Counting crossings with {algorithm_name.upper()}")
    print(f"{'='*60}\n")

    # Load configurations
    print("Loading configurations...")
    if area_bounds is not None:
        area = TargetArea(*area_bounds)
    else:
        area = create_area_from_config(load_area_config(config_dir))
    alg_config = load_algorithm_config(algorithm_name, config_dir)
    if check_order:
        alg_config = merge_configs(alg_config, {'parameters': {'check_order': True}})
    print(f"Target area: {area.bounds}")

    # Parse and clip trajectories
    paths = load_hail_paths(input_path)
    segments = segments_in_area(paths, area)
    inside = sum(1 for s in segments if s is not None)
    print(f"Trajectories: {len(paths)} ({inside} cross the target area)")

    # Create solver
    SolverClass = ALGORITHM_MAP[algorithm_name]
    solver = SolverClass(segments, alg_config)
    print(f"Solver: {solver}")

    print("\nCounting crossings...")
    count = solver.solve()

    # Display metrics
    print("\n" + "="*60)
    print("Results:")
    print("="*60)
    for key, value in solver.get_metrics().items():
        print(f"  {key}: {value}")
    print("="*60 + "\n")

    print(f"✅ {count} crossings inside the target area")

    output_config = alg_config.get('output', {})
    save_path = Path(output_config.get('save_path', f'outputs/{algorithm_name}/'))

    if save:
        save_path.mkdir(parents=True, exist_ok=True)
        results_file = save_path / output_config.get('results_filename', 'crossings.json')
        solver.save_results(str(results_file))
        print(f"💾 Crossings saved to: {results_file}")

    if visualize or save:
        fig, ax = plt.subplots(figsize=(8, 8))
        solver.visualize(ax, area=area)
        plt.tight_layout()

        if save:
            plot_file = save_path / output_config.get('plot_filename', 'crossings.png')
            plt.savefig(plot_file, dpi=150, bbox_inches='tight')
            print(f"📊 Plot saved to: {plot_file}")

        if visualize:
            plt.show()
        plt.close(fig)

    return count


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with command-line argument parsing."""
    parser = argparse.ArgumentParser(
        description='Count hailstone path crossings inside a target area',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Count crossings with the sweep line
  hailstorm data/example.txt --area 7 7 27 27

  # Cross-check with the pairwise solver and save the results
  hailstorm data/example.txt --algorithm brute_force --save

  # Use custom config directory without a plot
  hailstorm input.txt --config-dir ../my_configs --no-viz
        """
    )

    parser.add_argument(
        'input',
        type=str,
        help='Trajectory file, one "px, py, pz @ vx, vy, vz" per line'
    )

    parser.add_argument(
        '--algorithm', '-a',
        type=str,
        choices=list(ALGORITHM_MAP.keys()),
        default='sweep_line',
        help='Solver to use (default: sweep_line)'
    )

    parser.add_argument(
        '--config-dir', '-c',
        type=str,
        default='configs',
        help='Directory containing YAML configuration files (default: configs)'
    )

    parser.add_argument(
        '--area',
        type=float,
        nargs=4,
        metavar=('X_MIN', 'Y_MIN', 'X_MAX', 'Y_MAX'),
        help='Target area overriding area.yaml'
    )

    parser.add_argument(
        '--check-order',
        action='store_true',
        help='Verify the active order after every sweep event (slow)'
    )

    parser.add_argument(
        '--save', '-s',
        action='store_true',
        help='Save output files (crossings, plot)'
    )

    parser.add_argument(
        '--no-viz',
        action='store_true',
        help='Disable visualization'
    )

    args = parser.parse_args(argv)

    try:
        count = run_solver(
            input_path=args.input,
            algorithm_name=args.algorithm,
            config_dir=args.config_dir,
            area_bounds=args.area,
            check_order=args.check_order,
            visualize=not args.no_viz,
            save=args.save
        )
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"❌ {e}")
        return 1

    return 0 if count is not None else 1


if __name__ == '__main__':
    sys.exit(main())
