"""
Run a headless simulation until it repeats a configuration or hits a step limit
"""
import sys
import logging
import argparse
from pathlib import Path
from tqdm import tqdm

sys.path.append(str(Path(__file__).parent.parent / "src"))

from lifegrid.engine.errors import UnknownPattern
from lifegrid.engine.grid import Team
from lifegrid.engine.simulation import DEFAULT_DENSITY, DEFAULT_GRID_SIZE, create
from lifegrid.utils.patterns import get_pattern
from lifegrid.utils.visualization import create_animation, render_grid


def parse_stamp(text):
    """Parse 'pattern:row:col[:team]' into its parts."""
    parts = text.split(':')
    if len(parts) not in (3, 4):
        raise argparse.ArgumentTypeError(
            f"Expected pattern:row:col[:team], got '{text}'")
    name, row, col = parts[0], int(parts[1]), int(parts[2])
    try:
        get_pattern(name)
    except UnknownPattern as err:
        raise argparse.ArgumentTypeError(str(err))
    team = None
    if len(parts) == 4:
        if parts[3].upper() not in Team.__members__:
            raise argparse.ArgumentTypeError(f"Unknown team '{parts[3]}', expected blue or red")
        team = Team[parts[3].upper()]
    return name, row, col, team


def run(sim, max_steps, record=False):
    """
    Step the simulation until done or max_steps generations.

    Args:
        sim: Simulation to advance
        max_steps: Upper bound on generations
        record: Keep every snapshot for animation

    Returns:
        List of snapshots (only the initial one unless record is set)
    """
    frames = [sim.snapshot()]
    sim.start()

    progress = tqdm(range(max_steps), desc="Generations")
    for _ in progress:
        if not sim.running:
            break
        result = sim.step()
        if record:
            frames.append(result.grid)
        progress.set_postfix(alive=result.grid.alive_count())
        if result.done:
            break

    sim.stop()
    progress.close()
    return frames


def main():
    parser = argparse.ArgumentParser(description='Run a Game of Life simulation')
    parser.add_argument('--rows', type=int, default=DEFAULT_GRID_SIZE[0],
                       help='Grid height')
    parser.add_argument('--cols', type=int, default=DEFAULT_GRID_SIZE[1],
                       help='Grid width')
    parser.add_argument('--team', action='store_true',
                       help='Enable blue/red team conquest')
    parser.add_argument('--density', type=float, default=None,
                       help=f'Seed at random with this density (e.g. {DEFAULT_DENSITY})')
    parser.add_argument('--stamp', type=parse_stamp, action='append', default=[],
                       help='Stamp a pattern, as pattern:row:col[:team]; repeatable')
    parser.add_argument('--steps', type=int, default=500,
                       help='Maximum number of generations')
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed')
    parser.add_argument('--gif', type=str, default=None,
                       help='Save an animation of the run to this path')
    parser.add_argument('--png', type=str, default=None,
                       help='Save the final generation to this path')
    parser.add_argument('--verbose', action='store_true',
                       help='Log engine events')

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    sim = create(args.rows, args.cols, team_mode=args.team, seed=args.seed)
    if args.density is not None:
        sim.seed_random(args.density)
    elif not args.stamp:
        sim.seed_random(DEFAULT_DENSITY)
    for name, row, col, team in args.stamp:
        sim.stamp(row, col, name, team)

    print("=" * 60)
    print("Game of Life")
    print("=" * 60)
    print(f"  Grid size: {sim.shape}")
    print(f"  Team mode: {sim.team_mode}")
    print(f"  Initial population: {sim.population()}")

    frames = run(sim, args.steps, record=args.gif is not None)

    print(f"\nStopped at generation {sim.generation}")
    if sim.done:
        print("Configuration repeated a previous generation")
    else:
        print(f"No repeat within {args.steps} generations")
    print(f"Final population: {sim.population()}")

    if sim.team_mode:
        scores = sim.team_scores()
        print(f"  Blue: {scores[Team.BLUE]}")
        print(f"  Red:  {scores[Team.RED]}")

    if args.gif:
        create_animation(frames, save_path=args.gif)
    if args.png:
        render_grid(sim.snapshot(), title=f"Generation {sim.generation}", save_path=args.png)


if __name__ == "__main__":
    main()
