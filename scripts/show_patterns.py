"""
Draw every pattern in the library, one figure per category
"""
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent / "src"))

from lifegrid.utils.patterns import get_all_patterns
from lifegrid.utils.visualization import visualize_pattern_grid


def main():
    """Save one overview image per pattern category."""
    project_root = Path(__file__).parent.parent
    output_dir = project_root / "figures" / "patterns"
    output_dir.mkdir(parents=True, exist_ok=True)

    for category_name, patterns in get_all_patterns().items():
        print(f"Category: {category_name} ({len(patterns)} patterns)")
        for name, pattern in patterns.items():
            print(f"  {name}: {pattern.height}x{pattern.width}")

        visualize_pattern_grid(
            patterns,
            save_path=output_dir / f"{category_name}.png"
        )


if __name__ == "__main__":
    main()
