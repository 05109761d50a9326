"""
run_color_grid.py — CLI Entry Point

This script serves as the command-line interface entry point for the
color sort grid tool. It forwards execution to the CLI logic defined in
`src/color_sort_grid/cli.py`.

Usage:
    python run_color_grid.py -i path/to/images [options]

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_color_grid.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import color_sort_grid.cli as csg_cli

if __name__ == "__main__":
    csg_cli.main()
