import argparse
import sys

from errors import NonogramError
from propagation import solve_nonogram
from puzzle_loader import load_puzzle, load_puzzle_json
from solver_config import SolverConfig


def build_parser():
    parser = argparse.ArgumentParser(
        prog="nonogram-solve",
        description="Line-propagation nonogram solver.")
    parser.add_argument("-r", "--rows-file", help="row clues, one line per row")
    parser.add_argument("-c", "--cols-file", help="column clues, one line per column")
    parser.add_argument("-j", "--json", help="JSON puzzle with row_hints/col_hints")
    parser.add_argument("-p", "--process", action="store_true",
                        help="print the grid after every changing iteration")
    parser.add_argument("-E", "--empty-symbol", default=" ")
    parser.add_argument("-U", "--uncertain-symbol", default="?")
    parser.add_argument("-F", "--filled-symbol", default="X")
    parser.add_argument("--square-from-columns", action="store_true",
                        help="take both width and height from the column count")
    parser.add_argument("--show", action="store_true", help="show the final grid with matplotlib")
    parser.add_argument("--image", help="save the final grid as a PNG")
    return parser


def config_from_args(args):
    return SolverConfig(
        trace=args.process,
        empty_symbol=args.empty_symbol,
        uncertain_symbol=args.uncertain_symbol,
        filled_symbol=args.filled_symbol,
    )


def puzzle_from_args(args):
    if args.json:
        return load_puzzle_json(args.json, square_from_columns=args.square_from_columns)
    return load_puzzle(args.rows_file, args.cols_file, square_from_columns=args.square_from_columns)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.json and not (args.rows_file and args.cols_file):
        parser.error("either --json or both --rows-file and --cols-file are required")

    config = config_from_args(args)

    try:
        puzzle = puzzle_from_args(args)
    except NonogramError as e:
        print(f"Failed to read and parse file. {e}", file=sys.stderr)
        return 1

    try:
        result = solve_nonogram(puzzle, config)
    except NonogramError as e:
        print(f"Failed to solve nonogram. {e}", file=sys.stderr)
        return 1

    if args.image or args.show:
        # matplotlib / Pillow 只在需要出图时才导入
        from visualize import save_grid_as_image, show_grid
        if args.image:
            save_grid_as_image(result.grid, args.image)
        if args.show:
            show_grid(result.grid, title=f"{puzzle.width}x{puzzle.height}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
