import json
import os

from errors import PuzzleFormatError
from puzzle_info import PuzzleInfo


def parse_blocks(text, source="<string>"):
    """
    每行一条线的提示，空格分隔的正整数。
    中间的空行或者单独一个 0 表示这一行没有黑块；
    文件末尾的空行不算（末尾的空行要写成 0）。
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    blocks = []
    for lineno, line in enumerate(lines, start=1):
        tokens = line.split()
        if tokens == ["0"]:
            tokens = []
        try:
            values = [int(token) for token in tokens]
        except ValueError:
            raise PuzzleFormatError(f"{source}:{lineno}: not an integer list: {line!r}") from None
        if any(v <= 0 for v in values):
            raise PuzzleFormatError(f"{source}:{lineno}: block lengths must be positive: {line!r}")
        blocks.append(values)
    return blocks


def read_blocks(path):
    try:
        with open(path, 'r') as f:
            content = f.read()
    except OSError as e:
        raise PuzzleFormatError(f"Cannot read {path}: {e}") from e
    return parse_blocks(content, source=path)


def load_puzzle(rows_path, cols_path, square_from_columns=False):
    row_blocks = read_blocks(rows_path)
    col_blocks = read_blocks(cols_path)
    if not row_blocks or not col_blocks:
        raise PuzzleFormatError("Invalid blocks")
    return PuzzleInfo.from_blocks(row_blocks, col_blocks, square_from_columns=square_from_columns)


def read_puzzle_json(path):
    """读取 JSON 谜题文件，原样返回字典（id、label、grid 等字段保留）。"""
    try:
        with open(path, 'r') as f:
            return json.load(f)
    except OSError as e:
        raise PuzzleFormatError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise PuzzleFormatError(f"{path}: invalid JSON: {e}") from e


def _is_block_length(value):
    # bool 是 int 的子类，要单独排除
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def puzzle_from_dict(puzzle_data, source="<dict>", square_from_columns=False):
    if not isinstance(puzzle_data, dict):
        raise PuzzleFormatError(f"{source}: puzzle must be a JSON object")
    # 兼容 row_hints / row_constraints 两种写法
    row_hints = puzzle_data.get("row_hints", puzzle_data.get("row_constraints"))
    col_hints = puzzle_data.get("col_hints", puzzle_data.get("col_constraints"))
    if not row_hints or not col_hints:
        raise PuzzleFormatError(f"{source}: missing row/col hints")
    if not isinstance(row_hints, list) or not isinstance(col_hints, list):
        raise PuzzleFormatError(f"{source}: row/col hints must be lists")

    for kind, hints in (("row", row_hints), ("col", col_hints)):
        for idx, blocks in enumerate(hints):
            if not isinstance(blocks, list) or not all(_is_block_length(b) for b in blocks):
                raise PuzzleFormatError(f"{source}: invalid {kind} hint #{idx}: {blocks!r}")

    return PuzzleInfo.from_blocks(row_hints, col_hints, square_from_columns=square_from_columns)


def load_puzzle_json(path, square_from_columns=False):
    puzzle_data = read_puzzle_json(path)
    return puzzle_from_dict(puzzle_data, source=os.path.basename(path),
                            square_from_columns=square_from_columns)
