from dataclasses import dataclass
from functools import reduce

from cell_pattern import EMPTY, FILLED, UNCERTAIN, merge, merge_known, to_pattern
from errors import MergeConflict, ReductionError, ShapeError
from line_generator import generate_line_possibilities
from render import print_grid
from solver_config import SolverConfig


def transpose(matrix):
    """行列互换。空矩阵或不规则矩阵直接报 ShapeError。"""
    if not matrix:
        raise ShapeError("Cannot transpose an empty matrix.")
    cols = len(matrix[0])
    for row in matrix[1:]:
        if len(row) != cols:
            raise ShapeError(f"Cannot transpose a non-rectangular matrix: {len(row)} != {cols}")
    return [list(col) for col in zip(*matrix)] if cols else []


def merge_line_possibilities(possibilities, line=None):
    """
    把一条线的所有可能填法归纳成三态模式：
    某位置在所有填法里都是黑 -> 黑，都是白 -> 白，否则不确定。
    """
    if not possibilities:
        raise ReductionError("no possibility fits the clues", line=line)
    return [reduce(merge, map(to_pattern, cell_possibilities))
            for cell_possibilities in transpose(possibilities)]


def derive_patterns(lines_possibilities, kind):
    return [merge_line_possibilities(possibilities, line=f"{kind} {idx}")
            for idx, possibilities in enumerate(lines_possibilities)]


def merge_rows_and_cols(rows_patterns, cols_patterns):
    """
    合并行推导和列推导的结果（列结果先转置成按行排列）。
    任何一个格子一白一黑都会抛 MergeConflict。
    """
    cols_as_rows = transpose(cols_patterns)
    if len(rows_patterns) != len(cols_as_rows):
        raise ShapeError(f"Row grid has {len(rows_patterns)} rows, column grid has {len(cols_as_rows)}.")

    merged = []
    for i, (line_from_rows, line_from_cols) in enumerate(zip(rows_patterns, cols_as_rows)):
        if len(line_from_rows) != len(line_from_cols):
            raise ShapeError(f"Row {i} has {len(line_from_rows)} cells, column grid has {len(line_from_cols)}.")
        merged_line = []
        for j, (cell_from_rows, cell_from_cols) in enumerate(zip(line_from_rows, line_from_cols)):
            try:
                merged_line.append(merge_known(cell_from_rows, cell_from_cols))
            except MergeConflict as e:
                raise MergeConflict(e.x, e.y, row=i, col=j) from e
        merged.append(merged_line)
    return merged


def line_matches(possibility, pattern):
    """填法和当前已知模式是否相容：UNCERTAIN 不做限制，黑白必须一致。"""
    for cell, known in zip(possibility, pattern):
        if known == UNCERTAIN:
            continue
        if known == FILLED and cell != FILLED:
            return False
        if known == EMPTY and cell != EMPTY:
            return False
    return True


def filter_lines_possibilities(patterns, lines_possibilities):
    """去掉与当前网格矛盾的填法，返回新的列表（只减不增）。"""
    return [[possibility for possibility in possibilities if line_matches(possibility, pattern)]
            for possibilities, pattern in zip(lines_possibilities, patterns)]


def has_map_changed(map1, map2):
    return map1 != map2


@dataclass
class SolveResult:
    grid: list
    # 网格发生变化的迭代次数（不含最后那次确认收敛的比较）
    iterations: int

    @property
    def uncertain_cells(self):
        return [(i, j) for i, row in enumerate(self.grid)
                for j, cell in enumerate(row) if cell == UNCERTAIN]

    @property
    def solved(self):
        return not self.uncertain_cells


def solve_nonogram(puzzle, config=None, sink=print_grid):
    """
    行列约束传播，直到网格不再变化。

    只做逐线推理，不猜测；需要猜测的谜题会停在留有 UNCERTAIN 的网格上，
    这是正常结果。矛盾的谜题抛出 MergeConflict / ReductionError，
    此时不输出任何网格。
    sink(grid, config, final) 负责输出：trace 打开时每次变化调用一次，
    收敛时再调用一次。sink=None 表示不输出。
    """
    if config is None:
        config = SolverConfig()

    # 1) 生成每行、每列的全部填法
    rows_possibilities = [generate_line_possibilities(blocks, puzzle.width)
                          for blocks in puzzle.row_blocks]
    cols_possibilities = [generate_line_possibilities(blocks, puzzle.height)
                          for blocks in puzzle.col_blocks]

    # 2) 初始网格
    grid = merge_rows_and_cols(derive_patterns(rows_possibilities, "row"),
                               derive_patterns(cols_possibilities, "col"))

    # 3) 反复过滤、归纳、合并，直到网格不变
    iterations = 0
    while True:
        rows_possibilities = filter_lines_possibilities(grid, rows_possibilities)
        cols_possibilities = filter_lines_possibilities(transpose(grid), cols_possibilities)

        new_grid = merge_rows_and_cols(derive_patterns(rows_possibilities, "row"),
                                       derive_patterns(cols_possibilities, "col"))
        if not has_map_changed(grid, new_grid):
            break

        iterations += 1
        if config.trace and sink is not None:
            sink(new_grid, config, final=False)
        grid = new_grid

    if sink is not None:
        sink(grid, config, final=True)
    return SolveResult(grid=grid, iterations=iterations)
