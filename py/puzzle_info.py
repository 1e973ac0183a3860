from dataclasses import dataclass

from line_generator import line_blocks


def _freeze(blocks_list):
    return tuple(tuple(int(b) for b in blocks) for blocks in blocks_list)


@dataclass(frozen=True)
class PuzzleInfo:
    """谜题尺寸和行/列提示。构造后不再修改。"""
    width: int
    height: int
    row_blocks: tuple
    col_blocks: tuple

    def __post_init__(self):
        object.__setattr__(self, "row_blocks", _freeze(self.row_blocks))
        object.__setattr__(self, "col_blocks", _freeze(self.col_blocks))

    @classmethod
    def from_blocks(cls, row_blocks, col_blocks, square_from_columns=False):
        """
        默认：宽 = 列提示个数，高 = 行提示个数。
        square_from_columns=True 时宽和高都取列提示个数（旧版命令行的行为，
        只对正方形谜题有意义，非正方形会在交叉合并时报 ShapeError）。
        """
        width = len(col_blocks)
        height = width if square_from_columns else len(row_blocks)
        return cls(width, height, row_blocks, col_blocks)

    @classmethod
    def from_grid(cls, grid):
        """由 0/1 图案反推行列提示。"""
        height = len(grid)
        width = len(grid[0]) if height else 0
        row_blocks = [line_blocks(row) for row in grid]
        col_blocks = [line_blocks([grid[i][j] for i in range(height)]) for j in range(width)]
        return cls(width, height, row_blocks, col_blocks)
