class NonogramError(Exception):
    """求解过程中所有错误的基类。"""


class ShapeError(NonogramError):
    """矩阵不是矩形，或者行/列两张网格的尺寸对不上。"""


class ReductionError(NonogramError):
    """
    对空的可能性集合做归约。
    说明某一行/列的提示根本放不下（或者已经被其它线的信息全部排除）。
    """
    def __init__(self, message, line=None):
        if line is not None:
            message = f"{line}: {message}"
        super().__init__(message)
        self.line = line


class MergeConflict(NonogramError):
    """同一个格子，行推导为白、列推导为黑（或相反），谜题自相矛盾。"""
    def __init__(self, x, y, row=None, col=None):
        message = f"Cannot merge {x} and {y}."
        if row is not None and col is not None:
            message = f"Cannot merge {x} and {y} at row {row}, col {col}."
        super().__init__(message)
        self.x = x
        self.y = y
        self.row = row
        self.col = col


class PuzzleFormatError(NonogramError):
    """提示文件 / JSON 谜题无法解析。"""
