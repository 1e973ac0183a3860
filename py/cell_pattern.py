from errors import MergeConflict

# 单个可能性里的格子：0 白，1 黑
EMPTY = 0
FILLED = 1
# 归纳后的三态格子额外多一个“不确定”
UNCERTAIN = -1

PATTERN_NAMES = {
    EMPTY: "Empty",
    UNCERTAIN: "Uncertain",
    FILLED: "Filled",
}


def pattern_name(value):
    return PATTERN_NAMES.get(value, repr(value))


def to_pattern(cell):
    """二值格子 -> 三态格子。单个可能性不会直接产生 UNCERTAIN。"""
    if cell == EMPTY:
        return EMPTY
    if cell == FILLED:
        return FILLED
    raise ValueError(f"不是合法的二值格子: {cell!r}")


def merge(x, y):
    """
    同一位置上两个可能性的共识：
    全白 -> 白，全黑 -> 黑，其余（包括遇到 UNCERTAIN）一律 UNCERTAIN。
    """
    if x == EMPTY and y == EMPTY:
        return EMPTY
    if x == FILLED and y == FILLED:
        return FILLED
    return UNCERTAIN


def merge_known(x, y):
    """
    合并行推导和列推导得到的同一个格子。
    UNCERTAIN 让位给另一方；一白一黑说明谜题矛盾，抛出 MergeConflict。
    """
    if x == y:
        return x
    if x == UNCERTAIN:
        return y
    if y == UNCERTAIN:
        return x
    raise MergeConflict(pattern_name(x), pattern_name(y))
