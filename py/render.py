import sys
from functools import partial


def render_lines(grid, config):
    """按配置里的符号把网格转成字符串，每行一个，格子之间不加分隔符。"""
    return ["".join(config.symbol_for(cell) for cell in row) for row in grid]


def print_grid(grid, config, final=True, file=None):
    """
    默认的输出方式。
    中间过程（final=False）后面多打一个空行，和下一次输出隔开。
    """
    out = file if file is not None else sys.stdout
    for line in render_lines(grid, config):
        print(line, file=out)
    if not final:
        print(file=out)


def stream_sink(file):
    return partial(print_grid, file=file)
