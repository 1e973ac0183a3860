from dataclasses import dataclass

from cell_pattern import EMPTY, FILLED, UNCERTAIN


@dataclass(frozen=True)
class SolverConfig:
    # trace: 每次网格有变化都输出一次中间结果
    trace: bool = False
    empty_symbol: str = " "
    uncertain_symbol: str = "?"
    filled_symbol: str = "X"

    def symbol_for(self, value):
        if value == EMPTY:
            return self.empty_symbol
        if value == FILLED:
            return self.filled_symbol
        if value == UNCERTAIN:
            return self.uncertain_symbol
        raise ValueError(f"未知的格子状态: {value!r}")
