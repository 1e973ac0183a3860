from cell_pattern import EMPTY, FILLED


def min_line_length(blocks):
    """所有黑块加上块间必需的空格所占的最短长度；没有黑块时为 0。"""
    if not blocks:
        return 0
    return sum(blocks) + len(blocks) - 1


def generate_line_possibilities(blocks, line_size):
    """
    回溯枚举某一行（或列）的所有合法填法。

    blocks: 连续黑块长度，如 [2, 1, 3]；可以为空（整行全白）
    line_size: 该行的格子数
    返回：所有填法的列表，每个填法是长度为 line_size 的 0/1 列表。
    放不下时返回空列表（不报错），由调用方决定这是不是错误。
    """
    blocks = list(blocks)
    if line_size < 0:
        raise ValueError(f"行长度不能为负: {line_size}")
    for length in blocks:
        if length <= 0:
            raise ValueError(f"黑块长度必须为正整数: {blocks}")

    results = []
    total_min = min_line_length(blocks)
    if total_min > line_size:
        return results

    # 整个枚举过程复用同一个缓冲区，进入每层递归时 len(current_line) == current_pos
    current_line = []

    def backtrack(block_idx, current_pos, min_remaining):
        if current_pos + min_remaining > line_size:
            return

        if block_idx == len(blocks):
            current_line.extend([EMPTY] * (line_size - current_pos))
            results.append(current_line[:])
            del current_line[current_pos:]
            return

        block_size = blocks[block_idx]
        is_last = block_idx == len(blocks) - 1
        next_min = min_remaining - block_size - (0 if is_last else 1)
        max_start = line_size - min_remaining

        for start_pos in range(current_pos, max_start + 1):
            current_line.extend([EMPTY] * (start_pos - current_pos))
            current_line.extend([FILLED] * block_size)
            next_pos = start_pos + block_size
            if not is_last:
                # 相邻黑块之间至少隔一个白格
                current_line.append(EMPTY)
                next_pos += 1

            backtrack(block_idx + 1, next_pos, next_min)

            del current_line[current_pos:]

    backtrack(0, 0, total_min)
    return results


def line_blocks(line):
    """从一个 0/1 填法里读出连续黑块长度，和提示格式一致。"""
    blocks, cur = [], 0
    for cell in line:
        if cell == FILLED:
            cur += 1
        elif cur > 0:
            blocks.append(cur)
            cur = 0
    if cur > 0:
        blocks.append(cur)
    return blocks
