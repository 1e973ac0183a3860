import argparse
import os
import time

import pandas as pd

from cell_pattern import UNCERTAIN
from errors import NonogramError
from propagation import solve_nonogram
from puzzle_loader import puzzle_from_dict, read_puzzle_json


def count_differences(grid, original_grid):
    """已确定的格子里，和原图不一致的个数；尺寸不符时返回 None。"""
    if (original_grid is None
            or len(original_grid) != len(grid)
            or any(len(a) != len(b) for a, b in zip(original_grid, grid))):
        return None
    diff = 0
    for row, original_row in zip(grid, original_grid):
        for cell, original in zip(row, original_row):
            if cell != UNCERTAIN and cell != original:
                diff += 1
    return diff


def solve_puzzle_file(file_path):
    """
    求解单个 JSON 谜题，返回一条记录：
    status 为 solved（全部确定）、stalled（传播停住，仍有不确定格）或 error。
    """
    record = {
        "puzzle_id": os.path.basename(file_path),
        "json_file_path": file_path,
        "label": None,
        "width": None,
        "height": None,
        "status": "error",
        "iterations": None,
        "uncertain_count": None,
        "difference_count": None,
        "solving_time_sec": None,
        "message": "",
    }
    try:
        puzzle_data = read_puzzle_json(file_path)
        puzzle = puzzle_from_dict(puzzle_data, source=os.path.basename(file_path))
        record["puzzle_id"] = puzzle_data.get("id", record["puzzle_id"])
        record["label"] = puzzle_data.get("label", None)
    except NonogramError as e:
        record["message"] = f"读取文件出错: {e}"
        return record

    record["width"] = puzzle.width
    record["height"] = puzzle.height
    start = time.time()
    try:
        result = solve_nonogram(puzzle, sink=None)
    except NonogramError as e:
        record["solving_time_sec"] = time.time() - start
        record["message"] = f"求解过程中出错: {e}"
        return record
    record["solving_time_sec"] = time.time() - start

    record["status"] = "solved" if result.solved else "stalled"
    record["iterations"] = result.iterations
    record["uncertain_count"] = len(result.uncertain_cells)
    record["difference_count"] = count_differences(result.grid, puzzle_data.get("grid", None))
    return record


def summarize_results(df):
    """按 status 统计数量，并给出平均迭代次数、平均耗时。"""
    summary = {
        "total": len(df),
        "solved": int((df["status"] == "solved").sum()),
        "stalled": int((df["status"] == "stalled").sum()),
        "error": int((df["status"] == "error").sum()),
    }
    finished = df[df["status"] != "error"]
    summary["avg_iterations"] = float(finished["iterations"].mean()) if not finished.empty else 0.0
    summary["avg_time_sec"] = float(finished["solving_time_sec"].mean()) if not finished.empty else 0.0
    return summary


def batch_solve(folder, out_csv="propagation_results.csv"):
    """求解 folder 下所有 .json 谜题，结果写入 out_csv 并返回 DataFrame。"""
    files = sorted(os.path.join(folder, f) for f in os.listdir(folder) if f.lower().endswith(".json"))
    print(f"总共有 {len(files)} 个谜题文件。")

    records = []
    for file in files:
        record = solve_puzzle_file(file)
        if record["status"] == "error":
            print(f"文件 {record['puzzle_id']} 出错: {record['message']}")
        else:
            print(f"已处理谜题 {record['puzzle_id']}: {record['status']}, "
                  f"{record['uncertain_count']} 个不确定格, 用时 {record['solving_time_sec']:.4f} 秒")
        records.append(record)

    df = pd.DataFrame(records, columns=[
        "puzzle_id", "json_file_path", "label", "width", "height", "status", "iterations",
        "uncertain_count", "difference_count", "solving_time_sec", "message",
    ])
    if out_csv:
        df.to_csv(out_csv, index=False)
        print(f"所有结果已保存至 {out_csv}")
    return df


def main(argv=None):
    parser = argparse.ArgumentParser(prog="nonogram-batch",
                                     description="Solve every JSON puzzle in a folder.")
    parser.add_argument("folder", help="folder containing *.json puzzles")
    parser.add_argument("-o", "--out-csv", default="propagation_results.csv")
    args = parser.parse_args(argv)

    if not os.path.isdir(args.folder):
        print(f"错误：找不到文件夹 {args.folder}")
        return 1
    df = batch_solve(args.folder, args.out_csv)
    summary = summarize_results(df)
    print("=== 基本统计 ===")
    print(f"总谜题数: {summary['total']}")
    print(f"完全确定: {summary['solved']}")
    print(f"传播停住: {summary['stalled']}")
    print(f"出错: {summary['error']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
