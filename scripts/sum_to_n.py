#!/usr/bin/env python3
"""
打印三种 sum_to_n 实现的对照结果

使用方法:
    python scripts/sum_to_n.py
"""

import sys
import os

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.utils.summation import SUM_TO_N_VARIANTS


TEST_VALUES = [
    (0, 0),
    (1, 1),
    (5, 15),
    (10, 55),
    (100, 5050),
]


def run() -> int:
    """Print the comparison table, return the number of failures"""
    failures = 0
    print("=" * 50)
    print("Three Ways to Sum to n")
    print("=" * 50)

    for value, expected in TEST_VALUES:
        for name, func in SUM_TO_N_VARIANTS.items():
            result = func(value)
            ok = result == expected
            failures += 0 if ok else 1
            print(f"{name}({value}) = {result} | Expected: {expected} | {'PASS' if ok else 'FAIL'}")
        print("-" * 50)

    return failures


if __name__ == "__main__":
    sys.exit(1 if run() else 0)
