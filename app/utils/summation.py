"""
Three ways to sum the integers 1..n.

All variants return 0 for n <= 0.
"""


def sum_to_n_a(n: int) -> int:
    """Iterative: accumulate 1..n in a loop. O(n) time, O(1) space."""
    if n <= 0:
        return 0

    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def sum_to_n_b(n: int) -> int:
    """
    Recursive: n + sum(1..n-1). O(n) time and O(n) stack,
    so large n hits the interpreter's recursion limit (RecursionError).
    """
    if n <= 0:
        return 0
    if n == 1:
        return 1
    return n + sum_to_n_b(n - 1)


def sum_to_n_c(n: int) -> int:
    """Closed form (Gauss): n * (n + 1) / 2. O(1)."""
    if n <= 0:
        return 0
    return n * (n + 1) // 2


SUM_TO_N_VARIANTS = {
    "sum_to_n_a": sum_to_n_a,
    "sum_to_n_b": sum_to_n_b,
    "sum_to_n_c": sum_to_n_c,
}
