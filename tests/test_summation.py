import sys

import pytest

from app.utils.summation import sum_to_n_a, sum_to_n_b, sum_to_n_c, SUM_TO_N_VARIANTS


@pytest.mark.parametrize("func", SUM_TO_N_VARIANTS.values(), ids=SUM_TO_N_VARIANTS.keys())
@pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (5, 15), (10, 55), (100, 5050)])
def test_sample_values(func, n, expected):
    assert func(n) == expected


@pytest.mark.parametrize("func", SUM_TO_N_VARIANTS.values(), ids=SUM_TO_N_VARIANTS.keys())
def test_non_positive_is_zero(func):
    assert func(-1) == 0
    assert func(-100) == 0


def test_variants_agree():
    for n in range(0, 300):
        assert sum_to_n_a(n) == sum_to_n_b(n) == sum_to_n_c(n) == n * (n + 1) // 2


def test_closed_form_is_exact_for_large_n():
    n = 10 ** 12
    assert sum_to_n_c(n) == 500000000000500000000000


def test_recursive_variant_hits_recursion_limit():
    with pytest.raises(RecursionError):
        sum_to_n_b(sys.getrecursionlimit() + 10)


def test_script_reports_no_failures(capsys):
    import importlib.util
    from pathlib import Path

    path = Path(__file__).resolve().parent.parent / "scripts" / "sum_to_n.py"
    spec = importlib.util.spec_from_file_location("sum_to_n_script", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    assert module.run() == 0
    out = capsys.readouterr().out
    assert "FAIL" not in out
    assert out.count("PASS") == 15
