import io

import pytest

from algokit.dynamic import (
    KnapsackResult,
    egg_drop,
    fib_bottom_up,
    fib_top_down,
    job_scheduling,
    knapsack,
    main,
)


def test_egg_drop_two_eggs_hundred_floors():
    assert egg_drop(2, 100) == 14


@pytest.mark.parametrize("floors", [0, 1, 5, 17])
def test_egg_drop_one_egg_needs_every_floor(floors):
    assert egg_drop(1, floors) == floors


@pytest.mark.parametrize("eggs", [1, 2, 5])
def test_egg_drop_single_floor(eggs):
    assert egg_drop(eggs, 1) == 1


def test_egg_drop_more_eggs_never_worse():
    for floors in range(0, 30):
        results = [egg_drop(eggs, floors) for eggs in range(1, 5)]
        assert results == sorted(results, reverse=True)
        assert results[0] == floors


def test_egg_drop_monotonic_in_floors():
    values = [egg_drop(3, floors) for floors in range(0, 40)]
    assert values == sorted(values)


def test_egg_drop_rejects_bad_input():
    with pytest.raises(ValueError):
        egg_drop(0, 10)
    with pytest.raises(ValueError):
        egg_drop(2, -1)


def test_fib_first_values():
    assert fib_bottom_up(0) == 0
    assert fib_bottom_up(1) == 1
    assert fib_top_down(0) == 0
    assert fib_top_down(1) == 1


def test_fib_methods_agree_and_satisfy_recurrence():
    values = [fib_top_down(n) for n in range(60)]
    assert values == [fib_bottom_up(n) for n in range(60)]
    for n in range(2, 60):
        assert values[n] == values[n - 1] + values[n - 2]


def test_fib_top_down_handles_large_n():
    assert fib_top_down(3000) == fib_bottom_up(3000)


def test_fib_rejects_negative():
    with pytest.raises(ValueError):
        fib_bottom_up(-1)
    with pytest.raises(ValueError):
        fib_top_down(-1)


def test_knapsack_solution_is_consistent():
    weights = [1, 2, 3, 5]
    profits = [10, 15, 40, 30]
    result = knapsack(6, weights, profits)
    assert isinstance(result, KnapsackResult)
    assert result.value == result.table[-1][-1]
    assert sum(weights[i - 1] for i in result.items) <= 6
    assert sum(profits[i - 1] for i in result.items) == result.value
    assert list(result.items) == sorted(result.items, reverse=True)


def test_knapsack_table_shape():
    result = knapsack(4, [1, 2], [3, 4])
    assert len(result.table) == 3
    assert all(len(row) == 5 for row in result.table)
    assert result.table[0] == (0, 0, 0, 0, 0)
    assert all(row[0] == 0 for row in result.table)


def test_knapsack_everything_fits():
    result = knapsack(100, [1, 2, 3], [4, 5, 6])
    assert result.value == 4 + 5 + 6
    assert result.items == (3, 2, 1)


def test_knapsack_zero_capacity():
    result = knapsack(0, [1, 2], [3, 4])
    assert result.value == 0
    assert result.items == ()


def test_knapsack_rejects_bad_input():
    with pytest.raises(ValueError):
        knapsack(5, [1, 2], [3])
    with pytest.raises(ValueError):
        knapsack(-1, [1], [1])
    with pytest.raises(ValueError):
        knapsack(5, [-1], [1])


def test_job_scheduling_worked_example():
    assert job_scheduling([1, 2, 3, 3], [3, 4, 5, 6], [50, 10, 40, 70]) == 120


def test_job_scheduling_disjoint_jobs_all_taken():
    assert job_scheduling([0, 2, 4], [2, 4, 6], [5, 7, 9]) == 5 + 7 + 9


def test_job_scheduling_overlapping_jobs_best_single():
    assert job_scheduling([0, 0, 0], [5, 5, 5], [5, 9, 7]) == 9


def test_job_scheduling_empty_and_mismatch():
    assert job_scheduling([], [], []) == 0
    with pytest.raises(ValueError):
        job_scheduling([1], [2, 3], [4])


def test_main_fib(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("20\n"))
    assert main(["fib", "--method", "top-down"]) == 0
    assert f"Fibonacci number is {fib_bottom_up(20)}" in capsys.readouterr().out


def test_main_jobs(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0 2 5\n2 2 7\n"))
    assert main(["jobs"]) == 0
    assert capsys.readouterr().out.strip() == str(5 + 7)


def test_main_knapsack_prints_solution(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 3\n2 4\n3\n"))
    assert main(["knapsack"]) == 0
    out = capsys.readouterr().out
    assert "DP Table:" in out
    assert f"Solution : {knapsack(3, [1, 2], [3, 4]).value}" in out


def test_main_reports_short_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main(["egg"]) == 1
    assert "unexpected end of input" in capsys.readouterr().err