from rich.console import Console

from hanoi.results import SolveResult, expected_moves, get_summary_table


def test_lines():
    result = SolveResult(disks=3, moves=7, final=[[], [], [3, 2, 1]], elapsed_us=12)
    assert result.summary_line() == "3 disks done in 7 moves"
    assert result.timing_line() == "It took 12 us"
    assert result.optimal


def test_expected_moves():
    assert [expected_moves(n) for n in range(1, 6)] == [1, 3, 7, 15, 31]


def test_summary_table_marks_mismatch():
    good = SolveResult(disks=2, moves=3, final=[[], [], [2, 1]], elapsed_us=4)
    bad = SolveResult(disks=3, moves=9, final=[[], [], [3, 2, 1]])
    table = get_summary_table([good, bad])
    assert table.row_count == 2
    assert not bad.optimal
    console = Console(record=True, width=100)
    console.print(table)
    text = console.export_text()
    assert "Expected" in text
    assert "9" in text
