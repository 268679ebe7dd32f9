import io

import pytest

from contest_solvers.cli import main
from contest_solvers.graphs import bfs_distances
from contest_solvers.search import can_travel


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv)
    return code, capsys.readouterr().out


def test_bfs_output(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["bfs"], "4 3\n0 1\n1 2\n2 3\n")
    expected = [f"{v}:{d} " for v, d in enumerate(bfs_distances(4, [(0, 1), (1, 2), (2, 3)]))]
    assert code == 0
    assert out.splitlines() == expected


def test_bfs_unreachable_marked(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, ["bfs"], "3 1\n0 1\n")
    assert out.splitlines()[2] == "2:-1 "


@pytest.mark.parametrize(
    "text, plan",
    [
        ("2\n3 1 2\n6 1 1\n", [(3, 1, 2), (6, 1, 1)]),
        ("1\n2 100 100\n", [(2, 100, 100)]),
    ],
)
def test_traveling_matches_library(monkeypatch, capsys, text, plan):
    code, out = _run(monkeypatch, capsys, ["traveling"], text)
    assert code == 0
    assert out.strip() == ("Yes" if can_travel(plan) else "No")


def test_truncated_input_rejected(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3 1 2\n"))
    with pytest.raises(SystemExit) as info:
        main(["traveling"])
    assert info.value.code == 2


def test_missing_command_rejected(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2