import pytest

from graphkit.algorithms import bfs, dfs, dijkstra, prim
from graphkit.cli import main
from graphkit.graph import Graph


def sample_graph():
    g = Graph(5)
    for u, v, w in [(0, 1, 1), (0, 2, 2), (1, 2, 3), (4, 3, 2), (4, 2, 1), (1, 3, 2), (0, 4, 2)]:
        g.add_edge(u, v, w)
    return g


def test_main_returns_zero(capsys):
    assert main([]) == 0
    capsys.readouterr()


def test_main_prints_each_result_in_order(capsys):
    main([])
    out = capsys.readouterr().out
    g = sample_graph()
    expected = "".join(
        f"Graph{n}\n{result.format()}"
        for n, result in enumerate(
            [g, dfs(g, 0), bfs(g, 0), dijkstra(g, 0), prim(g)], start=1
        )
    )
    assert out == expected


def test_main_headers_present(capsys):
    main([])
    out = capsys.readouterr().out
    positions = [out.index(f"Graph{n}\n") for n in range(1, 6)]
    assert positions == sorted(positions)
    assert out.count("Printing Graph:") == 5


def test_main_rejects_unknown_arguments(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2
    capsys.readouterr()