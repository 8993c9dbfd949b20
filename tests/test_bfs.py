import io

import pytest

from algolab.bfs import bfs, breadth_first_visit, load_graph, main
from algolab.graph import Graph
from algolab.hashtable import hash_string, key_compare


def test_load_graph_builds_undirected_labelled_graph():
    graph = load_graph(["torino,milano,140\n", "milano,roma,570\n"])
    assert graph.num_nodes() == 3
    assert graph.num_edges() == 2
    assert graph.is_labelled()
    assert not graph.is_directed()
    assert graph.get_label("roma", "milano") == "570"


def test_load_graph_skips_malformed_lines():
    graph = load_graph(["a,b\n", ",b,1\n", "a,,1\n", "a,b,\n", "\n", "c,d,7\n"])
    assert sorted(graph.nodes()) == ["c", "d"]
    assert graph.num_edges() == 1


def test_load_graph_label_keeps_commas():
    graph = load_graph(["x,y,1,2\n"])
    assert graph.get_label("x", "y") == "1,2"


def test_breadth_first_visit_chain_order():
    graph = load_graph(["a,b,1\n", "b,c,1\n", "c,d,1\n"])
    assert breadth_first_visit(graph, "a") == ["a", "b", "c", "d"]


def test_breadth_first_visit_visits_each_reachable_node_once():
    graph = load_graph(["a,b,1\n", "a,c,1\n", "b,c,1\n", "c,d,1\n", "x,y,1\n"])
    order = breadth_first_visit(graph, "a")
    assert order[0] == "a"
    assert len(order) == len(set(order))
    assert set(order) == {"a", "b", "c", "d"}


def test_breadth_first_visit_respects_direction():
    graph = Graph(True, True, key_compare, hash_string)
    for node in ("a", "b", "c"):
        graph.add_node(node)
    graph.add_edge("a", "b", "l")
    graph.add_edge("c", "a", "l")
    assert breadth_first_visit(graph, "a") == ["a", "b"]
    assert breadth_first_visit(graph, "c") == ["c", "a", "b"]


def test_breadth_first_visit_missing_start():
    graph = load_graph(["a,b,1\n"])
    with pytest.raises(KeyError):
        breadth_first_visit(graph, "zzz")
    with pytest.raises(ValueError):
        breadth_first_visit(graph, None)


def test_bfs_writes_visit_starting_from_stored_spelling(capsys):
    out = io.StringIO()
    order = bfs(["Torino,Milano,140\n", "Milano,Roma,570\n"], "torino", out)
    assert order == ["Torino", "Milano", "Roma"]
    assert out.getvalue() == "Torino\nMilano\nRoma\n"
    printed = capsys.readouterr().out
    assert "BFS completed in" in printed


def test_bfs_unknown_city_writes_nothing():
    out = io.StringIO()
    assert bfs(["a,b,1\n"], "nowhere", out) == []
    assert out.getvalue() == ""


def test_main_wrong_argument_count(capsys):
    assert main(["only-one"]) == 1
    assert "Insufficient arguments!" in capsys.readouterr().out


def test_main_missing_source(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv"), "a", str(tmp_path / "out.txt")]) == 1
    assert "Errore nell'apertura del file!" in capsys.readouterr().out


def test_main_full_run(tmp_path, capsys):
    source = tmp_path / "graph.csv"
    source.write_text("a,b,1\nb,c,2\n", encoding="utf-8")
    output = tmp_path / "out.txt"
    assert main([str(source), "A", str(output)]) == 0
    assert output.read_text(encoding="utf-8").splitlines() == ["a", "b", "c"]
    assert "ALL DONE!" in capsys.readouterr().out