"""Tests for the mst-compare command line."""

import json

import pytest

from graph import Edge, GraphDescription, MSTResult
from load_datasets import export_to_json, load_graph
from mst_compare import format_report, main, run_algorithm


@pytest.fixture
def square_file(tmp_path, square_graph):
    path = tmp_path / "square.json"
    export_to_json(square_graph, path)
    return path


class TestFormatReport:

    def test_kruskal_report(self, square_graph):
        result = MSTResult([Edge("A", "B", 1), Edge("B", "C", 2)], operation_count=11, vertex_count=3)
        report = format_report(square_graph, "kruskal", result, 1.5)
        lines = report.splitlines()
        assert lines[1] == "Minimum Spanning Tree (MST) for: square"
        assert lines[2] == "Vertices: 4, Edges: 4"
        assert "Algorithm: Kruskal's" in lines
        assert "  - A --(1)--> B" in lines
        assert "Total MST Weight: 3" in lines
        assert "Execution Time: 1.500 ms" in lines
        assert "Total Key Operations: 11" in lines
        assert "Starting Vertex" not in report
        assert "partial" not in report

    def test_prim_report_partial(self):
        graph = GraphDescription.from_triples("g", [("A", "B", 1), ("C", "D", 1)])
        result = MSTResult([Edge("A", "B", 1)], operation_count=3, vertex_count=4)
        report = format_report(graph, "prim", result, 0.0, start="A")
        assert "Starting Vertex: A" in report
        assert "Algorithm: Prim's" in report
        assert "Warning: partial spanning forest" in report


class TestRunAlgorithm:

    def test_both(self, square_graph):
        kruskal, k_ms = run_algorithm(square_graph, "kruskal")
        prim, p_ms = run_algorithm(square_graph, "prim", "A")
        assert kruskal.total_weight == prim.total_weight == 6
        assert k_ms >= 0 and p_ms >= 0

    def test_unknown(self, square_graph):
        with pytest.raises(ValueError, match="Unknown algorithm"):
            run_algorithm(square_graph, "boruvka")


class TestMain:

    def test_run_both(self, square_file, capsys):
        assert main(["run", str(square_file)]) == 0
        out = capsys.readouterr().out
        assert "Algorithm: Kruskal's" in out
        assert "Algorithm: Prim's" in out
        assert "Starting Vertex: A" in out
        assert out.count("Total MST Weight: 6") == 2
        assert "Total weights match: Kruskal=6, Prim=6" in out

    def test_run_prim_with_start(self, square_file, capsys):
        assert main(["run", str(square_file), "--algorithm", "prim", "--start", "D"]) == 0
        out = capsys.readouterr().out
        assert "Starting Vertex: D" in out
        assert "Kruskal" not in out

    def test_bad_start_vertex(self, square_file, capsys):
        assert main(["run", str(square_file), "--algorithm", "prim", "--start", "Q"]) == 2
        err = capsys.readouterr().err
        assert "Configuration Error: Start vertex Q not found in graph." in err

    def test_missing_file(self, tmp_path, capsys):
        missing = tmp_path / "nope.json"
        assert main(["run", str(missing)]) == 1
        assert f"Error reading or parsing JSON file: {missing}" in capsys.readouterr().err

    def test_negative_weight_file(self, tmp_path, capsys):
        path = tmp_path / "neg.json"
        path.write_text(json.dumps({"edges": [{"source": "A", "destination": "B", "weight": -1}]}))
        assert main(["run", str(path)]) == 1
        assert "Error reading or parsing JSON file" in capsys.readouterr().err

    def test_empty_graph(self, tmp_path, capsys):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"graphName": "Empty", "edges": []}))
        assert main(["run", str(path)]) == 0
        assert "Graph is empty. MST is zero length." in capsys.readouterr().out

    def test_disconnected_logs_warning(self, tmp_path, capsys):
        graph = GraphDescription.from_triples("islands", [("A", "B", 1), ("C", "D", 2)])
        path = tmp_path / "islands.json"
        export_to_json(graph, path)
        assert main(["run", str(path), "--algorithm", "kruskal"]) == 0
        captured = capsys.readouterr()
        assert "Warning: partial spanning forest" in captured.out
        assert "MST does not span the entire graph" in captured.err

    def test_generate(self, tmp_path, capsys):
        out_path = tmp_path / "blobs.json"
        assert main(["generate", str(out_path), "--n", "15", "--seed", "1", "--name", "Blobs"]) == 0
        graph = load_graph(out_path)
        assert graph.name == "Blobs"
        assert len(graph.edges) == 15 * 14 // 2
        assert "Wrote Blobs" in capsys.readouterr().out

    def test_generate_with_plot(self, tmp_path):
        out_path = tmp_path / "blobs.json"
        fig_path = tmp_path / "mst.png"
        assert main(["generate", str(out_path), "--n", "10", "--plot", str(fig_path)]) == 0
        assert fig_path.exists() and fig_path.stat().st_size > 0

    def test_generate_bad_arguments(self, tmp_path, capsys):
        assert main(["generate", str(tmp_path / "x.json"), "--n", "0"]) == 2
        assert "Configuration Error" in capsys.readouterr().err
