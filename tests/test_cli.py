import json

import matplotlib.pyplot as plt
import pytest

from frontierpath.cli import EXAMPLE_CSV, EXIT_INTERNAL, EXIT_OK, EXIT_USAGE, main


@pytest.fixture()
def edges_file(tmp_path):
    path = tmp_path / "graph.csv"
    path.write_text(EXAMPLE_CSV + "F,F,0\n", encoding="utf-8")
    return path


def test_example_prints_csv(capsys):
    assert main(["--example"]) == EXIT_OK
    assert capsys.readouterr().out == EXAMPLE_CSV


def test_route_to_target(edges_file, capsys):
    assert main(["--edges", str(edges_file), "--source", "A", "--target", "C"]) == EXIT_OK
    out = json.loads(capsys.readouterr().out)
    assert out["total"] == 3
    assert out["route"] == ["A", "D", "E", "C"]
    assert out["distances"] == {"A": 0, "B": 1, "D": 1, "E": 2, "C": 3}
    assert out["unreachable"] == ["F"]


def test_unreachable_target(edges_file, capsys):
    assert main(["--edges", str(edges_file), "--source", "A", "--target", "F"]) == EXIT_OK
    out = json.loads(capsys.readouterr().out)
    assert out["total"] is None
    assert out["route"] == []


def test_list_frontier_and_undirected(edges_file, capsys):
    argv = ["--edges", str(edges_file), "--source", "C", "--frontier", "list", "--undirected"]
    assert main(argv) == EXIT_OK
    out = json.loads(capsys.readouterr().out)
    assert out["distances"]["A"] == 3


def test_exports_and_metrics(edges_file, tmp_path, capsys):
    tree_json = tmp_path / "tree.json"
    tree_xml = tmp_path / "tree.graphml"
    metrics = tmp_path / "metrics.json"
    argv = [
        "--edges",
        str(edges_file),
        "--source",
        "A",
        "--export-json",
        str(tree_json),
        "--export-graphml",
        str(tree_xml),
        "--metrics-out",
        str(metrics),
    ]
    assert main(argv) == EXIT_OK
    assert len(json.loads(tree_json.read_text())["edges"]) == 4
    assert tree_xml.read_text().startswith("<?xml")
    m = json.loads(metrics.read_text())
    assert m["frontier"] == "heap"
    assert m["counters"]["finalized"] == 5


def test_random_graph_with_integer_source(capsys):
    assert main(["--random", "--n", "8", "--m", "20", "--source", "0"]) == EXIT_OK
    out = json.loads(capsys.readouterr().out)
    assert out["distances"]["0"] == 0


def test_log_json_goes_to_stdout(edges_file, capsys):
    assert main(["--edges", str(edges_file), "--source", "A", "--log-json"]) == EXIT_OK
    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert [line["event"] for line in lines] == ["search_start", "search_done"]


def test_unknown_source_is_usage_error(edges_file, capsys):
    assert main(["--edges", str(edges_file), "--source", "Z"]) == EXIT_USAGE
    assert "error:" in capsys.readouterr().err


def test_missing_file_is_usage_error(tmp_path, capsys):
    assert main(["--edges", str(tmp_path / "nope.csv")]) == EXIT_USAGE
    assert "not found" in capsys.readouterr().err


def test_negative_weight_file_is_usage_error(tmp_path, capsys):
    path = tmp_path / "neg.csv"
    path.write_text("A,B,-1\n", encoding="utf-8")
    assert main(["--edges", str(path)]) == EXIT_USAGE
    assert "negative weight" in capsys.readouterr().err


@pytest.mark.parametrize("flag", ["--export-json", "--export-graphml", "--metrics-out"])
def test_unwritable_output_is_internal_error(edges_file, tmp_path, capsys, flag):
    target = tmp_path / "missing_dir" / "out.json"
    assert main(["--edges", str(edges_file), "--source", "A", flag, str(target)]) == EXIT_INTERNAL
    assert "internal error:" in capsys.readouterr().err


def test_plot_writes_image_and_closes_figure(edges_file, tmp_path, capsys):
    image = tmp_path / "route.png"
    plt.close("all")
    argv = ["--edges", str(edges_file), "--source", "A", "--target", "C", "--plot", str(image)]
    assert main(argv) == EXIT_OK
    assert image.stat().st_size > 0
    assert plt.get_fignums() == []
