from frontierpath.bench import main, run_once


def test_run_once_matches_reference():
    for frontier in ("heap", "list"):
        res = run_once(50, 200, frontier, seed=1)
        assert res.metrics.frontier == frontier
        assert res.max_abs_err < 1e-9


def test_main_writes_csv(tmp_path, capsys):
    out = tmp_path / "bench.csv"
    main(["--trials", "2", "--sizes", "20,60", "--out-csv", str(out)])
    rows = out.read_text().splitlines()
    assert rows[0].startswith("n,m,frontier")
    assert len(rows) == 1 + 2 * 2
    assert "heap" in capsys.readouterr().out
