from mst_engine.__main__ import main
from mst_engine.pipeline import MSTConfig
from mst_engine.runner import mst_file


def _write(path, text):
    path.write_text(text)
    return path


def test_mst_file_computes_result(tmp_path):
    path = _write(tmp_path / "g.txt", "3\nA\nB\nC\nA B 1\nB C 2\nA C 3\n")
    result = mst_file(path)

    assert result is not None
    assert result.total_weight == 3
    assert result.stats.arc_count == 2


def test_mst_file_uses_configured_columns(tmp_path):
    path = _write(tmp_path / "g.csv", "u,v,cost\nA,B,4\nB,C,1\nA,C,2\n")
    result = mst_file(path, MSTConfig(source_column="u", target_column="v", weight_column="cost"))

    assert result is not None
    assert result.total_weight == 3


def test_mst_file_reports_missing_file(tmp_path, capsys):
    assert mst_file(tmp_path / "missing.txt") is None
    assert "ERROR: Input file not found" in capsys.readouterr().out


def test_mst_file_reports_format_error(tmp_path, capsys):
    path = _write(tmp_path / "bad.txt", "2\nA\nB\nA B\n")
    assert mst_file(path) is None
    assert "ERROR: Could not parse graph" in capsys.readouterr().out


def test_mst_file_reports_disconnected_graph(tmp_path, capsys):
    path = _write(tmp_path / "split.txt", "2\nA\nB\n")
    assert mst_file(path) is None
    assert "disconnected" in capsys.readouterr().out


def test_cli_prints_arcs_and_total(tmp_path, capsys):
    path = _write(tmp_path / "g.txt", "3\nA\nB\nC\nA B 1\nB C 2\nA C 3\n")

    assert main([str(path), "--disable-tqdm"]) == 0
    out = capsys.readouterr().out
    assert "source" in out
    assert "Total weight: 3" in out


def test_cli_exit_code_on_error(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1


def test_mst_file_reports_unreadable_path(tmp_path, capsys):
    assert mst_file(tmp_path) is None
    assert "ERROR: Could not read" in capsys.readouterr().out
