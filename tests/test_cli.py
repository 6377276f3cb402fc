"""Tests for the depcycle command-line interface."""

import json

import pytest

from depcycle.cli import main

STATS = {
    "modules": [
        {"id": 1, "name": "./src/a.js", "reasons": [{"moduleId": 2}]},
        {"id": 2, "name": "./src/b.js", "reasons": [{"moduleId": 1}]},
        {"id": 3, "name": "./node_modules/x.js", "reasons": [{"moduleId": 4}]},
        {"id": 4, "name": "./node_modules/y.js", "reasons": [{"moduleId": 3}]},
    ]
}


@pytest.fixture
def stats_file(tmp_path):
    path = tmp_path / "stats.json"
    path.write_text(json.dumps(STATS), encoding="utf-8")
    return path


def _argv(stats_file, *extra):
    return [str(stats_file), "--config-dir", str(stats_file.parent), *extra]


class TestMain:
    def test_cycles_fail_by_default(self, stats_file, capsys) -> None:
        assert main(_argv(stats_file)) == 1
        out = capsys.readouterr().out
        assert "ERROR in main:" in out
        assert "1 cycle(s) found" in out

    def test_warn_only(self, stats_file, capsys) -> None:
        assert main(_argv(stats_file, "--warn-only")) == 0
        assert "WARNING in main:" in capsys.readouterr().out

    def test_include_vendored(self, stats_file, capsys) -> None:
        main(_argv(stats_file, "--include-vendored"))
        assert "2 cycle(s) found" in capsys.readouterr().out

    def test_vendor_dir_override(self, stats_file, capsys) -> None:
        main(_argv(stats_file, "--vendor-dir", "src"))
        out = capsys.readouterr().out
        assert "./node_modules/x.js" in out
        assert "./src/a.js" not in out

    def test_config_file_policy(self, stats_file, capsys) -> None:
        (stats_file.parent / ".depcycle.toml").write_text("[depcycle]\nfail_on_error = false\n")
        assert main(_argv(stats_file)) == 0
        assert main(_argv(stats_file, "--fail")) == 1

    def test_json_output_to_file(self, stats_file, tmp_path) -> None:
        out = tmp_path / "out" / "report.json"
        main(_argv(stats_file, "--format", "json", "-o", str(out)))
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data[0]["cycles"][0]["trace"] == "./src/a.js -> ./src/b.js -> ./src/a.js"

    def test_no_cycles(self, tmp_path, capsys) -> None:
        path = tmp_path / "stats.json"
        path.write_text(json.dumps({"modules": STATS["modules"][:1]}), encoding="utf-8")
        assert main(_argv(path)) == 0
        assert capsys.readouterr().out == "No cycles found\n"

    def test_bad_stats_file(self, tmp_path, capsys) -> None:
        assert main(_argv(tmp_path / "missing.json")) == 2
        assert "cannot read" in capsys.readouterr().err

    def test_invalid_record(self, tmp_path, capsys) -> None:
        path = tmp_path / "stats.json"
        path.write_text(json.dumps({"modules": [{"id": 1, "reasons": []}]}), encoding="utf-8")
        assert main(_argv(path)) == 2
        assert "invalid module record 1" in capsys.readouterr().err

    def test_fail_and_warn_only_are_exclusive(self, stats_file) -> None:
        with pytest.raises(SystemExit):
            main(_argv(stats_file, "--fail", "--warn-only"))
