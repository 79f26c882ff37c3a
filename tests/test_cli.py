"""Tests for the node-finder command line."""

import os

import pytest
import yaml
from click.testing import CliRunner
from node_finder.main import cli

pytestmark = pytest.mark.usefixtures("restore_root_logger")


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A project with two installed modules; cwd and HOME point into tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("COLUMNS", "1000")

    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "package.json").write_text('{"name": "project"}')
    (root / "src" / "app.js").write_text("")
    (root / "src" / "util.js").write_text("")
    modules = root / "node_modules"
    for name in (".bin", "chai", "lodash"):
        (modules / name).mkdir(parents=True)

    monkeypatch.chdir(root)
    return root


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    log_file = tmp_path / "finder.log.jsonl"

    def _run(*args):
        return runner.invoke(cli, ["--log-file", str(log_file), *args])

    return _run


def test_root_from_cwd(project, run):
    result = run("root")

    assert result.exit_code == 0, result.output
    assert result.output.strip() == os.path.realpath(project)


def test_root_from_file(project, run):
    result = run("root", "--from", str(project / "src" / "app.js"))

    assert result.exit_code == 0, result.output
    assert result.output.strip() == str(project)


def test_root_not_found(tmp_path, run, monkeypatch):
    lonely = tmp_path / "lonely"
    lonely.mkdir()
    monkeypatch.chdir(lonely)
    monkeypatch.setenv("COLUMNS", "1000")
    # A package.json somewhere above tmp_path would make this test meaningless
    if any(os.path.exists(os.path.join(p, "package.json")) for p in _ancestors(str(lonely))):
        pytest.skip("package.json present above the temporary directory")

    result = run("root")

    assert result.exit_code == 1
    assert "No 'package.json' found" in result.output


def test_modules(project, run):
    result = run("modules")

    assert result.exit_code == 0, result.output
    assert sorted(result.output.split()) == ["chai", "lodash"]


def test_modules_with_paths(project, run):
    result = run("modules", "--paths")

    assert result.exit_code == 0, result.output
    assert "Installed Modules" in result.output
    assert "lodash" in result.output
    assert ".bin" not in result.output


def test_modules_empty(project, run, tmp_path):
    empty = tmp_path / "empty"
    (empty / "node_modules").mkdir(parents=True)

    result = run("modules", "--start", str(empty))

    assert result.exit_code == 0, result.output
    assert "No modules installed" in result.output


def test_find_with_extension_fallback(project, run):
    result = run("find", str(project / "src"), "util")

    assert result.exit_code == 0, result.output
    assert str(project / "src" / "util.js") in result.output
    assert "(file)" in result.output


def test_find_directory(project, run):
    result = run("find", str(project), "src")

    assert result.exit_code == 0, result.output
    assert "(directory)" in result.output


def test_find_not_found(project, run):
    result = run("find", str(project), "missing")

    assert result.exit_code == 1
    assert "Not found" in result.output


def test_config_set_changes_lookups(project, run):
    (project / "src" / "util.mjs").write_text("")
    (project / "src" / "util.js").unlink()

    result = run("config", "set", "default_extension", ".mjs")
    assert result.exit_code == 0, result.output

    settings = yaml.safe_load((project / ".node-finder" / "settings.yaml").read_text())
    assert settings == {"finder": {"default_extension": ".mjs"}}

    result = run("find", str(project / "src"), "util")
    assert result.exit_code == 0, result.output
    assert str(project / "src" / "util.mjs") in result.output


def test_config_set_unknown_key(project, run):
    result = run("config", "set", "nope", "value")

    assert result.exit_code == 1
    assert "Unknown setting 'nope'" in result.output


def test_config_show(project, run):
    result = run("config", "show")

    assert result.exit_code == 0, result.output
    assert "descriptor_name" in result.output
    assert "package.json" in result.output


def test_log_file_written(project, run, tmp_path):
    result = run("--log-level", "DEBUG", "root")

    assert result.exit_code == 0, result.output
    assert "[finder:root]" in (tmp_path / "finder.log.jsonl").read_text()


def _ancestors(path):
    while True:
        parent = os.path.dirname(path)
        if parent == path:
            return
        yield parent
        path = parent


def test_config_set_rejects_empty_modules_dir(project, run):
    result = run("config", "set", "modules_dir", "")

    assert result.exit_code == 1
    assert "Error" in result.output
    assert not (project / ".node-finder" / "settings.yaml").exists()
