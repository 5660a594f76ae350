import json

import pytest

from adrkeeper.src import main as main_module


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(main_module, "setup_logging", lambda *a, **k: None)


@pytest.fixture(name="cli_dirs")
def fixture_cli_dirs(tmp_path, template_dir, monkeypatch):
    monkeypatch.setattr(main_module.Config, "BASE_DIR", tmp_path)
    monkeypatch.setattr(main_module.Config, "TEMPLATE_REPO", None)
    return ["--adr-path", "adr", "--template-path", template_dir.name]


def test_cli_init_new_and_list(cli_dirs, tmp_path, capsys):
    assert main_module.main(cli_dirs + ["init"]) == 0
    assert main_module.main(cli_dirs + ["new", "Use Postgres"]) == 0
    assert main_module.main(cli_dirs + ["new", "Use SQLite", "--link-type", "Supersedes", "--target", "0001-use-postgres.md"]) == 0
    capsys.readouterr()

    assert main_module.main(cli_dirs + ["list"]) == 0
    listed = capsys.readouterr().out.split()
    assert listed == [
        "0000-record-architecture-decisions.md",
        "0001-use-postgres.md",
        "0002-use-sqlite.md",
    ]
    superseded = (tmp_path / "adr" / "0001-use-postgres.md").read_text(encoding="utf-8")
    assert "Superseded by [0002-use-sqlite.md](0002-use-sqlite.md)" in superseded


def test_cli_list_json(cli_dirs, tmp_path, capsys):
    (tmp_path / "adr").mkdir()
    (tmp_path / "adr" / "0003-pick-a-queue.md").write_text("x", encoding="utf-8")
    (tmp_path / "adr" / "README.md").write_text("x", encoding="utf-8")
    assert main_module.main(cli_dirs + ["list", "--json"]) == 0
    records = json.loads(capsys.readouterr().out)
    assert records == [
        {"index": 3, "slug": "pick-a-queue", "filename": "0003-pick-a-queue.md"},
        {"index": 0, "slug": "README", "filename": "README.md"},
    ]


def test_cli_status_reports_failure(cli_dirs, tmp_path):
    assert main_module.main(cli_dirs + ["status", str(tmp_path / "adr" / "0009-nope.md"), "Deprecated"]) == 1


def test_cli_new_with_custom_status(cli_dirs, tmp_path):
    assert main_module.main(cli_dirs + ["new", "Draft Idea", "--status", "Proposed"]) == 0
    text = (tmp_path / "adr" / "0000-draft-idea.md").read_text(encoding="utf-8")
    assert "Status: Proposed on " in text


def test_cli_link_on_missing_target_fails(cli_dirs, tmp_path):
    code = main_module.main(cli_dirs + ["link", "0001-a.md", str(tmp_path / "adr" / "0000-x.md"), "Amended by"])
    assert code == 1
