import json

import pytest

from cookbook_builder import cli


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    # keep the root logger untouched between tests
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


def _write_records(tmp_path):
    path = tmp_path / "records.json"
    path.write_text(
        json.dumps(
            {
                "recipes": [{"id": "r1", "title": "Soup", "ingredients": ["water"], "steps": ["Boil."]}],
                "legacyRecipes": [],
            }
        )
    )
    return path


def test_cli_builds_cookbook(tmp_path, capsys):
    records = _write_records(tmp_path)
    out = tmp_path / "out"
    code = cli.main(["--records", str(records), "--recipe", "r1", "--family-name", "Ortiz", "--output-dir", str(out)])
    assert code == cli.EXIT_OK
    assert (out / "Ortiz_Family_Cookbook.pdf").exists()
    assert "Cookbook written to" in capsys.readouterr().out


def test_cli_empty_selection_exit_code(tmp_path):
    records = _write_records(tmp_path)
    out = tmp_path / "out"
    code = cli.main(["--records", str(records), "--output-dir", str(out)])
    assert code == cli.EXIT_EMPTY_SELECTION
    assert not out.exists()


def test_cli_generation_error_exit_code(tmp_path):
    code = cli.main(["--records", str(tmp_path / "missing.json"), "--select-all", "--output-dir", str(tmp_path)])
    assert code == cli.EXIT_FAILED


def test_cli_unknown_recipe_id_exit_code(tmp_path):
    records = _write_records(tmp_path)
    out = tmp_path / "out"
    code = cli.main(["--records", str(records), "--recipe", "typo", "--output-dir", str(out)])
    assert code == cli.EXIT_EMPTY_SELECTION
    assert not out.exists()


def test_cli_malformed_layout_config_exit_code(tmp_path):
    records = _write_records(tmp_path)
    layout = tmp_path / "layout.yml"
    layout.write_text("- not\n- a mapping\n")
    out = tmp_path / "out"
    code = cli.main(["--records", str(records), "--select-all", "--config", str(layout), "--output-dir", str(out)])
    assert code == cli.EXIT_FAILED
    assert not out.exists()


def test_cli_records_path_is_a_directory_exit_code(tmp_path):
    out = tmp_path / "out"
    code = cli.main(["--records", str(tmp_path), "--select-all", "--output-dir", str(out)])
    assert code == cli.EXIT_FAILED
    assert not out.exists()


def test_cli_undecodable_records_exit_code(tmp_path):
    records = tmp_path / "records.json"
    records.write_bytes(b"\xff\xfe{")
    out = tmp_path / "out"
    code = cli.main(["--records", str(records), "--select-all", "--output-dir", str(out)])
    assert code == cli.EXIT_FAILED
    assert not out.exists()
