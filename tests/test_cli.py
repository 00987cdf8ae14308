import json

import openpyxl
import pytest

import run_rotation


def test_solve_writes_exports(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    run_rotation.main([
        "solve", "--work-days", "14", "--rest-days", "7", "--induction-days", "5",
        "--total-days", "40", "--out", "out.xlsx", "--csv",
    ])
    out = capsys.readouterr().out
    assert "Validation: OK" in out
    assert (tmp_path / "supervisor_schedule_40d.csv").exists()
    wb = openpyxl.load_workbook(tmp_path / "out.xlsx")
    assert wb.sheetnames == ["SCHEDULE", "SUMMARY", "CONFIG"]


def test_solve_rejects_invalid_config(capsys):
    with pytest.raises(SystemExit) as exc:
        run_rotation.main(["solve", "--work-days", "40", "--total-days", "30"])
    assert exc.value.code == run_rotation.EXIT_BAD_CONFIG
    assert "exceeds total_days" in capsys.readouterr().out


def test_dry_run_from_json(tmp_path, capsys):
    path = tmp_path / "c.json"
    path.write_text(json.dumps({"workDays": 10, "restDays": 7,
                                "inductionDays": 5, "totalDays": 40}))
    run_rotation.main(["dry-run", "--config", str(path)])
    out = capsys.readouterr().out
    assert "Configuration: OK" in out
    assert "Warning" in out


def test_flags_override_file(tmp_path, capsys):
    path = tmp_path / "c.json"
    path.write_text(json.dumps({"work_days": 7, "rest_days": 7,
                                "induction_days": 1, "total_days": 30}))
    run_rotation.main(["dry-run", "--config", str(path), "--total-days", "60"])
    assert "Total days (H):     60" in capsys.readouterr().out


def test_setup_then_solve_from_workbook(tmp_path, capsys):
    wb_path = tmp_path / "rotation.xlsx"
    run_rotation.main(["setup", "--workbook", str(wb_path)])
    run_rotation.main(["solve", "--workbook", str(wb_path), "--total-days", "40"])
    assert "Done." in capsys.readouterr().out


def test_missing_config_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        run_rotation.main(["solve", "--config", str(tmp_path / "nope.json")])
    assert exc.value.code == 1
