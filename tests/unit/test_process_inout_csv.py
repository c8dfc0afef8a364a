"""Tests for the in/out CSV aggregation script."""

from __future__ import annotations

import json
import sys
from pathlib import Path

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from process_inout_csv import main  # noqa: E402

CSV = """in,out,holiday,description,no_pay
2024-09-02T08:00:00,2024-09-02T17:00:00,,,
2024-09-03T07:00:00,2024-09-03T19:00:00,,late finish,
2024-09-17T08:00:00,2024-09-17T12:00:00,double,Poya,250
"""


def test_flat_mode_totals(tmp_path, capsys):
    path = tmp_path / "inout.csv"
    path.write_text(CSV)
    assert main([str(path), "--mode", "flat"]) == 0
    data = json.loads(capsys.readouterr().out)
    # 100 + 600 + 4h holiday at 200
    assert data["overtime_amount"] == "1500.00"
    assert data["no_pay_amount"] == "250.00"
    assert "intervals" not in data


def test_details_flag_includes_intervals(tmp_path, capsys):
    path = tmp_path / "inout.csv"
    path.write_text(CSV)
    main([str(path), "--mode", "proportional_to_basic", "--basic", "16000", "--details"])
    data = json.loads(capsys.readouterr().out)
    assert len(data["intervals"]) == 3
    assert data["intervals"][1]["description"] == "late finish"


def test_invalid_row_reports_error(tmp_path, capsys):
    path = tmp_path / "inout.csv"
    path.write_text("in,out\n2024-09-02T17:00:00,2024-09-02T08:00:00\n")
    assert main([str(path), "--mode", "flat"]) == 1
    assert "error:" in capsys.readouterr().err
