"""Tests for the picklist-sort command-line entry point."""

from picklist.cli import build_parser, main
from picklist.constants import SUCCESS_MESSAGE


def test_success_prints_confirmation(scenario_csv, tmp_path, capsys):
    output_path = tmp_path / "out.csv"

    exit_code = main([str(scenario_csv), "-o", str(output_path)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert SUCCESS_MESSAGE in captured.out
    assert output_path.read_text().splitlines()[1] == "A,8,A 2"


def test_default_output_in_working_directory(scenario_csv, tmp_path, monkeypatch):
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    assert main([str(scenario_csv)]) == 0
    assert (workdir / "sorted_output.csv").exists()


def test_missing_file_reports_error(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)

    exit_code = main([str(tmp_path / "missing.csv")])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.err.startswith("Error: File not found")
    assert SUCCESS_MESSAGE not in captured.out
    assert not (tmp_path / "sorted_output.csv").exists()


def test_malformed_location_reports_error(create_test_csv_file, tmp_path, capsys):
    input_path = create_test_csv_file("product_code,pick_location,quantity\nA,A2,1\n")
    output_path = tmp_path / "out.csv"

    exit_code = main([str(input_path), "-o", str(output_path)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Invalid pick location format: A2" in captured.err
    assert not output_path.exists()


def test_verbose_summary(scenario_csv, tmp_path, capsys):
    exit_code = main([str(scenario_csv), "-o", str(tmp_path / "out.csv"), "-v"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Merged: 1 duplicate rows" in captured.out


def test_parser_defaults():
    args = build_parser().parse_args(["picks.csv"])

    assert args.output == "sorted_output.csv"
    assert args.sheet is None
    assert args.no_total is False
    assert args.verbose == 0


def test_numeric_sheet_is_index():
    parser = build_parser()

    assert parser.parse_args(["picks.xlsx", "--sheet", "1"]).sheet == 1
    assert parser.parse_args(["picks.xlsx", "--sheet", "Monday"]).sheet == "Monday"
    assert parser.parse_args(["picks.xlsx", "--sheet", "Week 1"]).sheet == "Week 1"


def test_sheet_index_selects_sheet(create_test_excel_file, tmp_path):
    input_path = create_test_excel_file(
        [{"product_code": "M1", "pick_location": "C 4", "quantity": 2}],
        sheet_name="Monday",
    )
    output_path = tmp_path / "out.csv"

    assert main([str(input_path), "-o", str(output_path), "--sheet", "0"]) == 0
    assert output_path.read_text().splitlines()[1] == "M1,2,C 4"


def test_xlsm_output_reports_error(scenario_csv, tmp_path, capsys):
    output_path = tmp_path / "out.xlsm"

    exit_code = main([str(scenario_csv), "-o", str(output_path)])

    assert exit_code == 1
    assert "Unsupported output file type" in capsys.readouterr().err
    assert not output_path.exists()
