"""
Tests for the command-line interface.
"""

import json

from openpyxl import load_workbook

from tireload.cli.main import cli, create_parser


class TestParser:
    """Tests for argument parsing."""

    def test_calculate_requires_input(self):
        parser = create_parser()
        args = parser.parse_args(["calculate", "--input", "x.json", "--readable"])
        assert args.command == "calculate"
        assert args.readable

    def test_no_command_prints_help(self, capsys):
        assert cli([]) == 0
        assert "usage" in capsys.readouterr().out.lower()


class TestCommands:
    """Tests for command handlers."""

    def test_make_example(self, tmp_path):
        output = tmp_path / "example.json"
        assert cli(["make-example", "--output", str(output)]) == 0

        data = json.loads(output.read_text())
        assert data["tire_size"] == "11.00R20 / XZY3"
        assert len(data["positions"]) == 3

    def test_calculate_to_stdout(self, tmp_path, reference_file, capsys):
        example = tmp_path / "example.json"
        cli(["make-example", "--output", str(example)])
        capsys.readouterr()

        code = cli(["calculate", "--input", str(example), "--data", str(reference_file)])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["positions"][0]["result_load"] == "Over Load"

    def test_calculate_to_file(self, tmp_path, reference_file):
        example = tmp_path / "example.json"
        output = tmp_path / "result.json"
        cli(["make-example", "--output", str(example)])

        code = cli([
            "calculate", "--input", str(example),
            "--output", str(output), "--data", str(reference_file),
        ])

        assert code == 0
        assert json.loads(output.read_text())["speed_row"]["speed"] == 50

    def test_calculate_readable(self, tmp_path, reference_file, capsys):
        example = tmp_path / "example.json"
        cli(["make-example", "--output", str(example)])

        code = cli([
            "calculate", "--input", str(example), "--readable", "--data", str(reference_file),
        ])

        assert code == 0
        out = capsys.readouterr().out
        assert "Tire: 11.00R20 / XZY3" in out
        assert "Over Load" in out

    def test_calculate_invalid_json(self, tmp_path, reference_file, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")

        assert cli(["calculate", "--input", str(bad), "--data", str(reference_file)]) == 1
        assert "Invalid JSON" in capsys.readouterr().err

    def test_calculate_validation_error(self, tmp_path, reference_file, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"tire_size": "x", "total_load_t": -1, "speed_kmh": 50, "positions": []}))

        assert cli(["calculate", "--input", str(bad), "--data", str(reference_file)]) == 1
        assert "Validation Error" in capsys.readouterr().err

    def test_calculate_missing_data(self, tmp_path, capsys):
        example = tmp_path / "example.json"
        cli(["make-example", "--output", str(example)])

        code = cli(["calculate", "--input", str(example), "--data", str(tmp_path / "none.json")])

        assert code == 1
        assert "Reference data not found" in capsys.readouterr().err

    def test_tires(self, reference_file, capsys):
        assert cli(["tires", "--data", str(reference_file)]) == 0
        out = capsys.readouterr().out
        assert out.index("11.00R20 / XZY3") < out.index("295/80R22.5 / TRD")

    def test_speed_table_marks_row(self, reference_file, capsys):
        assert cli(["speed-table", "--data", str(reference_file), "--speed", "55"]) == 0
        marked = [line for line in capsys.readouterr().out.splitlines() if line.startswith(">")]
        assert len(marked) == 1
        assert "50" in marked[0]

    def test_export_xlsx(self, tmp_path, reference_file):
        example = tmp_path / "example.json"
        output = tmp_path / "calc.xlsx"
        cli(["make-example", "--output", str(example)])

        code = cli([
            "export", "--input", str(example), "--format", "xlsx",
            "--output", str(output), "--data", str(reference_file),
        ])

        assert code == 0
        assert load_workbook(output).sheetnames == ["Calculation"]

    def test_export_pdf(self, tmp_path, reference_file):
        example = tmp_path / "example.json"
        output = tmp_path / "calc.pdf"
        cli(["make-example", "--output", str(example)])

        code = cli([
            "export", "--input", str(example), "--format", "pdf",
            "--output", str(output), "--data", str(reference_file),
        ])

        assert code == 0
        assert output.read_bytes().startswith(b"%PDF")


class TestReadableOutput:
    """Tests for the readable summary of saved results."""

    def test_print_readable_output(self, tmp_path, reference_file, capsys):
        from tireload.cli.readable_output import print_readable_output

        example = tmp_path / "example.json"
        output = tmp_path / "calculation_output.json"
        cli(["make-example", "--output", str(example)])
        cli(["calculate", "--input", str(example), "--output", str(output), "--data", str(reference_file)])
        capsys.readouterr()

        print_readable_output(output)

        out = capsys.readouterr().out
        assert "Position 1" in out
        assert "tandem" in out
        assert "kPa" in out
