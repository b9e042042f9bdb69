"""
Tests for the command-line entry point.
"""
import json

from openpyxl import load_workbook

from travel_recs.cli import main


class TestSearchCommand:

    def test_text(self, data_file, capsys):
        assert main(["search", "japan", "--source", str(data_file)]) == 0
        out = capsys.readouterr().out
        assert "2 result(s) in countries" in out
        assert "Kyoto, Japan" in out

    def test_json(self, data_file, capsys):
        assert main(["search", "beach", "--source", str(data_file), "--json"]) == 0
        body = json.loads(capsys.readouterr().out)
        assert body["category"] == "beaches"
        assert [i["name"] for i in body["items"]] == ["Bora Bora, French Polynesia", "Copacabana Beach, Brazil"]

    def test_no_results(self, data_file, capsys):
        assert main(["search", "atlantis", "--source", str(data_file)]) == 0
        assert "no recommendations found" in capsys.readouterr().out

    def test_xlsx(self, data_file, tmp_path, capsys):
        out_path = tmp_path / "temples.xlsx"
        assert main(["search", "temple", "--source", str(data_file), "--xlsx", str(out_path)]) == 0
        assert "2 result(s) saved" in capsys.readouterr().out
        assert load_workbook(out_path)["Results"].cell(row=5, column=1).value == "Angkor Wat, Cambodia"

    def test_load_failure_exits_1(self, tmp_path, capsys):
        assert main(["search", "japan", "--source", str(tmp_path / "missing.json")]) == 1
        err = capsys.readouterr().err
        assert "Could not load travel data" in err
        assert "Details:" in err

    def test_load_failure_writes_error_workbook(self, tmp_path, capsys):
        out_path = tmp_path / "japan.xlsx"
        missing = tmp_path / "missing.json"
        assert main(["search", "japan", "--source", str(missing), "--xlsx", str(out_path)]) == 1
        assert "Error report saved" in capsys.readouterr().err
        ws = load_workbook(out_path)["Results"]
        assert ws.cell(row=2, column=1).value.startswith("Could not load travel data")
        assert ws.cell(row=4, column=1).value.startswith("Details: Could not read")


class TestTimeCommand:

    def test_known(self, capsys):
        assert main(["time", "Tokyo, Japan"]) == 0
        assert "Asia/Tokyo" in capsys.readouterr().out

    def test_unknown(self, capsys):
        assert main(["time", "Unknown City"]) == 1
