"""
Integration tests for corona_catalog/cli.py.

Runs main(argv) end to end and checks stdout and exit codes.
"""

import json

import pytest

from corona_catalog.cli import main


class TestEnumerate:
    def test_center_2(self, capsys):
        assert main(["enumerate", "--center", "2", "--samples", "3"]) == 0
        out = capsys.readouterr().out
        assert "Unique coronas with center = 2: 34" in out
        assert "Sample 2-coronas:" in out
        samples = out.strip().splitlines()[-3:]
        assert all(s.startswith("2|") for s in samples)

    def test_no_samples(self, capsys):
        assert main(["enumerate", "--center", "1", "--samples", "0"]) == 0
        out = capsys.readouterr().out
        assert "center = 1: 24" in out
        assert "Sample" not in out

    def test_rejects_non_positive_center(self):
        with pytest.raises(SystemExit) as exc:
            main(["enumerate", "--center", "0"])
        assert exc.value.code == 2


class TestValidate:
    def test_valid(self, capsys):
        assert main(["validate", "2|3^0|3^0|3^0|3^0"]) == 0
        assert "2|3^0|3^0|3^0|3^0: OK" in capsys.readouterr().out

    def test_invalid_and_parse_error(self, capsys):
        code = main(["validate", "1|1^0|2^0|2^0|2^0", "1|2^0|2^0|2^0"])
        out = capsys.readouterr().out
        assert code == 1
        assert "INVALID - not unilateral (center-sized aligned)" in out
        assert "PARSE ERROR (Expected center + 4 edges)" in out

    def test_allowed_sizes_option(self, capsys):
        assert main(["validate", "1|4^0|2^0|2^0|2^0", "--allowed", "2", "3"]) == 1
        assert "invalid segment size" in capsys.readouterr().out

    def test_allowed_sizes_accepts_matching_corona(self, capsys):
        assert main(["validate", "1|5^0|5^0|5^0|5^0", "--allowed", "5"]) == 0
        assert ": OK" in capsys.readouterr().out

    def test_allowed_before_subcommand_rejected(self):
        """--allowed belongs to the subcommand, not the top-level parser."""
        with pytest.raises(SystemExit) as exc:
            main(["--allowed", "2", "3", "validate", "1|4^0|2^0|2^0|2^0"])
        assert exc.value.code == 2


class TestEnumerateAllowedSizes:
    def test_two_sizes(self, capsys):
        """Two single-segment walks for center 1: 6 necklaces of length 4."""
        assert main(["enumerate", "--center", "1", "--allowed", "2", "3", "--samples", "0"]) == 0
        assert "Unique coronas with center = 1: 6" in capsys.readouterr().out


class TestGenerateAndLoad:
    def test_generate_then_load(self, tmp_path, capsys):
        out_file = tmp_path / "valid-coronas.json"
        assert main(["generate", "--centers", "1", "2", "--output", str(out_file)]) == 0
        out = capsys.readouterr().out
        assert "center = 1: 24 unique coronas" in out
        assert "Total coronas: 58" in out

        data = json.loads(out_file.read_text())
        assert data["metadata"]["counts"] == {"1": 24, "2": 34}

        assert main(["load", str(out_file), "--center", "1"]) == 0
        out = capsys.readouterr().out
        assert "Loaded 24 coronas" in out
        assert "Max overhang: 3" in out

    def test_load_missing_file(self, tmp_path):
        assert main(["load", str(tmp_path / "missing.json")]) == 1

    def test_load_unparseable_entry(self, tmp_path, capsys):
        path = tmp_path / "entry.json"
        path.write_text(json.dumps({"coronas": {"1": ["1|2^0|2^0|2^0"]}}))
        assert main(["load", str(path)]) == 1
        assert "Loaded" not in capsys.readouterr().out

    def test_load_unexpected_shape(self, tmp_path):
        path = tmp_path / "odd.json"
        path.write_text(json.dumps({"metadata": {}}))
        assert main(["load", str(path), "--center", "1"]) == 1

    def test_generate_with_allowed_sizes(self, tmp_path, capsys):
        out_file = tmp_path / "catalog.json"
        code = main(
            ["generate", "--centers", "1", "--allowed", "2", "3", "--output", str(out_file)]
        )
        assert code == 0
        data = json.loads(out_file.read_text())
        assert data["metadata"]["allowedSizes"] == [2, 3]
        assert data["metadata"]["counts"] == {"1": 6}

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        out_file = tmp_path / "catalog.json"
        main(["--log-file", str(log_file), "generate", "--centers", "1", "--output", str(out_file)])
        assert "Enumerating center = 1" in log_file.read_text()
