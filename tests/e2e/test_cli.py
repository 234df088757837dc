"""
End-to-end tests for the qrgate command line.
"""

import pytest

from qrgate.cli.scan_cli import main


def run_cli(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code, capsys.readouterr().out


@pytest.mark.e2e
class TestScanCli:
    """Tests for the qrgate CLI"""

    def test_parse_valid(self, valid_code, capsys):
        code, out = run_cli(["parse", valid_code], capsys)

        assert code == 0
        assert '"wristband_id": "12345678"' in out
        assert '"success": true' in out

    def test_parse_invalid(self, capsys):
        code, out = run_cli(["parse", "123/5678/01/2024-01-15/10:30/12345678"], capsys)

        assert code == 1
        assert '"code": "INVALID_EVENTO"' in out
        assert '"kind": "FieldValidationFailed"' in out

    def test_format_with_operator(self, valid_code, capsys):
        code, out = run_cli(["format", valid_code, "--operator", "checker@example.com"], capsys)

        assert code == 0
        assert '"numero_brazalete": "12345678"' in out
        assert '"usuario_verificador": "checker@example.com"' in out

    def test_format_operator_from_environment(self, valid_code, capsys, monkeypatch):
        monkeypatch.setenv("QRGATE_OPERATOR", "env@example.com")

        code, out = run_cli(["format", valid_code], capsys)

        assert code == 0
        assert '"usuario_verificador": "env@example.com"' in out

    def test_format_rejected(self, capsys):
        code, out = run_cli(["format", "1234/5678/01/2024-01-15/10:30"], capsys)

        assert code == 1
        assert '"code": "INVALID_FIELD_COUNT"' in out

    def test_sample(self, capsys):
        code, out = run_cli(["sample", "--count", "3", "--seed", "5"], capsys)

        assert code == 0
        codes = [line for line in out.splitlines() if line.count("/") == 5]
        assert len(codes) == 3

    def test_selftest(self, capsys):
        code, out = run_cli(["selftest"], capsys)

        assert code == 0
        assert "3/9 parsed (33.3%)" in out
        assert "[INVALID_HORA]" in out

    def test_stats(self, codes_file, capsys):
        code, out = run_cli(["stats", str(codes_file)], capsys)

        assert code == 0
        assert '"total": 3' in out
        assert '"successful": 2' in out
        assert '"INVALID_EVENTO": 1' in out

    def test_stats_missing_file(self, tmp_path, capsys):
        code, _ = run_cli(["stats", str(tmp_path / "missing.txt")], capsys)

        assert code == 1

    def test_describe_with_yaml_rules(self, rules_yaml_path, capsys):
        code, out = run_cli(["--rules", str(rules_yaml_path), "describe"], capsys)

        assert code == 0
        assert '"total_rules": 14' in out
        assert '"wristband_id": "Unique wristband number (8 numeric digits)"' in out

    def test_missing_rules_file(self, tmp_path, valid_code, capsys):
        code, _ = run_cli(["--rules", str(tmp_path / "missing.yaml"), "parse", valid_code], capsys)

        assert code == 2

    def test_no_command(self, capsys):
        code, _ = run_cli([], capsys)

        assert code == 1
