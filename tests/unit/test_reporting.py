"""
Unit tests for statistics, sample codes and diagnostics.
"""

import logging
import random
import re

import pytest

from qrgate.core.models import ParsedRecord, ParseFailure, ParseSuccess
from qrgate.parsing import parse
from qrgate.reporting import (
    SELF_TEST_CASES,
    field_check_summary,
    generate_sample_code,
    get_parsing_stats,
    log_parsed_record,
    run_self_test,
)


class TestParsingStats:
    """Tests for get_parsing_stats()"""

    def test_empty_batch(self):
        stats = get_parsing_stats([])

        assert stats.total == 0
        assert stats.successful == 0
        assert stats.failed == 0
        assert stats.success_rate == 0.0
        assert stats.error_breakdown == {}

    def test_mixed_batch(self):
        results = [
            parse("1234/5678/01/2024-01-15/10:30/12345678"),
            parse("123/5678/01/2024-01-15/10:30/12345678"),
            parse("1234/567/01/2024-01-15/10:30/12345678"),
            parse("0123/5678/01/2024-01-15/10:30/1234567"),
            parse(""),
        ]

        stats = get_parsing_stats(results)

        assert stats.total == 5
        assert stats.successful == 1
        assert stats.failed == 4
        assert stats.success_rate == pytest.approx(20.0)
        assert stats.error_breakdown == {
            "INVALID_EVENTO": 1,
            "INVALID_UBICACION": 1,
            "INVALID_BRAZALETE": 1,
            "EMPTY_STRING": 1,
        }

    def test_accepts_generators(self):
        stats = get_parsing_stats(parse(code) for code in ["1234/5678/01/2024-01-15/10:30/12345678"])

        assert stats.success_rate == 100.0


class TestSampleCodes:
    """Tests for generate_sample_code()"""

    def test_sample_shape(self):
        code = generate_sample_code(random.Random(7))

        assert re.fullmatch(r"[1-9]\d{3}/[1-9]\d{3}/[1-9]\d/2024-01-15/10:30/[1-9]\d{7}", code)

    def test_samples_parse(self):
        rng = random.Random(42)
        for _ in range(20):
            assert isinstance(parse(generate_sample_code(rng)), ParseSuccess)

    def test_seeded_samples_repeat(self):
        assert generate_sample_code(random.Random(1)) == generate_sample_code(random.Random(1))


class TestDiagnostics:
    """Tests for field_check_summary(), log_parsed_record() and run_self_test()"""

    def test_field_check_summary_all_ok(self):
        record = parse("1234/5678/01/2024-01-15/10:30/12345678").record

        summary = field_check_summary(record)

        assert len(summary) == 6
        assert all(line.startswith("ok ") for line in summary)

    def test_field_check_summary_flags_layout(self):
        record = ParsedRecord(
            event="1234",
            location="5678",
            zone="01",
            date="2024-01-15",
            time="9:05",
            wristband_id="12345678",
            raw="1234/5678/01/2024-01-15/9:05/12345678",
        )

        summary = field_check_summary(record)

        assert summary[4] == "fail Time (HH:MM) (4 chars)"

    def test_log_parsed_record(self, caplog):
        record = parse("1234/5678/01/2024-01-15/9:05/12345678").record
        log = logging.getLogger("tests.qrgate.dump")

        with caplog.at_level(logging.INFO, logger="tests.qrgate.dump"):
            log_parsed_record(record, log=log)

        messages = [r.getMessage() for r in caplog.records]
        assert "Parsed QR record" in messages
        assert "Parsed QR record has warnings" in messages
        assert any(m.startswith("Field checks: ok Event (4 digits)") for m in messages)

        dump = next(r for r in caplog.records if r.getMessage() == "Parsed QR record")
        assert dump.wristband_id == "12345678"
        assert dump.valid is True

    def test_self_test_cases(self):
        results = run_self_test()

        assert [code for code, _ in results] == list(SELF_TEST_CASES)
        outcomes = [
            "ok" if isinstance(result, ParseSuccess) else result.error.code.value
            for _, result in results
        ]
        assert outcomes == [
            "ok",
            "ok",
            "ok",
            "INVALID_EVENTO",
            "INVALID_UBICACION",
            "INVALID_ZONA",
            "INVALID_BRAZALETE",
            "INVALID_FECHA",
            "INVALID_HORA",
        ]
        assert all(isinstance(result, (ParseSuccess, ParseFailure)) for _, result in results)
