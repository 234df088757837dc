"""
Unit tests for Prometheus metrics recorded while parsing and formatting.
"""

from qrgate.observability.metrics import REGISTRY, get_metrics, get_metrics_content_type
from qrgate.parsing import parse, validate


def sample(name: str, labels: dict[str, str]) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestParseMetrics:
    """Tests for scan counters"""

    def test_success_counted(self, valid_code):
        before = sample("qr_scans_total", {"status": "success"})

        parse(valid_code)

        assert sample("qr_scans_total", {"status": "success"}) == before + 1

    def test_failure_counted_by_code(self):
        before = sample("qr_parse_failures_total", {"error_code": "INVALID_ZONA"})
        before_total = sample("qr_scans_total", {"status": "failure"})

        parse("1234/5678/1/2024-01-15/10:30/12345678")

        assert sample("qr_parse_failures_total", {"error_code": "INVALID_ZONA"}) == before + 1
        assert sample("qr_scans_total", {"status": "failure"}) == before_total + 1

    def test_internal_error_counted(self):
        before = sample("qr_parse_failures_total", {"error_code": "PARSING_ERROR"})

        parse(42)

        assert sample("qr_parse_failures_total", {"error_code": "PARSING_ERROR"}) == before + 1

    def test_warnings_counted_by_field(self):
        before = sample("qr_validation_warnings_total", {"field_name": "time"})

        parse("1234/5678/01/2024-01-15/9:05/12345678")

        assert sample("qr_validation_warnings_total", {"field_name": "time"}) == before + 1

    def test_warnings_counted_on_failed_scan(self):
        before = sample("qr_validation_warnings_total", {"field_name": "date"})
        before_failures = sample("qr_parse_failures_total", {"error_code": "INVALID_EVENTO"})

        parse("1/2/3/fecha/99:99/4")

        assert sample("qr_validation_warnings_total", {"field_name": "date"}) == before + 1
        assert sample("qr_parse_failures_total", {"error_code": "INVALID_EVENTO"}) == before_failures + 1

    def test_parse_duration_observed(self, valid_code):
        before = sample("qr_parse_duration_seconds_count", {"operation": "parse"})

        parse(valid_code)

        assert sample("qr_parse_duration_seconds_count", {"operation": "parse"}) == before + 1

    def test_validate_duration_observed(self, valid_fields):
        before = sample("qr_parse_duration_seconds_count", {"operation": "validate"})

        validate(valid_fields)

        assert sample("qr_parse_duration_seconds_count", {"operation": "validate"}) == before + 1


class TestMetricsExport:
    def test_text_format(self, valid_code):
        parse(valid_code)

        body = get_metrics().decode("utf-8")

        assert "qr_scans_total" in body
        assert get_metrics_content_type().startswith("text/plain")
