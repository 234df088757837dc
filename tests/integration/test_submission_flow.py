"""
Integration tests for the scan submission flow.

Parse, validate and format run together against injected identity providers.
"""

from datetime import datetime, timezone

import pytest

from qrgate.core.models import UNKNOWN_OPERATOR, ParseFailure, QRErrorCode, SubmissionPayload
from qrgate.formatting import (
    CallableIdentityProvider,
    EnvironmentIdentityProvider,
    IdentityProvider,
    StaticIdentityProvider,
    format_for_submission,
    prepare_submission,
    resolve_operator_label,
)
from qrgate.observability.metrics import REGISTRY
from qrgate.parsing import parse, parse_and_validate, validate_record


class FailingIdentityProvider:
    """Identity provider whose storage lookup blows up"""

    async def get_current_operator_label(self):
        raise OSError("secure storage unavailable")


@pytest.fixture
def record(valid_code):
    return parse(valid_code).record


@pytest.mark.integration
class TestFormatForSubmission:
    """Tests for format_for_submission()"""

    @pytest.mark.asyncio
    async def test_payload_fields(self, record, operator_provider, fixed_clock):
        payload = await format_for_submission(record, operator_provider, clock=fixed_clock)

        assert payload.to_api_dict() == {
            "evento": "1234",
            "ubicacion": "5678",
            "zona": "01",
            "fecha": "2024-01-15",
            "hora": "10:30",
            "numero_brazalete": "12345678",
            "cadena_original": "1234/5678/01/2024-01-15/10:30/12345678",
            "timestamp_procesamiento": "2024-01-15T10:31:02.123Z",
            "usuario_verificador": "checker@example.com",
        }

    @pytest.mark.asyncio
    async def test_timestamp_taken_at_format_time(self, record, operator_provider):
        calls = []

        def clock():
            calls.append(1)
            return datetime(2030, 6, 1, tzinfo=timezone.utc)

        payload = await format_for_submission(record, operator_provider, clock=clock)

        assert calls == [1]
        assert payload.to_api_dict()["timestamp_procesamiento"] == "2030-06-01T00:00:00.000Z"

    @pytest.mark.asyncio
    async def test_default_clock_is_utc(self, record, operator_provider):
        payload = await format_for_submission(record, operator_provider)

        assert payload.processed_at.tzinfo is not None
        assert payload.to_api_dict()["timestamp_procesamiento"].endswith("Z")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "provider",
        [
            None,
            StaticIdentityProvider(None),
            StaticIdentityProvider(""),
            StaticIdentityProvider("   "),
            FailingIdentityProvider(),
            CallableIdentityProvider(lambda: {"email": "checker@example.com"}),
        ],
    )
    async def test_unknown_operator_placeholder(self, record, provider):
        """Test identity lookup never blocks formatting"""
        payload = await format_for_submission(record, provider)

        assert payload.verifying_operator == UNKNOWN_OPERATOR

    @pytest.mark.asyncio
    async def test_operator_counter(self, record, operator_provider):
        before = REGISTRY.get_sample_value("qr_submissions_formatted_total", {"operator_resolved": "false"}) or 0.0

        await format_for_submission(record, FailingIdentityProvider())
        await format_for_submission(record, operator_provider)

        after = REGISTRY.get_sample_value("qr_submissions_formatted_total", {"operator_resolved": "false"})
        assert after == before + 1


@pytest.mark.integration
class TestIdentityProviders:
    """Tests for the shipped identity providers"""

    def test_providers_satisfy_protocol(self):
        assert isinstance(StaticIdentityProvider("a"), IdentityProvider)
        assert isinstance(EnvironmentIdentityProvider(), IdentityProvider)
        assert isinstance(CallableIdentityProvider(lambda: "a"), IdentityProvider)

    @pytest.mark.asyncio
    async def test_environment_provider(self, monkeypatch):
        monkeypatch.setenv("QRGATE_OPERATOR", "night-shift@example.com")

        assert await EnvironmentIdentityProvider().get_current_operator_label() == "night-shift@example.com"

    @pytest.mark.asyncio
    async def test_environment_provider_unset(self, monkeypatch):
        monkeypatch.delenv("QRGATE_OPERATOR", raising=False)

        assert await resolve_operator_label(EnvironmentIdentityProvider()) is None

    @pytest.mark.asyncio
    async def test_callable_provider_sync_and_async(self):
        async def lookup():
            return "async@example.com"

        assert await CallableIdentityProvider(lambda: "sync@example.com").get_current_operator_label() == "sync@example.com"
        assert await CallableIdentityProvider(lookup).get_current_operator_label() == "async@example.com"

    @pytest.mark.asyncio
    async def test_label_is_trimmed(self):
        assert await resolve_operator_label(StaticIdentityProvider("  Ana  ")) == "Ana"


@pytest.mark.integration
class TestPrepareSubmission:
    """Tests for prepare_submission()"""

    @pytest.mark.asyncio
    async def test_valid_code_formats(self, valid_code, operator_provider):
        outcome = await prepare_submission(valid_code, operator_provider)

        assert isinstance(outcome, SubmissionPayload)
        assert outcome.wristband_id == "12345678"
        assert outcome.verifying_operator == "checker@example.com"

    @pytest.mark.asyncio
    async def test_code_with_warnings_still_formats(self, operator_provider):
        outcome = await prepare_submission("1234/5678/01/2024-01-15/9:05/12345678", operator_provider)

        assert isinstance(outcome, SubmissionPayload)
        assert outcome.time == "9:05"

    @pytest.mark.asyncio
    async def test_invalid_code_returns_failure(self, operator_provider):
        outcome = await prepare_submission("1234/5678/01/2024-01-15/25:30/12345678", operator_provider)

        assert isinstance(outcome, ParseFailure)
        assert outcome.error.code is QRErrorCode.INVALID_HORA

    @pytest.mark.asyncio
    async def test_failure_skips_identity_lookup(self):
        calls = []

        def lookup():
            calls.append(1)
            return "checker@example.com"

        outcome = await prepare_submission("", CallableIdentityProvider(lookup))

        assert isinstance(outcome, ParseFailure)
        assert outcome.error.code is QRErrorCode.EMPTY_STRING
        assert calls == []


@pytest.mark.integration
class TestParseAndValidate:
    """Tests for the parse then validate check run before submission"""

    def test_valid_code_is_ready(self, valid_code):
        check = parse_and_validate(valid_code)

        assert check.ready_for_submission
        assert check.record == parse(valid_code).record
        assert validate_record(check.record) == check.outcome

    def test_warning_does_not_block(self):
        check = parse_and_validate("1234/5678/01/2024-01-15/9:05/12345678")

        assert check.ready_for_submission
        assert len(check.outcome.warnings) == 1

    def test_failure_carries_errors(self):
        check = parse_and_validate("12/5678/01/2024-01-15/25:30/12345678")

        assert not check.ready_for_submission
        assert check.record is None
        assert len(check.outcome.errors) == 2
        assert check.result.error.code is QRErrorCode.INVALID_EVENTO
