"""
Tests for the CLI and its retry policy.
"""

import json
import logging

import pytest
from form_field_extractor import main as cli
from form_field_extractor.config.settings import Settings
from form_field_extractor.errors import AcquisitionError, StructuralParseError
from form_field_extractor.models.field import FormField
from form_field_extractor.models.result import ExtractionResult
from form_field_extractor.utils.logger import logger


class ScriptedDispatcher:
    """Dispatcher double that replays a list of outcomes."""
    
    is_pdf_reference = staticmethod(lambda reference: reference.lower().endswith('.pdf'))
    
    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = 0
    
    async def dispatch(self, reference):
        self.calls += 1
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


FIELDS = [FormField(name='email', type='email', label='Email', required=True)]


@pytest.mark.asyncio
async def test_acquisition_failures_are_retried():
    dispatcher = ScriptedDispatcher([
        AcquisitionError("https://x/apply", "navigation did not finish within 10ms"),
        FIELDS,
    ])
    
    result = await cli.extract_with_retries("https://x/apply", max_attempts=3, dispatcher=dispatcher)
    
    assert result.fields == FIELDS
    assert result.attempts == 2
    assert result.source == 'html'
    assert len(result.notes) == 1


@pytest.mark.asyncio
async def test_attempt_ceiling_is_respected():
    error = AcquisitionError("https://x/f.pdf", "bad status: 503 Service Unavailable")
    dispatcher = ScriptedDispatcher([error, error, error, FIELDS])
    
    with pytest.raises(AcquisitionError):
        await cli.extract_with_retries("https://x/f.pdf", max_attempts=3, dispatcher=dispatcher)
    
    assert dispatcher.calls == 3


@pytest.mark.asyncio
async def test_parse_failures_are_not_retried():
    dispatcher = ScriptedDispatcher([
        StructuralParseError("https://x/f.pdf", "document has no form fields"),
        FIELDS,
    ])
    
    with pytest.raises(StructuralParseError):
        await cli.extract_with_retries("https://x/f.pdf", max_attempts=5, dispatcher=dispatcher)
    
    assert dispatcher.calls == 1


@pytest.mark.asyncio
async def test_anomalies_are_noted():
    dispatcher = ScriptedDispatcher([[FormField(name='', type='text', label='')]])
    
    result = await cli.extract_with_retries("https://x/f.pdf", dispatcher=dispatcher)
    
    assert result.source == 'pdf'
    assert any('Empty name or label' in note for note in result.notes)


def test_cli_prints_canonical_json(monkeypatch, capsys, tmp_path):
    captured = {}
    
    async def fake_extract(**kwargs):
        captured.update(kwargs)
        return ExtractionResult(reference=kwargs['reference'], source='html', fields=FIELDS)
    
    monkeypatch.setattr(cli, "extract_with_retries", fake_extract)
    output = tmp_path / "fields.json"
    
    cli.main(["--url", "https://x/apply", "--timeout", "2.5", "--max-attempts", "4",
              "--output", str(output)])
    
    expected = [{'name': 'email', 'type': 'email', 'label': 'Email', 'required': True}]
    assert json.loads(capsys.readouterr().out) == expected
    assert json.loads(output.read_text(encoding='utf-8')) == expected
    assert captured == {
        'reference': "https://x/apply", 'timeout': 2500, 'max_attempts': 4, 'headless': True,
    }


def test_cli_exits_non_zero_on_failure(monkeypatch, capsys):
    async def fake_extract(**kwargs):
        raise AcquisitionError(kwargs['reference'], "bad status: 404 Not Found")
    
    monkeypatch.setattr(cli, "extract_with_retries", fake_extract)
    
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--url", "https://x/missing.pdf"])
    
    assert exc_info.value.code == 1
    assert capsys.readouterr().out == ""


def test_cli_requires_url():
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    
    assert exc_info.value.code == 2


def test_cli_rejects_sub_millisecond_timeout(monkeypatch):
    async def fake_extract(**kwargs):
        raise AssertionError("extraction should not start")
    
    monkeypatch.setattr(cli, "extract_with_retries", fake_extract)
    
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--url", "https://x/apply", "--timeout", "0.0004"])
    
    assert exc_info.value.code == 2


def test_settings_update_sets_known_keys_only(monkeypatch):
    monkeypatch.setattr(Settings, 'MAX_ATTEMPTS', 3)
    monkeypatch.setattr(Settings, 'LOG_LEVEL', "INFO")
    
    Settings.update(max_attempts=5, log_level="DEBUG", no_such_setting=1)
    
    assert Settings.MAX_ATTEMPTS == 5
    assert Settings.LOG_LEVEL == "DEBUG"
    assert not hasattr(Settings, 'NO_SUCH_SETTING')
    assert 'update' not in Settings.to_dict()


def test_global_logger_starts_at_configured_level():
    assert logging.getLevelName(logger.logger.level) == Settings.LOG_LEVEL
