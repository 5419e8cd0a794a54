"""Tests for structured logging helpers."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from guide_admin.utils.logging import (  # noqa: E402
    StructuredLogFormatter,
    clear_request_context,
    get_logger,
    mask_email,
    mask_pii,
    set_request_context,
)


def _record(level: int = logging.INFO, **attrs) -> logging.LogRecord:
    record = logging.LogRecord(
        name='guide_admin.test',
        level=level,
        pathname=__file__,
        lineno=10,
        msg='Created event %s',
        args=('abc',),
        exc_info=None,
    )
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


class TestMasking:
    """Tests for PII masking."""

    def test_mask_email(self) -> None:
        assert mask_email('john.doe@example.com') == 'jo***@***.com'
        assert mask_email('a@b.co') == 'a***@***.co'
        assert mask_email('not-an-email') == '***'

    def test_mask_pii(self) -> None:
        assert mask_pii('admin-user-sub') == 'admi***'
        assert mask_pii('abc') == 'a***'
        assert mask_pii('') == '***'


class TestStructuredLogFormatter:
    """Tests for the JSON formatter."""

    def test_formats_json_with_context(self) -> None:
        payload = json.loads(
            StructuredLogFormatter().format(_record(context={'event_id': 'abc'}))
        )
        assert payload['level'] == 'INFO'
        assert payload['message'] == 'Created event abc'
        assert payload['context'] == {'event_id': 'abc'}
        assert 'source' not in payload

    def test_warnings_include_source(self) -> None:
        payload = json.loads(StructuredLogFormatter().format(_record(logging.WARNING)))
        assert payload['source']['line'] == 10

    def test_request_id_is_included(self) -> None:
        set_request_context(req_id='req-1')
        try:
            payload = json.loads(StructuredLogFormatter().format(_record()))
        finally:
            clear_request_context()
        assert payload['request_id'] == 'req-1'


class TestContextLogger:
    """Tests for the context logger adapter."""

    def test_extra_is_nested_under_context(self, caplog) -> None:
        logger = get_logger('guide_admin.test', component='actions')
        with caplog.at_level(logging.INFO, logger='guide_admin.test'):
            logger.info('hello', extra={'event_id': 'abc'})
        record = caplog.records[-1]
        assert record.context == {'component': 'actions', 'event_id': 'abc'}

    def test_bind_adds_context(self, caplog) -> None:
        logger = get_logger('guide_admin.test').bind(request='r1')
        with caplog.at_level(logging.INFO, logger='guide_admin.test'):
            logger.info('hello')
        assert caplog.records[-1].context == {'request': 'r1'}
