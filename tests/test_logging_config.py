import json
import logging

from page_authoring.logging_config import StructuredFormatter, set_session_id, session_id_var


def make_record(**extra):
    record = logging.LogRecord(
        name="page_authoring.controller",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="Saved page %s",
        args=("42",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_emits_json_with_extra_fields():
    token = session_id_var.set(None)
    try:
        payload = json.loads(StructuredFormatter().format(make_record(page_id="42", page_type="post")))
    finally:
        session_id_var.reset(token)

    assert payload["severity"] == "INFO"
    assert payload["message"] == "Saved page 42"
    assert payload["logger"] == "page_authoring.controller"
    assert payload["page_id"] == "42"
    assert payload["page_type"] == "post"
    assert payload["timestamp"].endswith("Z")
    assert "session_id" not in payload


def test_formatter_includes_session_id():
    token = session_id_var.set(None)
    try:
        set_session_id("abc")
        payload = json.loads(StructuredFormatter().format(make_record()))
    finally:
        session_id_var.reset(token)

    assert payload["session_id"] == "abc"
