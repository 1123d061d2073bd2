import json
import logging

from strongbox.logging.logger import StructuredFormatter


def _record(msg: str, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="strongbox.test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_structured_formatter_json():
    fmt = StructuredFormatter(json_format=True, include_timestamp=False, include_level=False)

    formatted = fmt.format(_record("msg", setting="_secure_x", reason="no_key"))

    data = json.loads(formatted)
    assert data["message"] == "msg"
    assert data["logger"] == "strongbox.test"
    assert data["setting"] == "_secure_x"
    assert data["reason"] == "no_key"
    assert "level" not in data
    assert "timestamp" not in data


def test_structured_formatter_json_with_level_and_timestamp():
    fmt = StructuredFormatter(json_format=True)

    data = json.loads(fmt.format(_record("msg")))

    assert data["level"] == "INFO"
    assert "timestamp" in data


def test_structured_formatter_plain():
    fmt = StructuredFormatter(json_format=False, include_timestamp=True, include_level=True)

    formatted = fmt.format(_record("plain"))

    assert "plain" in formatted
    assert "INFO" in formatted
    assert "strongbox.test" in formatted


def test_structured_formatter_plain_renders_extra_fields():
    fmt = StructuredFormatter(include_timestamp=False, include_level=False)

    formatted = fmt.format(_record("Filtered", decrypted=2, detail="Incorrect padding"))

    assert formatted == 'strongbox.test: Filtered decrypted=2 detail="Incorrect padding"'


def test_standard_record_attributes_are_not_extra():
    fmt = StructuredFormatter(include_timestamp=False, include_level=False)

    assert fmt.format(_record("bare")) == "strongbox.test: bare"
