"""Unit tests for runes.output.json_output and the output format registry."""
from __future__ import annotations

import io
import json

import pytest

from runes.output import (
    JsonOutput,
    OutputError,
    OutputPipeline,
    TextOutput,
    available_formats,
    create_pipeline,
)
from runes.resolver import RuneInfo, RuneMetadataResolver, UnicodeLookups


def _render(resolver: RuneMetadataResolver, values: list[int]) -> str:
    sink = io.BytesIO()
    output = JsonOutput()
    output.begin(sink)
    for value in values:
        output.emit(resolver.resolve(value))
    output.end()
    return sink.getvalue().decode("utf-8")


# ===========================================================================
# JsonOutput
# ===========================================================================


class TestJsonOutput:
    def test_name(self) -> None:
        assert JsonOutput().name == "json"

    def test_document_is_one_array(self, fake_lookups: UnicodeLookups) -> None:
        text = _render(RuneMetadataResolver(fake_lookups), [0x41, 0x61])
        data = json.loads(text)
        assert isinstance(data, list)
        assert [record["rune"] for record in data] == [0x41, 0x61]

    def test_two_space_indent_and_trailing_newline(self, fake_lookups: UnicodeLookups) -> None:
        text = _render(RuneMetadataResolver(fake_lookups), [0x41])
        assert text.startswith('[\n  {\n    "rune": 65,\n    "name": "LATIN CAPITAL LETTER A",')
        assert text.endswith("]\n")

    def test_record_fields(self, fake_lookups: UnicodeLookups) -> None:
        record = json.loads(_render(RuneMetadataResolver(fake_lookups), [0x41]))[0]
        assert record == {
            "rune": 65,
            "name": "LATIN CAPITAL LETTER A",
            "valid": True,
            "categories": ["L", "Lu"],
            "utf16": [65],
            "utf8": [65],
        }

    def test_invalid_record(self, fake_lookups: UnicodeLookups) -> None:
        record = json.loads(_render(RuneMetadataResolver(fake_lookups), [0xD800]))[0]
        assert record["valid"] is False
        assert record["categories"] is None
        assert record["name"] is None
        assert record["utf8"] is None
        assert record["utf16"] is None

    def test_valid_record_without_categories(self, fake_lookups: UnicodeLookups) -> None:
        record = json.loads(_render(RuneMetadataResolver(fake_lookups), [0xE9]))[0]
        assert record["valid"] is True
        assert record["name"] == ""
        assert record["categories"] == []
        assert record["utf8"] == [0xC3, 0xA9]

    @pytest.mark.parametrize("value", [0x41, 0xE9, 0x2318, 0x4E2D, 0x10000, 0x1F970, 0x10FFFF])
    def test_encodings_round_trip(self, fake_lookups: UnicodeLookups, value: int) -> None:
        record = json.loads(_render(RuneMetadataResolver(fake_lookups), [value]))[0]
        assert bytes(record["utf8"]) == chr(value).encode("utf-8")
        utf16 = b"".join(unit.to_bytes(2, "big") for unit in record["utf16"])
        assert utf16.decode("utf-16-be") == chr(value)

    def test_empty_run(self) -> None:
        sink = io.BytesIO()
        output = JsonOutput()
        output.begin(sink)
        output.end()
        assert sink.getvalue() == b"[]\n"

    def test_nothing_written_before_end(self, fake_lookups: UnicodeLookups) -> None:
        sink = io.BytesIO()
        output = JsonOutput(buffer_size=1)
        output.begin(sink)
        output.emit(RuneMetadataResolver(fake_lookups).resolve(0x41))
        assert sink.getvalue() == b""
        output.end()

    def test_write_failure_surfaces_from_end(self, fake_lookups: UnicodeLookups, failing_sink) -> None:
        output = JsonOutput(buffer_size=1)
        output.begin(failing_sink)
        output.emit(RuneMetadataResolver(fake_lookups).resolve(0x41))
        assert failing_sink.write_attempts == 0
        with pytest.raises(OutputError):
            output.end()

    def test_records_released_after_end(self, fake_lookups: UnicodeLookups) -> None:
        resolver = RuneMetadataResolver(fake_lookups)
        output = JsonOutput()
        output.begin(io.BytesIO())
        output.emit(resolver.resolve(0x41))
        output.end()

        second = io.BytesIO()
        output.begin(second)
        output.emit(resolver.resolve(0x61))
        output.end()
        assert [record["rune"] for record in json.loads(second.getvalue())] == [0x61]

    def test_emit_after_end_raises(self) -> None:
        output = JsonOutput()
        output.begin(io.BytesIO())
        output.end()
        with pytest.raises(RuntimeError):
            output.emit(RuneInfo.invalid(0xD800))


# ===========================================================================
# Registry
# ===========================================================================


class TestRegistry:
    def test_available_formats(self) -> None:
        assert available_formats() == ["json", "text"]

    def test_create_text(self) -> None:
        assert isinstance(create_pipeline("text"), TextOutput)

    def test_create_json(self) -> None:
        pipeline = create_pipeline("json", indent=4)
        assert isinstance(pipeline, JsonOutput)
        assert isinstance(pipeline, OutputPipeline)

    def test_default_is_text(self) -> None:
        assert create_pipeline().name == "text"

    def test_unknown_format_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown output format"):
            create_pipeline("yaml")
