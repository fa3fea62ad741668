"""NDJSON decoding for the local daemon stream."""
from __future__ import annotations

from unichat_providers.base.streaming import emit_fragments, iter_ndjson_fragments, iter_ndjson_objects


def _collect(chunks):
    out: list[str] = []
    emit_fragments(iter_ndjson_fragments(chunks), out.append)
    return out


def test_fragments_emitted_in_order():
    assert _collect(['{"response":"He"}\n{"response":"llo"}\n']) == ["He", "llo"]


def test_blank_and_malformed_lines_are_skipped():
    chunks = ['\n{"response":"a"}\n  \n', "garbage\n", '{"response":"b","done":false}\n']
    assert _collect(chunks) == ["a", "b"]


def test_empty_and_missing_response_fields_emit_nothing():
    chunks = ['{"response":""}\n{"done":true,"context":[1,2]}\n']
    assert _collect(chunks) == []


def test_stream_ending_without_done_is_clean():
    assert _collect(['{"response":"partial"}\n']) == ["partial"]


def test_objects_yielded_per_line():
    objs = list(iter_ndjson_objects(['{"a":1}\n[1]\n{"b":2}']))
    assert objs == [{"a": 1}, {"b": 2}]
