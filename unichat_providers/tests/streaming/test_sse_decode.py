"""SSE-delta decoding: data-line filtering, sentinel handling, malformed lines."""
from __future__ import annotations

from unichat_providers.base.openai_style_parts.style_helpers import translate_openai_delta
from unichat_providers.base.streaming import emit_fragments, iter_sse_events, iter_sse_fragments
from unichat_providers.claude.helpers import translate_stream_event


def _collect(chunks, translator):
    out: list[str] = []
    count = emit_fragments(iter_sse_fragments(chunks, translator), out.append)
    assert count == len(out)
    return out


def test_claude_delta_then_done_emits_once():
    chunk = 'data: {"type":"content_block_delta","delta":{"text":"Hi"}}\n\ndata: [DONE]\n\n'
    assert _collect([chunk], translate_stream_event) == ["Hi"]


def test_malformed_json_is_skipped_silently():
    assert _collect(["data: not-json\n"], translate_stream_event) == []


def test_non_data_lines_and_other_event_types_are_ignored():
    chunks = [
        "event: message_start\n",
        'data: {"type":"message_start","message":{}}\n',
        ": keep-alive comment\n",
        'data: {"type":"ping"}\n',
        'data: {"type":"content_block_delta","delta":{"text":"A"}}\n',
        'data: {"type":"content_block_delta","delta":{"text":""}}\n',
        'data: {"type":"content_block_delta","delta":{"text":"B"}}\n',
    ]
    assert _collect(chunks, translate_stream_event) == ["A", "B"]


def test_openai_style_deltas_preserve_order_across_chunks():
    chunks = [
        'data: {"choices":[{"delta":{"role":"assistant"}}]}\n'
        'data: {"choices":[{"delta":{"content":"Hel"}}]}\n',
        'data: {"choices":[{"delta":{"content":"lo"}}]}\n',
        'data: {"choices":[{"delta":{},"finish_reason":"stop"}]}\n',
        "data: [DONE]\n",
    ]
    assert _collect(chunks, translate_openai_delta) == ["Hel", "lo"]


def test_openai_style_translator_tolerates_missing_choices():
    assert translate_openai_delta({}) is None
    assert translate_openai_delta({"choices": []}) is None
    assert translate_openai_delta({"choices": ["x"]}) is None


def test_data_prefix_requires_space():
    assert list(iter_sse_events(['data:{"type":"x"}\n'])) == []


def test_non_object_payloads_are_dropped():
    assert list(iter_sse_events(["data: [1, 2]\n", 'data: "text"\n'])) == []
