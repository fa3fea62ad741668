"""Unit tests for `unichat_providers.base.utils.messages` helpers.

Covers string wrapping, list pass-through, conversation flattening for the
local daemon, blank detection and shape validation.
"""
from __future__ import annotations

import pytest

from unichat_providers.base.errors import ValidationError
from unichat_providers.base.models import Message
from unichat_providers.base.utils.messages import (
    flatten_conversation,
    format_chat_messages,
    is_blank_input,
)


def test_string_becomes_single_user_turn():
    assert format_chat_messages("Hello") == [{"role": "user", "content": "Hello"}]


def test_list_passes_through_unchanged():
    convo = [
        {"role": "system", "content": "Be brief."},
        {"role": "user", "content": "Hi"},
    ]
    assert format_chat_messages(convo) == convo


def test_message_dtos_become_plain_mappings():
    convo = [Message(role="user", content="Hi"), {"role": "assistant", "content": "Hello"}]
    assert format_chat_messages(convo) == [
        {"role": "user", "content": "Hi"},
        {"role": "assistant", "content": "Hello"},
    ]


def test_flatten_conversation_joins_role_content_lines():
    convo = [
        {"role": "system", "content": "Be brief."},
        Message(role="user", content="Hi"),
    ]
    assert flatten_conversation(convo) == "system: Be brief.\nuser: Hi"


def test_flatten_conversation_keeps_raw_string():
    assert flatten_conversation("just a prompt") == "just a prompt"


@pytest.mark.parametrize("bad", [42, {"role": "user", "content": "x"}, ["not-a-mapping"]])
def test_unsupported_shapes_raise_validation_error(bad):
    with pytest.raises(ValidationError):
        format_chat_messages(bad)
    with pytest.raises(ValidationError):
        flatten_conversation(bad)


@pytest.mark.parametrize(
    "value",
    [None, "", "   ", "\n\t", [], [{"role": "user", "content": "  "}], [Message(role="user", content="")]],
)
def test_blank_inputs(value):
    assert is_blank_input(value)


@pytest.mark.parametrize(
    "value",
    ["hi", [{"role": "user", "content": "hi"}], [{"role": "system", "content": ""}, Message("user", "x")]],
)
def test_non_blank_inputs(value):
    assert not is_blank_input(value)
