import json

import pytest

from gym_admin.models.schemas import StompFrame
from gym_admin.services.stomp_codec import StompCodec
from gym_admin.utils.exceptions import MessageDecodeError

from conftest import message_frame

codec = StompCodec()


def test_connect_frame_wire_format():
    raw = codec.encode(codec.connect_frame("backend.test"))
    assert raw.startswith("CONNECT\n")
    assert "accept-version:1.2,1.1,1.0\n" in raw
    assert "host:backend.test\n" in raw
    assert raw.endswith("\n\n\x00")


def test_subscribe_frame_escapes_header_values():
    raw = codec.encode(codec.subscribe_frame("/topic/a:b", "sub-1"))
    assert "destination:/topic/a\\cb" in raw
    assert codec.decode(raw).headers["destination"] == "/topic/a:b"


def test_heartbeats_decode_to_none():
    assert codec.decode("\n") is None
    assert codec.decode("\r\n") is None
    assert codec.decode(b"\n") is None


def test_message_frame_decodes_headers_and_body():
    body = json.dumps({"userName": "Ana", "type": "ENTRY"})
    frame = codec.decode(message_frame(body, message_id=42))

    assert frame.command == "MESSAGE"
    assert frame.headers["message-id"] == "42"
    assert frame.headers["destination"] == "/topic/access-logs"
    assert frame.body == body


def test_content_length_counts_bytes():
    body = json.dumps({"userName": "José Núñez", "type": "ENTRY"}, ensure_ascii=False)
    length = len(body.encode("utf-8"))
    raw = f"MESSAGE\ncontent-length:{length}\n\n{body}\x00\n".encode("utf-8")

    frame = codec.decode(raw)
    assert codec.decode_access_event(frame.body).userName == "José Núñez"


def test_repeated_header_keeps_first_value():
    frame = codec.decode("MESSAGE\nfoo:first\nfoo:second\n\n\x00")
    assert frame.headers["foo"] == "first"


def test_crlf_line_endings():
    frame = codec.decode("CONNECTED\r\nversion:1.2\r\n\r\n\x00")
    assert frame.command == "CONNECTED"
    assert frame.headers["version"] == "1.2"


@pytest.mark.parametrize(
    "raw",
    [
        "MESSAGE destination:/x",
        "\n\nbody only\x00",
        "MESSAGE\nno-colon-here\n\n\x00",
        "MESSAGE\nbad:escape\\t\n\n\x00",
        "MESSAGE\ncontent-length:-3\n\n{\"type\":\"ENTRY\"}\x00",
        b"\xff\xfe",
    ],
)
def test_malformed_frames_raise(raw):
    with pytest.raises(MessageDecodeError):
        codec.decode(raw)


def test_round_trip_keeps_frame():
    frame = StompFrame(command="SEND", headers={"destination": "/app/x"}, body="hello")
    assert codec.decode(codec.encode(frame)) == frame


def test_access_event_tolerates_extra_fields_and_unknown_types():
    event = codec.decode_access_event(
        json.dumps({"userName": "Ana", "type": "DENIED", "gate": "north", "accessTime": "2026-10-19T08:30:00"})
    )
    assert event.type == "DENIED"
    assert event.accessTime.hour == 8


@pytest.mark.parametrize("body", ["", "not json", "[]", "42", '{"userName": "Ana"}', '{"type": ""}'])
def test_bad_access_event_bodies_raise(body):
    with pytest.raises(MessageDecodeError):
        codec.decode_access_event(body)
