# =======================================================================================
# gym_admin/services/stomp_codec.py - STOMP frames for the live access topic
# =======================================================================================
import json
from typing import Dict, Optional, Union

from pydantic import ValidationError

from ..models.enums import StompCommand
from ..models.schemas import LiveAccessEvent, StompFrame
from ..utils.exceptions import MessageDecodeError

NULL = "\x00"

# STOMP 1.2 header escaping (not applied to CONNECT/CONNECTED frames)
_ESCAPES = {"\\": "\\\\", "\r": "\\r", "\n": "\\n", ":": "\\c"}
_UNESCAPES = {"\\": "\\", "r": "\r", "n": "\n", "c": ":"}
_RAW_HEADER_COMMANDS = (StompCommand.CONNECT.value, StompCommand.CONNECTED.value)


class StompCodec:
    """Builds outbound STOMP frames and parses inbound ones."""

    # ----------------------------------------------------------------------
    # Frame builders
    # ----------------------------------------------------------------------
    @staticmethod
    def connect_frame(host: str, heartbeat: str = "0,0") -> StompFrame:
        return StompFrame(
            command=StompCommand.CONNECT.value,
            headers={"accept-version": "1.2,1.1,1.0", "host": host, "heart-beat": heartbeat},
        )

    @staticmethod
    def subscribe_frame(topic: str, subscription_id: str) -> StompFrame:
        return StompFrame(
            command=StompCommand.SUBSCRIBE.value,
            headers={"id": subscription_id, "destination": topic, "ack": "auto"},
        )

    @staticmethod
    def disconnect_frame() -> StompFrame:
        return StompFrame(command=StompCommand.DISCONNECT.value)

    # ----------------------------------------------------------------------
    # Encoding
    # ----------------------------------------------------------------------
    @staticmethod
    def _escape(value: str) -> str:
        return "".join(_ESCAPES.get(ch, ch) for ch in value)

    @staticmethod
    def _unescape(value: str) -> str:
        out = []
        i = 0
        while i < len(value):
            ch = value[i]
            if ch == "\\":
                if i + 1 >= len(value) or value[i + 1] not in _UNESCAPES:
                    raise MessageDecodeError(f"Invalid header escape in {value!r}")
                out.append(_UNESCAPES[value[i + 1]])
                i += 2
                continue
            out.append(ch)
            i += 1
        return "".join(out)

    def encode(self, frame: StompFrame) -> str:
        raw = frame.command in _RAW_HEADER_COMMANDS
        lines = [frame.command]
        for key, value in frame.headers.items():
            key, value = str(key), str(value)
            if not raw:
                key, value = self._escape(key), self._escape(value)
            lines.append(f"{key}:{value}")
        return "\n".join(lines) + "\n\n" + frame.body + NULL

    # ----------------------------------------------------------------------
    # Decoding
    # ----------------------------------------------------------------------
    def decode(self, data: Union[str, bytes]) -> Optional[StompFrame]:
        """
        Parse one WebSocket message into a frame.
        Returns None for heart-beats (bare EOLs).
        """
        if isinstance(data, bytes):
            try:
                data = data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise MessageDecodeError(f"Frame is not valid UTF-8: {e}") from e

        if not data.strip("\r\n" + NULL):
            return None

        text = data.lstrip("\r\n")
        head, sep, rest = text.partition("\n\n")
        if not sep:
            head, sep, rest = text.partition("\r\n\r\n")
        if not sep:
            raise MessageDecodeError("Frame has no header terminator")

        lines = [line.rstrip("\r") for line in head.split("\n")]
        command = lines[0].strip()
        if not command:
            raise MessageDecodeError("Frame has no command")

        raw = command in _RAW_HEADER_COMMANDS
        headers: Dict[str, str] = {}
        for line in lines[1:]:
            if not line:
                continue
            key, colon, value = line.partition(":")
            if not colon:
                raise MessageDecodeError(f"Malformed header line {line!r}")
            if not raw:
                key, value = self._unescape(key), self._unescape(value)
            # repeated headers: the first one wins
            headers.setdefault(key, value)

        length = headers.get("content-length")
        if length is not None:
            # content-length counts octets, not characters
            try:
                size = int(length)
                if size < 0:
                    raise ValueError(length)
                body = rest.encode("utf-8")[:size].decode("utf-8")
            except ValueError as e:
                raise MessageDecodeError(f"Bad content-length {length!r}") from e
        else:
            body, _, _ = rest.partition(NULL)

        return StompFrame(command=command, headers=headers, body=body)

    @staticmethod
    def decode_access_event(body: str) -> LiveAccessEvent:
        """Decode a MESSAGE body into a live access event."""
        try:
            payload = json.loads(body)
        except ValueError as e:
            raise MessageDecodeError(f"Body is not JSON: {e}") from e

        if not isinstance(payload, dict):
            raise MessageDecodeError("Body is not a JSON object")

        try:
            return LiveAccessEvent.model_validate(payload)
        except ValidationError as e:
            raise MessageDecodeError(f"Body is not an access event: {e}") from e
