# =======================================================================================
# gym_admin/workers/event_stream.py - Live access-event stream (STOMP over WebSocket)
# =======================================================================================
import asyncio
import logging
from typing import Any, AsyncContextManager, Callable, Optional
from urllib.parse import urlsplit

import websockets

from ..config import config
from ..models.enums import StompCommand, StreamState
from ..models.schemas import LiveAccessEvent
from ..services.stomp_codec import StompCodec
from ..utils.exceptions import MessageDecodeError, TransportError

logger = logging.getLogger(__name__)

EventHandler = Callable[[LiveAccessEvent], None]
ConnectFactory = Callable[[str], AsyncContextManager[Any]]
StateListener = Callable[[StreamState, StreamState], None]


def _open_websocket(url: str) -> AsyncContextManager[Any]:
    return websockets.connect(url, open_timeout=config.REQUEST_TIMEOUT)


class EventStreamClient:
    """
    Keeps one subscription to the facility access topic alive and hands each
    decoded event to a single handler.

    DISCONNECTED -> CONNECTING -> CONNECTED -> (transport loss) RECONNECTING
    -> CONNECTING -> ...; CLOSED only through disconnect().

    Transport failures never reach the caller: the client waits a fixed
    delay and tries again, forever.
    """

    disconnect_timeout = 1.0

    def __init__(
        self,
        url: Optional[str] = None,
        reconnect_delay: Optional[float] = None,
        connect_factory: Optional[ConnectFactory] = None,
        on_state_change: Optional[StateListener] = None,
        codec: Optional[StompCodec] = None,
    ):
        self.url = url or config.WS_URL
        self.reconnect_delay = reconnect_delay if reconnect_delay is not None else config.RECONNECT_DELAY
        self.codec = codec or StompCodec()
        self._connect_factory = connect_factory or _open_websocket
        self._on_state_change = on_state_change

        self.state = StreamState.DISCONNECTED
        self.topic: Optional[str] = None
        self._handler: Optional[EventHandler] = None
        self._task: Optional[asyncio.Task] = None
        self._ws = None
        self._subscription_seq = 0

        # counters, exposed for status reporting
        self.connect_attempts = 0
        self.delivered_events = 0
        self.dropped_messages = 0

    # ------------------------------------------------------------------
    # Start / Stop
    # ------------------------------------------------------------------
    def connect(self, topic: str, on_event: EventHandler) -> None:
        """
        Start streaming ``topic`` into ``on_event``. Calling again while a
        connection is active only swaps the handler.
        """
        self._handler = on_event

        if self._task is not None and not self._task.done():
            if topic != self.topic:
                logger.warning(f"[stream] Already subscribed to {self.topic}; ignoring topic {topic}")
            return

        self.topic = topic
        self._set_state(StreamState.CONNECTING)
        self._task = asyncio.get_running_loop().create_task(self._run_loop())

    async def disconnect(self) -> None:
        """Tear down the stream. No event reaches the handler after this returns."""
        if self.state is StreamState.CLOSED and self._task is None:
            return

        self._handler = None
        self._set_state(StreamState.CLOSED)

        ws = self._ws
        if ws is not None:
            try:
                await asyncio.wait_for(
                    ws.send(self.codec.encode(self.codec.disconnect_frame())),
                    timeout=self.disconnect_timeout,
                )
            except Exception as e:
                logger.debug(f"[stream] DISCONNECT frame not sent: {e}")

        task, self._task = self._task, None
        if task is not None:
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
        logger.info("[stream] Closed")

    @property
    def is_connected(self) -> bool:
        return self.state is StreamState.CONNECTED

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    def _set_state(self, state: StreamState) -> None:
        previous = self.state
        if previous is state:
            return
        self.state = state
        logger.debug(f"[stream] {previous.value} -> {state.value}")

        if self._on_state_change is not None:
            try:
                self._on_state_change(previous, state)
            except Exception:
                logger.exception("[stream] State listener failed")

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    async def _run_loop(self) -> None:
        """Connect, consume, and reconnect after a fixed delay until closed."""
        while self.state is not StreamState.CLOSED:
            try:
                await self._handle_connection()
                logger.warning(f"[stream] Connection to {self.url} closed by peer")
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.warning(f"[stream] Connection error: {e}")

            if self.state is StreamState.CLOSED:
                break

            self._set_state(StreamState.RECONNECTING)
            logger.info(f"[stream] Reconnecting in {self.reconnect_delay}s")
            await asyncio.sleep(self.reconnect_delay)

            if self.state is StreamState.CLOSED:
                break
            self._set_state(StreamState.CONNECTING)

    async def _handle_connection(self) -> None:
        """One transport lifetime: handshake, subscribe, then read until it ends."""
        self.connect_attempts += 1
        logger.info(f"[stream] Opening {self.url} …")

        async with self._connect_factory(self.url) as ws:
            self._ws = ws
            try:
                host = urlsplit(self.url).hostname or "localhost"
                await ws.send(self.codec.encode(self.codec.connect_frame(host)))
                await self._await_connected(ws)

                self._subscription_seq += 1
                await ws.send(
                    self.codec.encode(
                        self.codec.subscribe_frame(self.topic, f"sub-{self._subscription_seq}")
                    )
                )
                self._set_state(StreamState.CONNECTED)
                logger.info(f"[stream] Subscribed to {self.topic}")

                async for raw in ws:
                    if self.state is StreamState.CLOSED:
                        return
                    self._handle_raw(raw)
            finally:
                self._ws = None

    async def _await_connected(self, ws) -> None:
        while True:
            raw = await asyncio.wait_for(ws.recv(), timeout=config.REQUEST_TIMEOUT)
            try:
                frame = self.codec.decode(raw)
            except MessageDecodeError as e:
                raise TransportError(f"Bad handshake frame: {e}") from e

            if frame is None:
                continue
            if frame.command == StompCommand.CONNECTED.value:
                return
            if frame.command == StompCommand.ERROR.value:
                raise TransportError(f"Broker refused connection: {frame.headers.get('message', frame.body)}")
            raise TransportError(f"Unexpected {frame.command} frame during handshake")

    # ------------------------------------------------------------------
    # Inbound messages
    # ------------------------------------------------------------------
    def _handle_raw(self, raw) -> None:
        logger.debug(f"[stream] Received: {raw!r}")
        try:
            frame = self.codec.decode(raw)
        except MessageDecodeError as e:
            self.dropped_messages += 1
            logger.warning(f"[stream] Dropping malformed frame: {e}")
            return

        if frame is None:
            return

        if frame.command == StompCommand.MESSAGE.value:
            try:
                event = self.codec.decode_access_event(frame.body)
            except MessageDecodeError as e:
                self.dropped_messages += 1
                logger.warning(f"[stream] Dropping message: {e} | body={frame.body!r}")
                return
            self._deliver(event)
        elif frame.command == StompCommand.ERROR.value:
            logger.error(f"[stream] STOMP error: {frame.headers.get('message')} {frame.body}")
        else:
            logger.debug(f"[stream] Ignoring {frame.command} frame")

    def _deliver(self, event: LiveAccessEvent) -> None:
        handler = self._handler
        if handler is None or self.state is StreamState.CLOSED:
            return
        try:
            handler(event)
            self.delivered_events += 1
        except Exception:
            logger.exception("[stream] Event handler failed")
