"""High-level async client for frames republished by ``tf2_web_republisher``."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import BuiltinMethodType, MethodType
from typing import Any

from pytfclient._constants import REPUBLISH_SERVICE_TYPE, TF_ARRAY_MESSAGE_TYPE
from pytfclient._normalize import normalize_frame_id
from pytfclient._transport import Connection, ServiceHandle, TopicHandle
from pytfclient.config import TFClientConfig
from pytfclient.exceptions import TfClientClosedError, TfConfigError
from pytfclient.models.republisher import RepublishTFsRequest, RepublishTFsResponse, TFArray
from pytfclient.models.transform import Transform

_logger = logging.getLogger(__name__)

TransformCallback = Callable[[Transform], None]


@dataclass(slots=True)
class _FrameInfo:
    """Subscribers of a single frame and the last transform seen for it."""

    callbacks: list[TransformCallback] = field(default_factory=list)
    transform: Transform | None = None


def _same_callback(a: TransformCallback, b: TransformCallback) -> bool:
    if a is b:
        return True
    if isinstance(a, MethodType) and isinstance(b, MethodType):
        return a.__self__ is b.__self__ and a.__func__ is b.__func__
    if isinstance(a, BuiltinMethodType) and isinstance(b, BuiltinMethodType):
        return a.__self__ is b.__self__ and a.__name__ == b.__name__
    return False


def _callback_index(callbacks: list[TransformCallback], callback: TransformCallback) -> int | None:
    for index, candidate in enumerate(callbacks):
        if _same_callback(candidate, callback):
            return index
    return None


class TFClient:
    """Subscribe to TF frames through a rosbridge-style connection.

    Frame subscriptions are batched: every change of the watched frames
    schedules one aggregate request to the republishing service after
    ``config.goal_update_delay`` milliseconds, and the stream named in the
    response replaces the previous one.

    Usage::

        async with TFClient(connection) as tf:
            tf.subscribe("/wheel", on_wheel)
    """

    def __init__(
        self,
        connection: Connection,
        config: TFClientConfig | None = None,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        if connection is None:
            raise TfConfigError("A connection handle is required")
        self._connection = connection
        self._config = config if config is not None else TFClientConfig()
        self._loop = loop
        self._service: ServiceHandle = connection.service(self._config.service_name, REPUBLISH_SERVICE_TYPE)
        self._frame_infos: dict[str, _FrameInfo] = {}
        self._goal_update_handle: asyncio.TimerHandle | None = None
        self._request_task: asyncio.Task[None] | None = None
        self._current_topic: TopicHandle | None = None
        self._closed = False

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> TFClient:
        self._loop = asyncio.get_running_loop()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        """Cancel pending work, drop the active stream and forget all frames."""
        if self._closed:
            return
        self._closed = True

        handle = self._goal_update_handle
        self._goal_update_handle = None
        if handle is not None:
            handle.cancel()

        self._cancel_request()
        self._drop_current_topic()
        self._frame_infos.clear()
        _logger.debug("TF client closed")

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def config(self) -> TFClientConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def frames(self) -> tuple[str, ...]:
        """Currently watched frame ids, in subscription order."""
        return tuple(self._frame_infos)

    @property
    def goal_update_pending(self) -> bool:
        """Whether an aggregate request is scheduled but not yet sent."""
        return self._goal_update_handle is not None

    @property
    def current_topic_name(self) -> str | None:
        topic = self._current_topic
        return topic.name if topic is not None else None

    def last_transform(self, frame_id: str) -> Transform | None:
        """Return the most recent transform received for *frame_id*, if any."""
        info = self._frame_infos.get(normalize_frame_id(frame_id))
        return info.transform if info is not None else None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        try:
            self._loop = asyncio.get_running_loop()
        except RuntimeError as exc:
            raise TfConfigError(
                "No running event loop. Use TFClient from a coroutine, "
                "'async with TFClient(...)', or pass loop=..."
            ) from exc
        return self._loop

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, frame_id: str, callback: TransformCallback) -> None:
        """Subscribe *callback* to updates of *frame_id*.

        If the frame already has a known transform, *callback* is invoked
        with it immediately, before this method returns.

        Must be called from a running event loop unless the client was
        created with ``loop=`` or entered with ``async with``; otherwise
        :class:`TfConfigError` is raised.
        """
        if self._closed:
            raise TfClientClosedError("Cannot subscribe on a closed TFClient")
        self._require_loop()

        frame_id = normalize_frame_id(frame_id)
        info = self._frame_infos.get(frame_id)
        if info is None:
            info = _FrameInfo()
            self._frame_infos[frame_id] = info
            _logger.debug("Tracking frame %s", frame_id)
            self._request_goal_update()
        elif info.transform is not None:
            callback(info.transform)
        info.callbacks.append(callback)

    def unsubscribe(self, frame_id: str, callback: TransformCallback) -> None:
        """Remove *callback* from *frame_id*. Unknown frames or callbacks are ignored.

        Callbacks are matched by identity. Bound methods match when they bind
        the same function to the same object, so ``obj.method`` can be passed
        again; a custom ``__eq__`` on a callable object is never consulted.
        """
        if self._closed:
            return

        frame_id = normalize_frame_id(frame_id)
        info = self._frame_infos.get(frame_id)
        if info is None:
            return
        index = _callback_index(info.callbacks, callback)
        if index is None:
            return
        del info.callbacks[index]

        if not info.callbacks:
            del self._frame_infos[frame_id]
            _logger.debug("Stopped tracking frame %s", frame_id)
            self._request_goal_update()

    # ------------------------------------------------------------------
    # Aggregate request cycle
    # ------------------------------------------------------------------

    def _request_goal_update(self) -> None:
        """Schedule an aggregate request unless one is already pending."""
        if self._goal_update_handle is not None:
            return
        loop = self._require_loop()
        self._goal_update_handle = loop.call_later(self._config.goal_update_delay_seconds, self._update_goal)
        _logger.debug("Aggregate request scheduled in %d ms", self._config.goal_update_delay)

    def _build_request(self) -> RepublishTFsRequest:
        config = self._config
        return RepublishTFsRequest(
            source_frames=list(self._frame_infos),
            target_frame=config.fixed_frame,
            angular_thres=config.angular_threshold,
            trans_thres=config.translation_threshold,
            rate=config.rate,
            timeout=config.stream_timeout_duration,
        )

    def _update_goal(self) -> None:
        self._goal_update_handle = None
        if self._closed:
            return

        # A newer watched set supersedes any request still in flight.
        self._cancel_request()

        if not self._frame_infos:
            _logger.debug("No frames watched, dropping stream instead of requesting")
            self._drop_current_topic()
            return

        request = self._build_request()
        _logger.debug(
            "Requesting republish of %d frame(s) into %s",
            len(request.source_frames),
            request.target_frame,
        )
        loop = self._require_loop()
        task = loop.create_task(self._send_request(request))
        task.add_done_callback(self._on_request_done)
        self._request_task = task

    async def _send_request(self, request: RepublishTFsRequest) -> None:
        raw = await self._service.call(request.model_dump())
        self._process_response(RepublishTFsResponse.model_validate(raw))

    def _cancel_request(self) -> None:
        task = self._request_task
        self._request_task = None
        if task is not None and not task.done():
            _logger.debug("Cancelling superseded republish request")
            task.cancel()

    def _on_request_done(self, task: asyncio.Task[None]) -> None:
        if self._request_task is task:
            self._request_task = None
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _logger.warning("TF republish request failed", exc_info=exc)

    def _process_response(self, response: RepublishTFsResponse) -> None:
        if self._closed:
            return

        # Unsubscribe first so the republisher stops publishing the old stream.
        self._drop_current_topic()

        topic = self._connection.topic(response.topic_name, TF_ARRAY_MESSAGE_TYPE)
        topic.subscribe(self._process_feedback)
        self._current_topic = topic
        _logger.debug("Subscribed to TF stream %s", response.topic_name)

    def _drop_current_topic(self) -> None:
        topic = self._current_topic
        self._current_topic = None
        if topic is not None:
            _logger.debug("Unsubscribing TF stream %s", topic.name)
            topic.unsubscribe()

    def _process_feedback(self, message: Mapping[str, Any]) -> None:
        """Dispatch a stream message to the callbacks of every tracked frame it carries."""
        tf_array = TFArray.model_validate(message)
        for update in tf_array.transforms:
            info = self._frame_infos.get(normalize_frame_id(update.child_frame_id))
            if info is None:
                continue
            info.transform = update.transform
            for callback in list(info.callbacks):
                callback(info.transform)
