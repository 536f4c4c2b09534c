"""Client configuration for pytfclient."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any

from pytfclient._constants import (
    DEFAULT_ANGULAR_THRESHOLD,
    DEFAULT_FIXED_FRAME,
    DEFAULT_GOAL_UPDATE_DELAY_MS,
    DEFAULT_RATE,
    DEFAULT_STREAM_TIMEOUT,
    DEFAULT_TRANSLATION_THRESHOLD,
    REPUBLISH_SERVICE_NAME,
)
from pytfclient._normalize import non_empty_str, positive_float, positive_int
from pytfclient.models.republisher import Duration

# field name -> (accepted option keys, parser)
_OPTION_KEYS: dict[str, tuple[tuple[str, ...], Callable[[Any], Any]]] = {
    "fixed_frame": (("fixedFrame", "fixed_frame"), non_empty_str),
    "angular_threshold": (("angularThreshold", "angularThres", "angular_threshold"), positive_float),
    "translation_threshold": (("translationThreshold", "transThres", "translation_threshold"), positive_float),
    "rate": (("rate",), positive_float),
    "goal_update_delay": (("goalUpdateDelay", "goal_update_delay"), positive_int),
    "stream_timeout": (("streamTimeout", "topicTimeout", "stream_timeout"), positive_float),
    "service_name": (("serviceName", "repubServiceName", "service_name"), non_empty_str),
}

_ENV_CONFIG_MAP: dict[str, str] = {
    "TF_FIXED_FRAME": "fixed_frame",
    "TF_ANGULAR_THRESHOLD": "angular_threshold",
    "TF_TRANSLATION_THRESHOLD": "translation_threshold",
    "TF_RATE": "rate",
    "TF_GOAL_UPDATE_DELAY": "goal_update_delay",
    "TF_STREAM_TIMEOUT": "stream_timeout",
    "TF_SERVICE_NAME": "service_name",
}


@dataclasses.dataclass(frozen=True)
class TFClientConfig:
    """Client configuration.

    Parameters
    ----------
    fixed_frame : str
        Reference frame all transforms are expressed in, like ``/base_link``.
    angular_threshold : float
        Rotation change (degrees) below which the republisher skips an update.
    translation_threshold : float
        Translation change (meters) below which the republisher skips an update.
    rate : float
        Republish rate in Hz.
    goal_update_delay : int
        Debounce window in milliseconds between a change of the watched
        frames and the aggregate request that reflects it.
    stream_timeout : float
        Seconds the republisher keeps a stream alive without subscribers.
    service_name : str
        Name of the republishing service on the bridge.
    """

    fixed_frame: str = DEFAULT_FIXED_FRAME
    angular_threshold: float = DEFAULT_ANGULAR_THRESHOLD
    translation_threshold: float = DEFAULT_TRANSLATION_THRESHOLD
    rate: float = DEFAULT_RATE
    goal_update_delay: int = DEFAULT_GOAL_UPDATE_DELAY_MS
    stream_timeout: float = DEFAULT_STREAM_TIMEOUT
    service_name: str = REPUBLISH_SERVICE_NAME

    @property
    def goal_update_delay_seconds(self) -> float:
        return self.goal_update_delay / 1000.0

    @property
    def stream_timeout_duration(self) -> Duration:
        """Stream timeout as the ``{secs, nsecs}`` pair the republisher expects."""
        return Duration.from_seconds(self.stream_timeout)

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> TFClientConfig:
        """Create configuration from a loosely typed options mapping.

        Accepts the camelCase option names used by browser TF clients
        (``fixedFrame``, ``angularThres``, ``topicTimeout``...) as well as
        the field names. Missing, empty, malformed or non-positive values
        fall back to the defaults; unknown keys are ignored.
        """
        if not options:
            return cls()

        kwargs: dict[str, Any] = {}
        for field_name, (keys, parse) in _OPTION_KEYS.items():
            for key in keys:
                if key not in options:
                    continue
                value = parse(options[key])
                if value is not None:
                    kwargs[field_name] = value
                    break
        return cls(**kwargs)

    @classmethod
    def from_env(cls, **overrides: Any) -> TFClientConfig:
        """Create configuration from ``TF_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        options: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                options[field_name] = val

        config = cls.from_options(options)
        if overrides:
            config = dataclasses.replace(config, **overrides)
        return config
