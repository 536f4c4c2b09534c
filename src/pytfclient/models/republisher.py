"""Wire contracts of the ``tf2_web_republisher`` service and stream."""

from __future__ import annotations

import math

from pydantic import Field

from pytfclient._constants import NSECS_PER_SEC
from pytfclient.models._base import TfBaseModel
from pytfclient.models.transform import Transform


class Duration(TfBaseModel):
    """ROS duration split into whole seconds and nanoseconds."""

    secs: int = 0
    nsecs: int = 0

    @classmethod
    def from_seconds(cls, seconds: float) -> Duration:
        secs = math.floor(seconds)
        nsecs = math.floor((seconds - secs) * NSECS_PER_SEC)
        return cls(secs=secs, nsecs=nsecs)


class RepublishTFsRequest(TfBaseModel):
    """Aggregate subscription request for a batch of source frames."""

    source_frames: list[str] = Field(default_factory=list)
    target_frame: str
    angular_thres: float
    trans_thres: float
    rate: float
    timeout: Duration


class RepublishTFsResponse(TfBaseModel):
    """Name of the stream the republisher will publish the batch on."""

    topic_name: str = Field(min_length=1)


class TransformUpdate(TfBaseModel):
    """A single frame update inside a :class:`TFArray`."""

    child_frame_id: str
    transform: Transform


class TFArray(TfBaseModel):
    """A batch of frame updates delivered on the republisher stream."""

    transforms: list[TransformUpdate] = Field(default_factory=list)
