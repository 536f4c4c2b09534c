"""Data models for TF payloads."""

from pytfclient.models._base import TfBaseModel
from pytfclient.models.republisher import (
    Duration,
    RepublishTFsRequest,
    RepublishTFsResponse,
    TFArray,
    TransformUpdate,
)
from pytfclient.models.transform import Quaternion, Transform, Vector3

__all__ = [
    "Duration",
    "Quaternion",
    "RepublishTFsRequest",
    "RepublishTFsResponse",
    "TFArray",
    "TfBaseModel",
    "Transform",
    "TransformUpdate",
    "Vector3",
]
