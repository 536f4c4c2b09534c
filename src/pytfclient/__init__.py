"""pytfclient - Async Python client for TF frames republished over a robotics bridge."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytfclient")
except PackageNotFoundError:
    __version__ = "0+local"
from pytfclient._transport import Connection, ServiceHandle, TopicHandle
from pytfclient.client import TFClient, TransformCallback
from pytfclient.config import TFClientConfig
from pytfclient.exceptions import TfClientClosedError, TfConfigError, TfError
from pytfclient.models import (
    Duration,
    Quaternion,
    RepublishTFsRequest,
    RepublishTFsResponse,
    TFArray,
    Transform,
    TransformUpdate,
    Vector3,
)

__all__ = [
    "__version__",
    "Connection",
    "Duration",
    "Quaternion",
    "RepublishTFsRequest",
    "RepublishTFsResponse",
    "ServiceHandle",
    "TFArray",
    "TFClient",
    "TFClientConfig",
    "TfClientClosedError",
    "TfConfigError",
    "TfError",
    "TopicHandle",
    "Transform",
    "TransformCallback",
    "TransformUpdate",
    "Vector3",
]
