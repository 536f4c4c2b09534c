"""Internal constants shared across the library."""

REPUBLISH_SERVICE_NAME = "/republish_tfs"
REPUBLISH_SERVICE_TYPE = "tf2_web_republisher/RepublishTFs"
TF_ARRAY_MESSAGE_TYPE = "tf2_web_republisher/TFArray"

DEFAULT_FIXED_FRAME = "/base_link"
DEFAULT_ANGULAR_THRESHOLD = 2.0
DEFAULT_TRANSLATION_THRESHOLD = 0.01
DEFAULT_RATE = 10.0
DEFAULT_GOAL_UPDATE_DELAY_MS = 50
DEFAULT_STREAM_TIMEOUT = 2.0

FRAME_SEPARATOR = "/"
NSECS_PER_SEC = 1_000_000_000
