"""Tests for the TF value objects and republisher wire contracts."""

from __future__ import annotations

import pydantic
import pytest

from pytfclient._normalize import normalize_frame_id, positive_int, safe_float
from pytfclient.models.republisher import (
    Duration,
    RepublishTFsRequest,
    RepublishTFsResponse,
    TFArray,
)
from pytfclient.models.transform import Quaternion, Transform, Vector3


class TestTransform:
    def test_value_equality(self) -> None:
        a = Transform(translation=Vector3(x=1, y=2, z=3), rotation=Quaternion(x=0, y=0, z=0, w=1))
        b = Transform.model_validate(
            {"translation": {"x": 1.0, "y": 2.0, "z": 3.0}, "rotation": {"x": 0, "y": 0, "z": 0, "w": 1}}
        )
        assert a == b
        assert a.translation.to_tuple() == (1.0, 2.0, 3.0)
        assert a.rotation.to_tuple() == (0.0, 0.0, 0.0, 1.0)

    def test_identity_default(self) -> None:
        assert Transform().rotation.w == 1.0
        assert Transform().translation.to_tuple() == (0.0, 0.0, 0.0)

    def test_frozen(self) -> None:
        transform = Transform()
        with pytest.raises(pydantic.ValidationError):
            transform.translation = Vector3(x=1)  # type: ignore[misc]


class TestTFArray:
    def test_parses_bridge_message_and_ignores_extra_keys(self) -> None:
        message = {
            "transforms": [
                {
                    "header": {"seq": 3, "frame_id": "/base_link"},
                    "child_frame_id": "/wheel",
                    "transform": {
                        "translation": {"x": 1, "y": 0, "z": 0},
                        "rotation": {"x": 0, "y": 0, "z": 0, "w": 1},
                    },
                }
            ]
        }

        tf_array = TFArray.model_validate(message)

        assert len(tf_array.transforms) == 1
        update = tf_array.transforms[0]
        assert update.child_frame_id == "/wheel"
        assert update.transform.translation == Vector3(x=1.0, y=0.0, z=0.0)

    def test_empty_message(self) -> None:
        assert TFArray.model_validate({}).transforms == []

    def test_malformed_update_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            TFArray.model_validate({"transforms": [{"transform": {}}]})


class TestRepublishContract:
    def test_request_wire_shape(self) -> None:
        request = RepublishTFsRequest(
            source_frames=["wheel", "camera"],
            target_frame="/base_link",
            angular_thres=2.0,
            trans_thres=0.01,
            rate=10.0,
            timeout=Duration.from_seconds(2.0),
        )

        assert request.model_dump() == {
            "source_frames": ["wheel", "camera"],
            "target_frame": "/base_link",
            "angular_thres": 2.0,
            "trans_thres": 0.01,
            "rate": 10.0,
            "timeout": {"secs": 2, "nsecs": 0},
        }

    def test_response_requires_topic_name(self) -> None:
        assert RepublishTFsResponse.model_validate({"topic_name": "/tf_repub_0"}).topic_name == "/tf_repub_0"
        with pytest.raises(pydantic.ValidationError):
            RepublishTFsResponse.model_validate({"topic_name": ""})


class TestNormalize:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("/odom", "odom"), ("odom", "odom"), ("//odom", "/odom"), ("", ""), ("/", "")],
    )
    def test_strips_single_leading_slash(self, raw: str, expected: str) -> None:
        assert normalize_frame_id(raw) == expected

    def test_lenient_numbers(self) -> None:
        assert safe_float("1.5") == 1.5
        assert safe_float("abc") is None
        assert safe_float(True) is None
        assert positive_int("50") == 50
        assert positive_int(0.4) is None
