"""Transform value objects."""

from __future__ import annotations

from pytfclient.models._base import TfBaseModel


class Vector3(TfBaseModel):
    """Translation in meters."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


class Quaternion(TfBaseModel):
    """Rotation as an ``(x, y, z, w)`` quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)


class Transform(TfBaseModel):
    """Rigid-body transform of a frame relative to the fixed frame.

    Parameters
    ----------
    translation : Vector3
        Position of the frame origin.
    rotation : Quaternion
        Orientation of the frame.
    """

    translation: Vector3 = Vector3()
    rotation: Quaternion = Quaternion()
