"""Base model for TF wire payloads and value objects.

Every model is frozen so a transform handed to a callback can be shared
between subscribers without copying. Unknown keys sent by the bridge
(``header``, ``stamp``...) are ignored rather than rejected.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TfBaseModel(BaseModel):
    """Base for all pytfclient models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
