"""Package input models handed over by data collection."""

from typing import Any

from pydantic import BaseModel, Field


class PackageData(BaseModel):
    """Already-collected raw signal values for one package.

    A signal missing from ``signals`` means "no data"; it is not an error.
    """

    package_name: str = Field(min_length=1)
    version: str | None = Field(default=None, description="Latest resolved version")
    signals: dict[str, Any] = Field(
        default_factory=dict, description="Signal name -> raw value (number, bool or checklist)"
    )
