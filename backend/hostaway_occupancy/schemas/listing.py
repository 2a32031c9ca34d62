"""Listing identity — canonical keys for Hostaway listing ids."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def normalize_listing_id(value: Any) -> str | None:
    """Return the canonical string key for a listing id, or None if unusable.

    Hostaway sends ``listingMapId`` as a number while configured ids are
    strings, so ``42``, ``42.0`` and ``" 42 "`` all map to ``"42"``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    key = str(value).strip()
    return key or None


class Listing(BaseModel):
    """A rental listing included in the report."""

    id: str

    model_config = ConfigDict(frozen=True)

    @field_validator("id", mode="before")
    @classmethod
    def _canonical_id(cls, value: Any) -> str:
        key = normalize_listing_id(value)
        if key is None:
            raise ValueError("listing id must not be empty")
        return key
