"""Receipt record and API response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """A single line entry on a receipt."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(default="", alias="shortDescription")
    price: str = ""


class Receipt(BaseModel):
    """A receipt as submitted by a client.

    Numeric and date fields are kept as the raw strings received; the
    scoring engine decides how to interpret them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: str = ""
    purchase_date: str = Field(default="", alias="purchaseDate")
    purchase_time: str = Field(default="", alias="purchaseTime")
    items: tuple[Item, ...] = ()
    total: str = ""


class ProcessReceiptResponse(BaseModel):
    """Response body for a stored receipt."""

    id: str


class PointsResponse(BaseModel):
    """Response body for a points lookup."""

    points: int
