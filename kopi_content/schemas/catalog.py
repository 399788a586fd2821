"""Schemas for the coffee catalog: bean products and cafe menu items."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from kopi_content.schemas.common import DocumentModel, InputModel, PatchModel


def _split_tags(value: object) -> object:
    """Accept tags as a list or as the admin form's comma-separated string."""
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    return value


class Product(DocumentModel):
    """A single-origin coffee product."""

    slug: str
    name: str
    origin: str
    description: str
    # Smallest currency unit (IDR has no minor unit, so whole rupiah)
    price: int = Field(ge=0)
    image: str
    ai_hint: str = Field(alias="aiHint", default="")
    rating: float = Field(default=0.0, ge=0, le=5)
    review_count: int = Field(alias="reviews", default=0, ge=0)
    tags: list[str] = Field(default_factory=list)
    roast: str

    @field_validator("rating")
    @classmethod
    def _one_decimal(cls, v: float) -> float:
        return round(v, 1)


class ProductCreate(InputModel):
    name: str = Field(min_length=1)
    origin: str
    description: str
    price: int = Field(ge=0)
    image: str
    ai_hint: str = Field(alias="aiHint", default="")
    tags: list[str] = Field(default_factory=list)
    roast: str

    @field_validator("tags", mode="before")
    @classmethod
    def _parse_tags(cls, v: object) -> object:
        return _split_tags(v)


class ProductUpdate(PatchModel):
    name: str | None = Field(default=None, min_length=1)
    origin: str | None = None
    description: str | None = None
    price: int | None = Field(default=None, ge=0)
    image: str | None = None
    ai_hint: str | None = Field(alias="aiHint", default=None)
    rating: float | None = Field(default=None, ge=0, le=5)
    review_count: int | None = Field(alias="reviews", default=None, ge=0)
    tags: list[str] | None = None
    roast: str | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _parse_tags(cls, v: object) -> object:
        return _split_tags(v)


class MenuCategory(str, Enum):
    HOT = "hot"
    COLD = "cold"
    MANUAL = "manual"
    SIGNATURE = "signature"


class MenuItem(DocumentModel):
    """A drink on the cafe menu."""

    name: str
    description: str
    price: str  # display string, e.g. "Rp 28.000"
    image: str
    category: MenuCategory


class MenuItemCreate(InputModel):
    name: str = Field(min_length=1)
    description: str
    price: str
    image: str = ""
    category: MenuCategory


class MenuItemUpdate(PatchModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    price: str | None = None
    image: str | None = None
    category: MenuCategory | None = None


class MenuItems(BaseModel):
    """Menu grouped by category, every category always present."""

    hot: list[MenuItem] = Field(default_factory=list)
    cold: list[MenuItem] = Field(default_factory=list)
    manual: list[MenuItem] = Field(default_factory=list)
    signature: list[MenuItem] = Field(default_factory=list)
