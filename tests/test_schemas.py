"""Tests for store-boundary serialization of content schemas."""

import pytest
from pydantic import ValidationError

from kopi_content import schemas


def test_product_create_splits_comma_separated_tags():
    data = schemas.ProductCreate(
        name="Bali Kintamani",
        origin="Bali",
        description="Citrus notes.",
        price=140000,
        image="x",
        roast="Light",
        tags=" Citrus, ,Bright ",
    )
    assert data.tags == ["Citrus", "Bright"]


def test_document_uses_stored_field_names_without_id():
    product = schemas.Product(
        id="abc",
        slug="aceh-gayo",
        name="Aceh Gayo",
        origin="Aceh",
        description="Earthy.",
        price=150000,
        image="x",
        ai_hint="coffee beans",
        rating=4.84,
        review_count=12,
        roast="Medium",
    )

    doc = product.to_document()

    assert "id" not in doc
    assert doc["aiHint"] == "coffee beans"
    assert doc["reviews"] == 12
    assert doc["rating"] == 4.8


def test_patch_only_carries_fields_that_were_set():
    changes = schemas.WebsiteSettingsUpdate(contactEmail="hello@sehatikopi.id").to_changes()
    assert changes == {"contactEmail": "hello@sehatikopi.id"}


def test_testimonial_rating_bounds():
    with pytest.raises(ValidationError):
        schemas.TestimonialCreate(name="Budi", review="Nice", rating=6)


def test_order_requires_at_least_one_item():
    with pytest.raises(ValidationError):
        schemas.OrderCreate(orderId="ORD-1", userId="u", items=[], subtotal=0, total=0)
