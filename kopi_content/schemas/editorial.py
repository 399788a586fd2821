"""Schemas for editorial content: blog posts, events and testimonials."""

from enum import Enum

from pydantic import Field

from kopi_content.schemas.common import DocumentModel, InputModel, PatchModel


class BlogCategory(str, Enum):
    BREWING_TIPS = "Brewing Tips"
    STORYTELLING = "Storytelling"
    COFFEE_EDUCATION = "Coffee Education"
    NEWS = "News"


class BlogPost(DocumentModel):
    """A blog post. `content` is Markdown; `excerpt` and `slug` are derived."""

    title: str
    category: BlogCategory
    excerpt: str = ""
    image: str = ""  # URL or data URI
    ai_hint: str = Field(alias="aiHint", default="")
    slug: str
    content: str
    author: str = ""
    date: str = ""  # ISO 8601; tolerated missing/unparseable when sorting


class BlogPostCreate(InputModel):
    title: str = Field(min_length=1)
    category: BlogCategory
    content: str
    image: str = ""
    ai_hint: str = Field(alias="aiHint", default="")


class BlogPostUpdate(PatchModel):
    title: str | None = Field(default=None, min_length=1)
    category: BlogCategory | None = None
    content: str | None = None
    image: str | None = None
    ai_hint: str | None = Field(alias="aiHint", default=None)


class Event(DocumentModel):
    """A cupping session, workshop or talk. Date and time are free text."""

    title: str
    date: str
    time: str = ""
    location: str
    description: str
    image: str = ""
    ai_hint: str = Field(alias="aiHint", default="")


class EventCreate(InputModel):
    title: str = Field(min_length=1)
    date: str
    time: str = ""
    location: str
    description: str
    image: str = ""
    ai_hint: str = Field(alias="aiHint", default="")


class EventUpdate(PatchModel):
    title: str | None = Field(default=None, min_length=1)
    date: str | None = None
    time: str | None = None
    location: str | None = None
    description: str | None = None
    image: str | None = None
    ai_hint: str | None = Field(alias="aiHint", default=None)


class TestimonialStatus(str, Enum):
    PENDING = "pending"
    PUBLISHED = "published"


class Testimonial(DocumentModel):
    """A customer review. Only an admin moves it from pending to published."""

    name: str
    avatar: str = ""
    review: str
    rating: int = Field(ge=1, le=5)
    status: TestimonialStatus = TestimonialStatus.PENDING
    date: str = ""  # ISO 8601
    product_id: str | None = Field(alias="productId", default=None)
    user_id: str | None = Field(alias="userId", default=None)


class TestimonialCreate(InputModel):
    name: str = Field(min_length=1)
    avatar: str = ""
    review: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)
    product_id: str | None = Field(alias="productId", default=None)
    user_id: str | None = Field(alias="userId", default=None)


class TestimonialUpdate(PatchModel):
    name: str | None = Field(default=None, min_length=1)
    avatar: str | None = None
    review: str | None = Field(default=None, min_length=1)
    rating: int | None = Field(default=None, ge=1, le=5)
    status: TestimonialStatus | None = None
    product_id: str | None = Field(alias="productId", default=None)
