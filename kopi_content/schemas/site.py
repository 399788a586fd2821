"""Schemas for singleton site documents (contact settings, homepage hero)."""

from pydantic import Field

from kopi_content.schemas.common import DocumentModel, PatchModel


class WebsiteSettings(DocumentModel):
    contact_phone: str = Field(alias="contactPhone")
    contact_email: str = Field(alias="contactEmail")
    contact_address: str = Field(alias="contactAddress")
    social_instagram: str = Field(alias="socialInstagram", default="")
    social_facebook: str = Field(alias="socialFacebook", default="")
    social_twitter: str = Field(alias="socialTwitter", default="")


class WebsiteSettingsUpdate(PatchModel):
    contact_phone: str | None = Field(alias="contactPhone", default=None)
    contact_email: str | None = Field(alias="contactEmail", default=None)
    contact_address: str | None = Field(alias="contactAddress", default=None)
    social_instagram: str | None = Field(alias="socialInstagram", default=None)
    social_facebook: str | None = Field(alias="socialFacebook", default=None)
    social_twitter: str | None = Field(alias="socialTwitter", default=None)


class HeroData(DocumentModel):
    title: str
    subtitle: str
    image_url: str = Field(alias="imageUrl")


class HeroDataUpdate(PatchModel):
    title: str | None = None
    subtitle: str | None = None
    image_url: str | None = Field(alias="imageUrl", default=None)
