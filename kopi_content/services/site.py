"""Singleton site documents: contact/social settings and the homepage hero."""

from kopi_content.schemas import HeroData, HeroDataUpdate, WebsiteSettings, WebsiteSettingsUpdate
from kopi_content.services import collections
from kopi_content.services.content import SingletonRepository


class SettingsRepository(SingletonRepository[WebsiteSettings]):
    collection = collections.SETTINGS
    doc_id = collections.SETTINGS_DOC_ID
    entity = WebsiteSettings
    patch = WebsiteSettingsUpdate


class HeroRepository(SingletonRepository[HeroData]):
    collection = collections.SITE_CONTENT
    doc_id = collections.HERO_DOC_ID
    entity = HeroData
    patch = HeroDataUpdate
