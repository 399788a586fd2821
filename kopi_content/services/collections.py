"""Collection names and well-known singleton document IDs."""

PRODUCTS = "products"
BLOG = "blog"
EVENTS = "events"
TESTIMONIALS = "testimonials"
MENU = "menu"
ORDERS = "orders"

SETTINGS = "settings"
SETTINGS_DOC_ID = "main-settings"

SITE_CONTENT = "siteContent"
HERO_DOC_ID = "homepage-hero"
