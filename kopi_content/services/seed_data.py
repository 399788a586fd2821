"""Baseline content written into empty collections on first access.

Definitions are plain stored-document dicts (camelCase field names). Derived
fields (slug, excerpt) and timestamps are computed when the baseline is
materialized, so they always match what the repositories would produce.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

from kopi_content.services import collections
from kopi_content.services.slugs import derive_slug, make_excerpt

_PLACEHOLDER_IMAGE = "https://placehold.co/800x800.png"
_MENU_IMAGE = "https://placehold.co/600x400.png"

# ============================================================
# Products (single-origin Indonesian beans)
# ============================================================

PRODUCTS: list[dict[str, Any]] = [
    {
        "name": "Aceh Gayo",
        "origin": "Gayo Highlands, Aceh",
        "description": "A rich, full-bodied coffee with earthy notes of dark chocolate, cedar, and a hint of spice. Known for its smooth finish and low acidity, making it a classic Indonesian favorite.",
        "price": 120000,
        "image": "https://images.unsplash.com/photo-1607681034540-2c46cc71896d?q=80&w=1170&auto=format&fit=crop",
        "aiHint": "coffee beans bag",
        "rating": 4.8,
        "reviews": 125,
        "tags": ["Earthy", "Spicy", "Full Body"],
        "roast": "Medium-Dark",
    },
    {
        "name": "Bali Kintamani",
        "origin": "Kintamani Highlands, Bali",
        "description": "A smooth, sweet coffee with a clean finish and bright, citrusy undertones. Grown on volcanic soil alongside citrus fruits, which imparts a unique fruity aroma and flavor.",
        "price": 135000,
        "image": "https://images.unsplash.com/photo-1629248989876-07129a68946d?q=80&w=1169&auto=format&fit=crop",
        "aiHint": "bali landscape",
        "rating": 4.9,
        "reviews": 98,
        "tags": ["Fruity", "Citrus", "Clean"],
        "roast": "Medium",
    },
    {
        "name": "Flores Bajawa",
        "origin": "Bajawa, Flores",
        "description": "A complex coffee with beautiful floral aromas, sweet chocolate notes, and a syrupy, lingering body. The unique terroir of Flores gives this coffee a truly memorable character.",
        "price": 150000,
        "image": "https://plus.unsplash.com/premium_photo-1681324222331-935fd4bc5180?q=80&w=1170&auto=format&fit=crop",
        "aiHint": "indonesian flowers",
        "rating": 4.7,
        "reviews": 82,
        "tags": ["Floral", "Chocolate", "Syrupy"],
        "roast": "Medium",
    },
    {
        "name": "Sumatra Mandheling",
        "origin": "Mandailing, Sumatra",
        "description": "Famously smooth and heavy-bodied, this coffee presents deep, resonant notes of tobacco, dark cocoa, and a whisper of tropical fruit. A truly classic and satisfying cup.",
        "price": 125000,
        "image": "https://images.unsplash.com/photo-1515694590185-73647ba02c10?q=80&w=1170&auto=format&fit=crop",
        "aiHint": "sumatra jungle",
        "rating": 4.8,
        "reviews": 110,
        "tags": ["Full Body", "Earthy", "Complex"],
        "roast": "Dark",
    },
    {
        "name": "Toraja Kalosi",
        "origin": "Tana Toraja, Sulawesi",
        "description": "Well-balanced with a velvety body and notes of ripe fruit and dark chocolate. It has a vibrant yet low-toned acidity, making it a delightfully complex and clean coffee.",
        "price": 140000,
        "image": _PLACEHOLDER_IMAGE,
        "aiHint": "sulawesi mountains",
        "rating": 4.9,
        "reviews": 102,
        "tags": ["Balanced", "Chocolate", "Fruity"],
        "roast": "Medium-Dark",
    },
    {
        "name": "Java Preanger",
        "origin": "West Java",
        "description": "One of the world's oldest coffee cultivation areas. This coffee offers a medium body, a mild acidity, and a smooth, clean taste with a sweet, slightly herbaceous finish.",
        "price": 130000,
        "image": _PLACEHOLDER_IMAGE,
        "aiHint": "java coffee plantation",
        "rating": 4.6,
        "reviews": 75,
        "tags": ["Smooth", "Sweet", "Herbal"],
        "roast": "Medium",
    },
    {
        "name": "Papua Wamena",
        "origin": "Wamena, Papua",
        "description": "Grown in the remote highlands of Papua, this coffee has a clean, crisp flavor with a heavy body, low acidity, and notes of caramel, nuts, and a hint of stone fruit.",
        "price": 160000,
        "image": _PLACEHOLDER_IMAGE,
        "aiHint": "papua landscape",
        "rating": 4.8,
        "reviews": 65,
        "tags": ["Caramel", "Nutty", "Clean"],
        "roast": "Medium",
    },
]

# ============================================================
# Blog posts
# ============================================================

BLOG_POSTS: list[dict[str, Any]] = [
    {
        "title": "Brewing the Perfect V60",
        "category": "Brewing Tips",
        "content": (
            "## Start with fresh beans\n\n"
            "Grind 15 grams of coffee to the coarseness of sea salt just before brewing. "
            "Rinse the paper filter with hot water to remove any papery taste and to warm the vessel.\n\n"
            "## The bloom\n\n"
            "Pour twice the weight of the coffee in water at 92 degrees and wait thirty seconds "
            "while the grounds release their gas. Then pour slowly in circles until you reach 250 grams."
        ),
        "image": "https://images.unsplash.com/photo-1495474472287-4d71bcdd2085?q=80&w=1170&auto=format&fit=crop",
        "aiHint": "pour over coffee",
        "author": "Sehati Kopi",
        "date": "2024-07-02T08:00:00+00:00",
    },
    {
        "title": "From Gayo to Your Cup",
        "category": "Storytelling",
        "content": (
            "High in the Gayo Highlands of Aceh, smallholder farmers tend coffee trees in the shade "
            "of lamtoro and avocado. Every cherry is picked by hand at peak ripeness, wet-hulled in "
            "the village, and dried under the equatorial sun before it begins the long journey to our roastery."
        ),
        "image": "https://images.unsplash.com/photo-1509223103657-2a29718ea935?q=80&w=1332&auto=format&fit=crop",
        "aiHint": "coffee farmer",
        "author": "Sehati Kopi",
        "date": "2024-06-15T08:00:00+00:00",
    },
]

# ============================================================
# Events (date/time are display text, not parsed on write)
# ============================================================

EVENTS: list[dict[str, Any]] = [
    {
        "title": "Coffee Cupping 101",
        "date": "Saturday, August 17, 2024",
        "time": "10:00 AM - 12:00 PM",
        "location": "Sehati Kopi Roastery, Jakarta",
        "description": "Join us for an immersive coffee cupping session. Learn to identify different flavor notes and aromas from our single-origin Indonesian coffees. Perfect for beginners and enthusiasts alike.",
        "image": "https://images.unsplash.com/photo-1545665225-b23b99e4d45e?q=80&w=1287&auto=format&fit=crop",
        "aiHint": "coffee cupping",
    },
    {
        "title": "Latte Art Workshop",
        "date": "Sunday, August 25, 2024",
        "time": "2:00 PM - 4:00 PM",
        "location": "Sehati Kopi Flagship Store",
        "description": "Unleash your inner artist! Our expert baristas will guide you through the basics of milk steaming and pouring techniques to create beautiful latte art. All materials provided.",
        "image": "https://images.unsplash.com/photo-1517245386807-bb43f82c33c4?q=80&w=1470&auto=format&fit=crop",
        "aiHint": "latte art workshop",
    },
    {
        "title": "Meet the Farmer: Gayo Highlands",
        "date": "Saturday, September 7, 2024",
        "time": "3:00 PM - 5:00 PM",
        "location": "Online via Zoom",
        "description": "A special virtual event where you can meet the farmers behind our Aceh Gayo beans. Hear their stories, learn about their farming practices, and participate in a live Q&A session.",
        "image": "https://images.unsplash.com/photo-1509223103657-2a29718ea935?q=80&w=1332&auto=format&fit=crop",
        "aiHint": "coffee farmer",
    },
]

# ============================================================
# Testimonials (dated at seed time)
# ============================================================

TESTIMONIALS: list[dict[str, Any]] = [
    {
        "name": "Andi P.",
        "avatar": "https://images.unsplash.com/photo-1593628525442-f94a810619e0?q=80&w=1080",
        "review": "Kopi Arabika dari Sehati Kopi adalah yang terbaik yang pernah saya coba! Aroma dan rasanya benar-benar tiada duanya. Permata sejati.",
        "rating": 5,
        "status": "published",
    },
    {
        "name": "Siti K.",
        "avatar": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?q=80&w=1287&auto=format&fit=crop",
        "review": "Sehati Kopi sudah menjadi ritual harian saya. Sangrai mereka konsisten dan pengirimannya selalu cepat. Sangat direkomendasikan!",
        "rating": 5,
        "status": "published",
    },
]

# ============================================================
# Cafe menu
# ============================================================

MENU_ITEMS: list[dict[str, Any]] = [
    # Hot
    {"name": "Espresso", "description": "A concentrated coffee beverage brewed by forcing a small amount of nearly boiling water through finely-ground coffee beans.", "price": "Rp 20.000", "category": "hot"},
    {"name": "Americano", "description": "Espresso with added hot water, giving it a similar strength to, but different flavor from, traditionally brewed coffee.", "price": "Rp 25.000", "category": "hot"},
    {"name": "Latte", "description": "A coffee drink made with espresso and steamed milk.", "price": "Rp 30.000", "category": "hot"},
    {"name": "Cappuccino", "description": "An espresso-based coffee drink traditionally prepared with steamed milk foam.", "price": "Rp 30.000", "category": "hot"},
    # Cold
    {"name": "Iced Americano", "description": "Espresso shots topped with cold water produce a light layer of crema, then served over ice.", "price": "Rp 27.000", "category": "cold"},
    {"name": "Iced Latte", "description": "A chilled version of the classic latte, made with espresso and cold milk over ice.", "price": "Rp 32.000", "category": "cold"},
    {"name": "Cold Brew", "description": "Coffee brewed with cold water over a long period, resulting in a smooth, less acidic flavor.", "price": "Rp 35.000", "category": "cold"},
    # Manual
    {"name": "V60", "description": "A pour-over brewing method that produces a clean, clear, and nuanced cup of coffee.", "price": "Rp 40.000", "category": "manual"},
    {"name": "French Press", "description": "An immersion brewing method that creates a full-bodied, rich, and aromatic cup of coffee.", "price": "Rp 38.000", "category": "manual"},
    {"name": "Aeropress", "description": "A versatile brewing device that can produce a range of coffee styles, from espresso-like to filter coffee.", "price": "Rp 42.000", "category": "manual"},
    # Signature
    {"name": "Kopi Susu Sehati", "description": "Our signature iced coffee with creamy milk and a touch of Gula Aren.", "price": "Rp 28.000", "category": "signature"},
    {"name": "Pandan Latte", "description": "A unique blend of espresso, steamed milk, and fragrant pandan syrup.", "price": "Rp 35.000", "category": "signature"},
]

# ============================================================
# Singleton documents
# ============================================================

DEFAULT_SETTINGS: dict[str, Any] = {
    "contactPhone": "+62 123 4567 890",
    "contactEmail": "info@sehatikopi.id",
    "contactAddress": "Jl. Kopi Nikmat No. 1, Jakarta, Indonesia",
    "socialInstagram": "https://instagram.com/sehatikopi",
    "socialFacebook": "https://facebook.com/sehatikopi",
    "socialTwitter": "https://twitter.com/sehatikopi",
}

DEFAULT_HERO: dict[str, Any] = {
    "title": "A Journey of Indonesian Flavor",
    "subtitle": "Discover the rich heritage and exquisite taste of single-origin Indonesian coffee, roasted with passion and precision.",
    "imageUrl": "https://images.unsplash.com/photo-1511537190424-bbbab87ac5eb?q=80&w=1170&auto=format&fit=crop",
}


def _products() -> list[dict[str, Any]]:
    return [{**p, "slug": derive_slug(p["name"])} for p in PRODUCTS]


def _blog_posts() -> list[dict[str, Any]]:
    return [
        {**p, "slug": derive_slug(p["title"]), "excerpt": make_excerpt(p["content"])}
        for p in BLOG_POSTS
    ]


def _testimonials() -> list[dict[str, Any]]:
    now = datetime.now(timezone.utc)
    # Offset by a second each so date-descending order keeps the listed order.
    return [
        {**t, "date": (now - timedelta(seconds=i)).isoformat()}
        for i, t in enumerate(TESTIMONIALS)
    ]


def _menu_items() -> list[dict[str, Any]]:
    return [{**m, "image": _MENU_IMAGE} for m in MENU_ITEMS]


BASELINES: dict[str, Callable[[], list[dict[str, Any]]]] = {
    collections.PRODUCTS: _products,
    collections.BLOG: _blog_posts,
    collections.EVENTS: lambda: [dict(e) for e in EVENTS],
    collections.TESTIMONIALS: _testimonials,
    collections.MENU: _menu_items,
}

SINGLETON_DEFAULTS: dict[tuple[str, str], dict[str, Any]] = {
    (collections.SETTINGS, collections.SETTINGS_DOC_ID): DEFAULT_SETTINGS,
    (collections.SITE_CONTENT, collections.HERO_DOC_ID): DEFAULT_HERO,
}
