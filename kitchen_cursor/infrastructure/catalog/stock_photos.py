# -*- coding: utf-8 -*-
"""
Stock photo lookup.

Curated Unsplash photos grouped by category. The category comes from
keywords in the topic or product name; the photo inside a category is
picked by a stable string hash, so the same input always maps to the same
image.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

_UNSPLASH = "https://images.unsplash.com"
_HERO_PARAMS = "w=1024&h=1024&fit=crop&q=80"
_PRODUCT_PARAMS = "w=400&q=80"


def _photo(photo_id: str, params: str) -> str:
    return f"{_UNSPLASH}/photo-{photo_id}?{params}"


HERO_IMAGES: Dict[str, List[str]] = {
    'coffee': [
        _photo("1447933601403-0c6688de566e", _HERO_PARAMS),
        _photo("1495474472287-4d71bcdd2085", _HERO_PARAMS),
        _photo("1559056199-641a0ac8b55e", _HERO_PARAMS),
    ],
    'kitchen': [
        _photo("1556909114-f6e7ad7d3136", _HERO_PARAMS),
        _photo("1574484284002-952d92456975", _HERO_PARAMS),
        _photo("1585515656935-1b1b2e8956db", _HERO_PARAMS),
    ],
    'cooking': [
        _photo("1556909114-f6e7ad7d3136", _HERO_PARAMS),
        _photo("1565299624946-b28f40a0ca4b", _HERO_PARAMS),
    ],
    'technology': [
        _photo("1518709268805-4e9042af2176", _HERO_PARAMS),
        _photo("1486312338219-ce68d2c6f44d", _HERO_PARAMS),
    ],
    'fitness': [
        _photo("1571019613454-1cb2f99b2d8b", _HERO_PARAMS),
        _photo("1517836357463-d25dfeac3438", _HERO_PARAMS),
    ],
    'home': [
        _photo("1586023492125-27b2c045efd7", _HERO_PARAMS),
        _photo("1560448204-e02f11c3d0e2", _HERO_PARAMS),
    ],
    'default': [
        _photo("1486312338219-ce68d2c6f44d", _HERO_PARAMS),
        _photo("1518709268805-4e9042af2176", _HERO_PARAMS),
    ],
}

PRODUCT_IMAGES: Dict[str, List[str]] = {
    'air-fryer': [
        _photo("1585515656935-1b1b2e8956db", _PRODUCT_PARAMS),
        _photo("1574484284002-952d92456975", _PRODUCT_PARAMS),
        _photo("1556909114-f6e7ad7d3136", _PRODUCT_PARAMS),
    ],
    'kitchen-appliance': [
        _photo("1556909114-f6e7ad7d3136", _PRODUCT_PARAMS),
        _photo("1574484284002-952d92456975", _PRODUCT_PARAMS),
        _photo("1585515656935-1b1b2e8956db", _PRODUCT_PARAMS),
    ],
    'coffee-maker': [
        _photo("1559056199-641a0ac8b55e", _PRODUCT_PARAMS),
        _photo("1495474472287-4d71bcdd2085", _PRODUCT_PARAMS),
        _photo("1442512595331-e89e73853f31", _PRODUCT_PARAMS),
        _photo("1461023058943-07fcbe16d735", _PRODUCT_PARAMS),
    ],
    'espresso-machine': [
        _photo("1559056199-641a0ac8b55e", _PRODUCT_PARAMS),
        _photo("1495474472287-4d71bcdd2085", _PRODUCT_PARAMS),
    ],
    'stand-mixer': [
        _photo("1578662996442-48f60103fc96", _PRODUCT_PARAMS),
    ],
}

# Checked in order, first match wins
HERO_KEYWORDS: Sequence[Tuple[str, Tuple[str, ...]]] = (
    ('coffee', ('coffee', 'espresso', 'brew')),
    ('kitchen', ('kitchen', 'appliance', 'culinary')),
    ('cooking', ('cook', 'recipe', 'food')),
    ('technology', ('tech', 'smart', 'device', 'gadget')),
    ('fitness', ('fitness', 'workout', 'exercise', 'gym')),
    ('home', ('home', 'house', 'decor', 'furniture')),
)

PRODUCT_KEYWORDS: Sequence[Tuple[str, Tuple[str, ...]]] = (
    ('air-fryer', ('air fryer', 'ninja af', 'cosori')),
    ('espresso-machine', ('espresso', 'barista')),
    ('coffee-maker', ('coffee', 'keurig', 'ninja ce', 'technivorm', 'cuisinart')),
    ('stand-mixer', ('mixer', 'kitchenaid')),
)


def stable_hash(text: str) -> int:
    """
    32-bit string hash (``h = h * 31 + code``, wrapping like a signed int).

    Kept bit-compatible with the hash the site front-end used, so images
    chosen for existing topics do not change.
    """
    value = 0
    for char in text:
        value = (value << 5) - value + ord(char)
        value = (value + 2 ** 31) % 2 ** 32 - 2 ** 31
    return value


def _pick(images: List[str], key: str) -> str:
    return images[abs(stable_hash(key)) % len(images)]


def _match_category(text: str, table, default: str) -> str:
    lowered = text.lower()
    for category, keywords in table:
        if any(keyword in lowered for keyword in keywords):
            return category
    return default


class StockPhotoService:
    """Deterministic stock photo lookup."""

    def hero_image_url(self, topic: str) -> str:
        """Hero image for a post topic."""
        category = _match_category(topic, HERO_KEYWORDS, 'default')
        url = _pick(HERO_IMAGES[category], topic)
        logger.debug(f"[StockPhotos] Hero for '{topic}': {category}")
        return url

    def product_image_url(self, product_name: str, category: Optional[str] = None) -> str:
        """
        Image for a product.

        Args:
            product_name: Product title, used for keyword match and hash
            category: Category used when the name matches no keyword
        """
        matched = _match_category(product_name, PRODUCT_KEYWORDS, '')
        images = PRODUCT_IMAGES.get(matched or category or 'kitchen-appliance')
        if not images:
            images = PRODUCT_IMAGES['kitchen-appliance']
        return _pick(images, product_name)
