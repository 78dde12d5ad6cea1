# -*- coding: utf-8 -*-
"""
Product catalog.

Affiliate product lookup keyed on topic keywords. No marketplace API is
called: results come from a curated in-process catalog.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from kitchen_cursor.infrastructure.catalog.stock_photos import StockPhotoService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogProduct:
    """Product returned by a catalog search."""
    title: str
    image: str
    link: str
    price: Optional[str] = None
    description: Optional[str] = None


_photos = StockPhotoService()


def _with_stock_image(title: str, link: str, price: str, description: str) -> CatalogProduct:
    return CatalogProduct(
        title=title,
        image=_photos.product_image_url(title),
        link=link,
        price=price,
        description=description,
    )


CATALOG: Dict[str, List[CatalogProduct]] = {
    'air fryer': [
        _with_stock_image(
            'Ninja AF161 Max XL Air Fryer', 'https://amazon.com/dp/B07VT23JDM', '$129.99',
            'Extra-large 5.5-quart capacity air fryer with even crisping technology',
        ),
        _with_stock_image(
            'COSORI Pro LE 5-Qt Air Fryer', 'https://amazon.com/dp/B077TKLR2W', '$99.99',
            'Compact design with 13 cooking functions and app control',
        ),
        _with_stock_image(
            'Philips 3000 Series Compact Air Fryer', 'https://amazon.com/dp/B077JBQZPX', '$179.99',
            'Original air fryer technology with rapid air circulation',
        ),
        _with_stock_image(
            'Instant Pot Duo Crisp Air Fryer', 'https://amazon.com/dp/B07VT23JDM', '$199.99',
            '11-in-1 pressure cooker and air fryer combination',
        ),
        _with_stock_image(
            'Breville Smart Oven Air Fryer Pro', 'https://amazon.com/dp/B01N5UPTZS', '$349.99',
            'Countertop oven with air fry, bake, and toast functions',
        ),
    ],
    'kitchen': [
        CatalogProduct(
            title='KitchenAid Stand Mixer',
            image='https://images.unsplash.com/photo-1556909114-f6e7ad7d3136?w=400',
            link='https://amazon.com/dp/B00005UP2P',
            price='$299.99',
            description='Professional 5-quart stand mixer with multiple attachments',
        ),
        CatalogProduct(
            title='Ninja Food Processor',
            image='https://images.unsplash.com/photo-1556909114-f6e7ad7d3136?w=400',
            link='https://amazon.com/dp/B01AXM4WV2',
            price='$99.99',
            description='Versatile food processor for chopping, mixing, and pureeing',
        ),
        CatalogProduct(
            title='Instant Pot Pressure Cooker',
            image='https://images.unsplash.com/photo-1556909114-f6e7ad7d3136?w=400',
            link='https://amazon.com/dp/B00FLYWNYQ',
            price='$79.99',
            description='7-in-1 electric pressure cooker for quick and easy meals',
        ),
    ],
    'coffee': [
        CatalogProduct(
            title='Breville Espresso Machine',
            image='https://images.unsplash.com/photo-1559056199-641a0ac8b55e?w=400',
            link='https://amazon.com/dp/B00I6JGGP0',
            price='$699.99',
            description='Professional espresso machine with built-in grinder',
        ),
        CatalogProduct(
            title='Chemex Pour-Over Coffee Maker',
            image='https://images.unsplash.com/photo-1559056199-641a0ac8b55e?w=400',
            link='https://amazon.com/dp/B0000YWF5E',
            price='$44.99',
            description='Classic glass pour-over coffee maker',
        ),
        CatalogProduct(
            title='Baratza Coffee Grinder',
            image='https://images.unsplash.com/photo-1559056199-641a0ac8b55e?w=400',
            link='https://amazon.com/dp/B007F183LK',
            price='$139.99',
            description='Precision burr grinder for consistent coffee grounds',
        ),
    ],
    'fitness': [
        CatalogProduct(
            title='Peloton Exercise Bike',
            image='https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=400',
            link='https://amazon.com/dp/B07JBQZPX7',
            price='$1,495.00',
            description='Interactive fitness bike with live and on-demand classes',
        ),
        CatalogProduct(
            title='Bowflex Adjustable Dumbbells',
            image='https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=400',
            link='https://amazon.com/dp/B001ARYU58',
            price='$549.99',
            description='Space-saving adjustable dumbbells, 5-52.5 lbs per dumbbell',
        ),
        CatalogProduct(
            title='Yoga Mat Premium',
            image='https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=400',
            link='https://amazon.com/dp/B01LZRFC11',
            price='$69.99',
            description='Non-slip yoga mat with excellent cushioning and durability',
        ),
    ],
}

DEFAULT_CATEGORY = 'kitchen'
GENERAL_KEYWORDS = ('kitchen', 'cooking', 'tech', 'technology', 'home')


def keyword_for_topic(topic: str) -> str:
    """
    Catalog key for a topic.

    Specific product families are matched first, then a word-level match
    against general categories. Defaults to ``kitchen``.
    """
    lowered = topic.lower()

    if 'air fryer' in lowered or 'airfryer' in lowered:
        return 'air fryer'
    if 'coffee' in lowered or 'espresso' in lowered:
        return 'coffee'
    if 'fitness' in lowered or 'workout' in lowered or 'exercise' in lowered:
        return 'fitness'

    words = lowered.split(' ')
    for keyword in GENERAL_KEYWORDS:
        if any(keyword in word or word in keyword for word in words if word):
            return keyword

    return DEFAULT_CATEGORY


class ProductCatalog:
    """Product search over the curated catalog."""

    def search(self, topic: str) -> List[CatalogProduct]:
        """
        Products related to a topic.

        Unknown categories fall back to the kitchen list.
        """
        keyword = keyword_for_topic(topic)
        products = CATALOG.get(keyword) or CATALOG[DEFAULT_CATEGORY]
        logger.info(f"[Catalog] '{topic}' -> '{keyword}' ({len(products)} products)")
        return list(products)
