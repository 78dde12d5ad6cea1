# -*- coding: utf-8 -*-
"""
Slug allocation.

Derives URL-safe identifiers from titles and resolves collisions with
numeric suffixes (``base``, ``base-2``, ``base-3``...).

ensure_unique_slug() works on a snapshot of existing slugs, so it does not
give atomicity by itself: the ``posts.slug`` UNIQUE constraint catches the
race and callers re-run allocation with a fresh snapshot.
"""

import re
from typing import Iterable

FALLBACK_SLUG = "post"

_DISALLOWED = re.compile(r'[^a-z0-9\s-]')
_WHITESPACE = re.compile(r'\s+')
_HYPHENS = re.compile(r'-+')


def generate_slug(title: str) -> str:
    """
    Build a slug from a title.

    Lower-cases, drops characters outside ``[a-z0-9 -]``, turns whitespace
    runs into single hyphens, collapses repeated hyphens and trims hyphens
    at both ends. May return an empty string.

    Example:
        generate_slug("Best Kitchen Gadgets for 2024!")
        # -> 'best-kitchen-gadgets-for-2024'
    """
    slug = (title or "").lower()
    slug = _DISALLOWED.sub('', slug)
    slug = _WHITESPACE.sub('-', slug.strip())
    slug = _HYPHENS.sub('-', slug)
    return slug.strip('-')


def ensure_unique_slug(base: str, existing_slugs: Iterable[str]) -> str:
    """
    Pick the first free slug for ``base``.

    Args:
        base: Slug from generate_slug(); empty falls back to "post"
        existing_slugs: Slugs already taken (fetched right before the call)

    Returns:
        ``base`` if free, otherwise ``base-N`` with the smallest free N >= 2
    """
    base = base or FALLBACK_SLUG
    taken = set(existing_slugs)

    if base not in taken:
        return base

    counter = 2
    while f"{base}-{counter}" in taken:
        counter += 1
    return f"{base}-{counter}"
