"""Kitchen Cursor CMS - content generation and moderation backend."""

__version__ = "1.0.0"
