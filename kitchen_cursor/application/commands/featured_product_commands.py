"""
Commands: featured products.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any
from uuid import UUID


@dataclass(frozen=True)
class CreateFeaturedProductCommand:
    post_id: UUID
    product_name: str
    product_image: str
    product_link: str
    description: str
    price: Optional[str] = None
    rating: Optional[float] = None


@dataclass(frozen=True)
class UpdateFeaturedProductCommand:
    product_id: UUID
    changes: Dict[str, Any] = None

    def __post_init__(self):
        if self.changes is None:
            object.__setattr__(self, 'changes', {})
