from .category_repository import CategoryRepository
from .tip_repository import TipRepository

__all__ = ["CategoryRepository", "TipRepository"]
