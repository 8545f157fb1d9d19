from .category_repository import CategoryRepositoryProtocol
from .tip_repository import TipRepositoryProtocol

__all__ = [
    "CategoryRepositoryProtocol",
    "TipRepositoryProtocol",
]
