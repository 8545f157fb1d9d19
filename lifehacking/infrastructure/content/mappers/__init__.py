from .category_mapper import CategoryMapper
from .tip_mapper import TipMapper

__all__ = ["CategoryMapper", "TipMapper"]
