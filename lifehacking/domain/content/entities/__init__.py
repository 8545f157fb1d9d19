from .tip import Category, Tip

__all__ = ["Category", "Tip"]
