from .favorite import Favorite

__all__ = ["Favorite"]
