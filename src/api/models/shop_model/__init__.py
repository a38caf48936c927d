from .shopsModel import Shop

__all__ = ["Shop"]
