from .loader import NamesLoader

__all__ = ["NamesLoader"]
