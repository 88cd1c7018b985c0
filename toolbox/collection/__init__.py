from .pair import Pair

__all__ = ["Pair"]
