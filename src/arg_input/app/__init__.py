from . import config
from .options import ReadOptions

__all__ = ["ReadOptions", "config"]
