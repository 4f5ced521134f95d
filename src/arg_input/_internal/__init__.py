from .attempt import attempt_map

__all__ = ["attempt_map"]
