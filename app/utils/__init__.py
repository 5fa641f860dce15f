from .constants import AppConstants, ResponseMessages

__all__ = ["AppConstants", "ResponseMessages"]
