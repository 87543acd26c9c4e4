from .fields import NationalIdField

__all__ = ["NationalIdField"]
