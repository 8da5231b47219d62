from .attribute import AnyAttribute, Attribute, ExtendedAttribute
from .loader import load_attributes

__all__ = ["AnyAttribute", "Attribute", "ExtendedAttribute", "load_attributes"]
