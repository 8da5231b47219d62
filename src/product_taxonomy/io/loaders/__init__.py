from .errors import LoaderError
from .yaml_loader import load_attributes_file, load_taxonomy, load_values_file

__all__ = ["LoaderError", "load_attributes_file", "load_taxonomy", "load_values_file"]
