"""Dataset loading."""

from maxprotein.data.abbrev_loader import AbbrevLoader, load_usda_abbrev

__all__ = ["AbbrevLoader", "load_usda_abbrev"]
