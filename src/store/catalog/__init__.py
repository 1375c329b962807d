"""Catalog: the Priceable and Taxable protocols and the item variants."""
from store.catalog.items import Item, TaxedItem, WeightedItem, compute_tax, round_half_away, taxable
from store.catalog.protocol import Priceable, Taxable

__all__ = [
    "Priceable",
    "Taxable",
    "Item",
    "WeightedItem",
    "TaxedItem",
    "taxable",
    "compute_tax",
    "round_half_away",
]
