"""Checkout: Receipt and the Register that scans into it and finalizes it."""
from store.checkout.receipt import Receipt, format_cents
from store.checkout.register import Register

__all__ = ["Receipt", "Register", "format_cents"]
