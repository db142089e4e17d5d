"""Storefront records service.

Users, products and addresses behind a small HTTP API, with the service layer
enforcing the invariants that span rows: unique user emails, unique product
names and SKUs, and at most one default address per user.
"""

__version__ = "0.1.0"
