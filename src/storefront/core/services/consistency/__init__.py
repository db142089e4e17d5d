"""Invariant enforcement shared by the entity services."""

from .default_address import DefaultAddressManager
from .lookup import LookupResolver
from .uniqueness import UniquenessGuard

__all__ = ["DefaultAddressManager", "LookupResolver", "UniquenessGuard"]
