"""Predicate implementations for the filter pipeline."""

from .equality import CategoryPredicate, LocationPredicate
from .profile import ProfileLocationPredicate, ServiceOfferedPredicate
from .text import SearchTextPredicate

__all__ = [
    "CategoryPredicate",
    "LocationPredicate",
    "ProfileLocationPredicate",
    "SearchTextPredicate",
    "ServiceOfferedPredicate",
]
