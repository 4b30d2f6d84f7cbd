"""
Analytics Package - Query understanding utilities.

This package provides:
- IntentClassifier: Map free-text queries to an Intent by ordered keyword rules

Example:
    >>> from yoda_api.analytics import IntentClassifier, Intent
    >>> IntentClassifier().classify("How many clients do I have") is Intent.CLIENT
    True
"""
from yoda_api.analytics.intent_classifier import (
    DEFAULT_RULES,
    Intent,
    IntentClassifier,
    IntentRule,
)

__all__ = [
    "DEFAULT_RULES",
    "Intent",
    "IntentClassifier",
    "IntentRule",
]
