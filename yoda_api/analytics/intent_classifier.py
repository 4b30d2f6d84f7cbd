"""
Intent Classifier - Detect what a free-text query is asking for.

Classification is keyword containment on the lowercased query, tested
against an ordered rule list. The first matching rule wins, so a query
mentioning both clients and tasks is a client query.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple

from yoda_api.core.logging_config import get_logger

logger = get_logger(__name__)


class Intent(str, Enum):
    """Purposes a query can be classified into."""
    CLIENT = "client"
    TASK = "task"
    AUTOMATE = "automate"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class IntentRule:
    """Matches when the normalized query contains `keyword`."""
    intent: Intent
    keyword: str

    def matches(self, normalized_query: str) -> bool:
        return self.keyword in normalized_query


# Priority order matters: earlier rules shadow later ones.
DEFAULT_RULES: Tuple[IntentRule, ...] = (
    IntentRule(Intent.CLIENT, "client"),
    IntentRule(Intent.TASK, "task"),
    IntentRule(Intent.AUTOMATE, "automate"),
)


class IntentClassifier:
    """
    Classifies free-text queries by intent.

    Example:
        >>> classifier = IntentClassifier()
        >>> classifier.classify("Show client tasks")
        <Intent.CLIENT: 'client'>
        >>> classifier.classify("automate this task")
        <Intent.TASK: 'task'>
    """

    def __init__(self, rules: Sequence[IntentRule] = DEFAULT_RULES):
        self.rules = tuple(rules)

    def classify(self, query: str) -> Intent:
        """
        Classify a query string.

        Args:
            query: Raw query text

        Returns:
            Intent of the first matching rule, or Intent.UNKNOWN
        """
        normalized = (query or "").lower()

        for rule in self.rules:
            if rule.matches(normalized):
                logger.debug(f"Query classified as {rule.intent.value} (keyword={rule.keyword!r})")
                return rule.intent

        logger.debug("Query did not match any intent rule")
        return Intent.UNKNOWN
