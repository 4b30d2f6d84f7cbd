"""
Billing - Revenue arithmetic and named defaults for nullable fields.

Every place that substitutes a value for a missing column goes through a
DefaultPolicy, so the defaulting rules are listed here and nowhere else.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from yoda_api.core.config import AutomationConfig

Number = Union[int, float]


@dataclass(frozen=True)
class DefaultPolicy:
    """
    Fallback for a nullable field.

    Attributes:
        field: Column or result name the policy applies to
        fallback: Value used when the field is missing
        zero_is_missing: Treat 0 like NULL
    """
    field: str
    fallback: Number
    zero_is_missing: bool = False

    def apply(self, value: Any) -> Number:
        if value is None:
            return self.fallback
        if self.zero_is_missing and value == 0:
            return self.fallback
        return value

    def from_row(self, row: Optional[Mapping[str, Any]]) -> Number:
        """Apply the policy to `row[field]`, tolerating an absent row."""
        if row is None:
            return self.fallback
        return self.apply(row.get(self.field))


COUNT_DEFAULT = DefaultPolicy(field="count", fallback=0)
REVENUE_DEFAULT = DefaultPolicy(field="revenue", fallback=0)


def estimated_minutes_policy(config: AutomationConfig) -> DefaultPolicy:
    """Unestimated tasks are billed as if they took the default duration."""
    return DefaultPolicy(
        field="estimated_minutes",
        fallback=config.default_estimated_minutes,
        zero_is_missing=True,
    )


def default_policies(config: AutomationConfig) -> Dict[str, DefaultPolicy]:
    """All defaulting rules in force for a given configuration."""
    policies = [COUNT_DEFAULT, REVENUE_DEFAULT, estimated_minutes_policy(config)]
    return {policy.field: policy for policy in policies}


def billable_minutes(task: Mapping[str, Any], config: AutomationConfig) -> Number:
    return estimated_minutes_policy(config).from_row(task)


def task_revenue(task: Mapping[str, Any], config: AutomationConfig) -> float:
    """
    Revenue generated by completing a task.

    Example:
        >>> task_revenue({"estimated_minutes": None}, AutomationConfig())
        225.0
    """
    return float(billable_minutes(task, config)) * config.revenue_rate
