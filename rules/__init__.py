"""
Rules Engine Package

Provides a priority-ordered, forward-chaining rule engine that works over
any caller-defined payload.
"""

from .rule_engine import (
    RuleEngine,
    Rule,
    ExecutionResult,
    RuleEngineError,
    CycleLimitExceededError,
)

__all__ = [
    "RuleEngine",
    "Rule",
    "ExecutionResult",
    "RuleEngineError",
    "CycleLimitExceededError",
]
