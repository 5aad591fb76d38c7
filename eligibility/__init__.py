"""
Eligibility checks built on the rule engine

This package provides:
- The sample payload (age and state checks)
- Sample rules, including ones that fail or never resolve
- A service wrapping a preconfigured engine
- HTTP and command-line front-ends
"""

from .models import Payload, ExecutionResponse
from .sample_rules import (
    SampleRuleError,
    age_rule,
    state_rule,
    rule_panics_on_when,
    rule_panics_on_then,
    rule_with_no_resolutions,
)
from .service import EligibilityService, build_default_engine

__all__ = [
    "Payload",
    "ExecutionResponse",
    "SampleRuleError",
    "age_rule",
    "state_rule",
    "rule_panics_on_when",
    "rule_panics_on_then",
    "rule_with_no_resolutions",
    "EligibilityService",
    "build_default_engine",
]
