import logging
from typing import Optional

from rules import RuleEngine

from .config import Settings, get_settings
from .models import Payload, ExecutionResponse
from .sample_rules import age_rule, state_rule

logger = logging.getLogger(__name__)


def build_default_engine(settings: Optional[Settings] = None) -> RuleEngine[Payload]:
    settings = settings or get_settings()
    engine: RuleEngine[Payload] = RuleEngine(settings.max_cycles)
    engine.add_rule(age_rule(), settings.age_rule_priority)
    engine.add_rule(state_rule(), settings.state_rule_priority)
    return engine


class EligibilityService:
    def __init__(self, engine: Optional[RuleEngine[Payload]] = None, settings: Optional[Settings] = None):
        self.engine = engine or build_default_engine(settings)

    def execute(self, payload: Payload) -> ExecutionResponse:
        """Run the engine on ``payload`` in place.

        Engine errors and failures raised by rules propagate to the caller;
        the payload keeps whatever changes fired before the failure.
        """
        result = self.engine.execute(payload)
        logger.info("payload evaluated cycles=%d fired=%s", result.cycles, result.fired)
        return ExecutionResponse(payload=payload, cycles=result.cycles, fired=result.fired)
