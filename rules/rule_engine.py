import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

P = TypeVar("P")

Condition = Callable[[P], bool]
Action = Callable[[P], None]


class RuleEngineError(Exception):
    pass


class CycleLimitExceededError(RuleEngineError):
    def __init__(self, max_cycles: int, fired: list[str]):
        self.max_cycles = max_cycles
        self.fired = fired
        super().__init__(f"max cycle of {max_cycles} reached")


@dataclass(eq=False)
class Rule(Generic[P]):
    """A named condition/action pair.

    The priority stays 0 until the rule is registered with an engine.
    """
    name: str
    condition: Condition
    action: Action
    priority: int = 0

    def applies(self, payload: P) -> bool:
        return self.condition(payload)

    def apply(self, payload: P) -> None:
        self.action(payload)


@dataclass
class ExecutionResult:
    cycles: int
    fired: list[str] = field(default_factory=list)
    duration_ms: float = 0.0


class RuleEngine(Generic[P]):
    """Forward-chaining engine over an arbitrary payload.

    Each cycle scans every rule in priority order, fires only the first
    runnable one and scans again, until nothing is runnable or more than
    ``max_cycles`` actions would have fired.

    The registry is not locked: finish registering rules before calling
    ``execute`` from several threads.
    """

    def __init__(self, max_cycles: int = 100):
        if max_cycles < 0:
            raise ValueError("max_cycles must be non-negative")
        self.max_cycles = max_cycles
        self._rules: list[Rule[P]] = []

    def add_rule(self, rule: Rule[P], priority: int) -> None:
        rule.priority = priority
        logger.info("adding rule name=%s priority=%d", rule.name, priority)
        self._rules.append(rule)
        # list.sort is stable, equal priorities keep registration order
        self._rules.sort(key=lambda r: r.priority, reverse=True)

    def list_rules(self) -> list[Rule[P]]:
        return list(self._rules)

    @property
    def rules(self) -> list[Rule[P]]:
        return self.list_rules()

    def execute(self, payload: P) -> ExecutionResult:
        """Run rules against ``payload`` until quiescence.

        Raises CycleLimitExceededError when the ceiling is hit. Exceptions
        raised by a condition or an action propagate unchanged.
        """
        logger.info("starting rule execution rule_count=%d", len(self._rules))
        started = time.perf_counter()
        cycle = 0
        fired: list[str] = []

        while True:
            logger.debug("inside cycle=%d", cycle)
            runnable = self._runnable(payload, cycle + 1)
            logger.info("selected rules count=%d", len(runnable))

            if not runnable:
                logger.info("no more rules to run")
                break

            cycle += 1
            if cycle > self.max_cycles:
                logger.error("max cycle reached max_cycles=%d", self.max_cycles)
                raise CycleLimitExceededError(self.max_cycles, list(fired))

            runner = runnable[0]
            logger.info("executing rule name=%s cycle=%d", runner.name, cycle)
            try:
                runner.apply(payload)
            except Exception:
                logger.error("rule action failed name=%s cycle=%d", runner.name, cycle)
                raise
            fired.append(runner.name)

        duration_ms = (time.perf_counter() - started) * 1000
        logger.info("finished rules execution cycles=%d duration_ms=%.3f", cycle, duration_ms)
        return ExecutionResult(cycles=cycle, fired=fired, duration_ms=duration_ms)

    def _runnable(self, payload: P, cycle: int) -> list[Rule[P]]:
        runnable = []
        for rule in self._rules:
            try:
                can = rule.applies(payload)
            except Exception:
                logger.error("rule condition failed name=%s cycle=%d", rule.name, cycle)
                raise
            if can:
                runnable.append(rule)
                logger.debug("rule is runnable name=%s", rule.name)
            else:
                logger.debug("rule is not runnable name=%s", rule.name)
        return runnable
