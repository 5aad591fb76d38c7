from rules import Rule

from .models import Payload


class SampleRuleError(RuntimeError):
    pass


def age_rule() -> Rule[Payload]:
    def condition(payload: Payload) -> bool:
        return not payload.age_check and payload.age > 18

    def action(payload: Payload) -> None:
        payload.age_check = True

    return Rule("Age > 18", condition, action)


def state_rule() -> Rule[Payload]:
    def condition(payload: Payload) -> bool:
        return not payload.state_check and payload.state != ""

    def action(payload: Payload) -> None:
        payload.state_check = True

    return Rule("State is not empty", condition, action)


def rule_panics_on_when() -> Rule[Payload]:
    def condition(payload: Payload) -> bool:
        if payload.panics_on_when:
            raise SampleRuleError("RulePanicsOnWhen")
        return False

    return Rule("RulePanicsOnWhen", condition, lambda payload: None)


def rule_panics_on_then() -> Rule[Payload]:
    def action(payload: Payload) -> None:
        raise SampleRuleError("RulePanicsOnThen")

    return Rule("RulePanicsOnThen", lambda payload: payload.panics_on_then, action)


def rule_with_no_resolutions() -> Rule[Payload]:
    # always runnable and never changes the payload
    return Rule("RuleWithNoResolutions", lambda payload: True, lambda payload: None)
