import sys

from rules import RuleEngine, RuleEngineError

from .config import configure_logging, get_settings
from .models import Payload
from .sample_rules import age_rule


def main() -> int:
    settings = get_settings()
    configure_logging(settings)

    engine: RuleEngine[Payload] = RuleEngine(settings.max_cycles)
    engine.add_rule(age_rule(), settings.cli_rule_priority)

    raw = input("Enter your age: ")
    try:
        age = int(raw.strip())
    except ValueError:
        print(f"Invalid age: {raw!r}", file=sys.stderr)
        return 1

    payload = Payload(age=age, state="SP")
    try:
        engine.execute(payload)
    except RuleEngineError as e:
        print(f"Rule engine error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Rule failed: {e}", file=sys.stderr)
        return 1

    if payload.age_check:
        print("You are old enough")
    else:
        print("You are not old enough")
    return 0


if __name__ == "__main__":
    sys.exit(main())
