"""Validation of machine definitions."""
from mealy.config import Config
from mealy.machine import Wildcard, MachineDefinition
from mealy.text_utils import join_comma_or


class ValidationError(Exception):
    """Class for errors raised to indicate invalid configuration."""
    pass


def validate_config(config: Config):
    """Validate that every machine in a config satisfies invariants."""
    for definition in config.machines.values():
        validate_definition(definition)


def validate_definition(definition: MachineDefinition):
    """
    Validate that a given definition is internally consistent.

    This is never run by the engine itself, which accepts shadowed and
    duplicated rules and simply fires the first match.
    """
    _validate_unique_labels(definition)
    _validate_no_rules_after_wildcard(definition)


def _validate_unique_labels(definition):
    for state, rules in definition.transitions.items():
        duplicates = []
        for idx, rule in enumerate(rules):
            label = str(rule.label)
            if (
                any(x.label == rule.label for x in rules[:idx]) and
                label not in duplicates
            ):
                duplicates.append(label)

        if duplicates:
            raise ValidationError(
                f"Labels {join_comma_or(duplicates)} are declared more than "
                f"once for state {state!r} in {definition.name}",
            )


def _validate_no_rules_after_wildcard(definition):
    for state, rules in definition.transitions.items():
        for idx, rule in enumerate(rules[:-1]):
            if isinstance(rule.label, Wildcard):
                shadowed = [str(x.label) for x in rules[idx + 1:]]
                raise ValidationError(
                    f"Rules for {join_comma_or(shadowed)} in state "
                    f"{state!r} of {definition.name} can never fire, they "
                    f"follow a wildcard",
                )
