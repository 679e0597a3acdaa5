"""Ordered extraction rules and the driver that picks the first valid match.

Each field extractor is a list of ``Rule`` records tried in priority order.
Every match of a rule's pattern is cleaned and validated in turn; the first
candidate that validates is the field value.
"""

import logging
import re
from collections.abc import Callable, Iterable
from typing import NamedTuple

logger = logging.getLogger(__name__)


def _strip(value: str) -> str:
    return value.strip()


def _accept(value: str) -> bool:
    return bool(value)


class Rule(NamedTuple):
    """One pattern plus how to turn a match into a field value."""
    name: str
    pattern: re.Pattern
    validator: Callable[[str], bool] = _accept
    cleaner: Callable[[str], str] = _strip
    group: int = 1


def candidates(text: str, rule: Rule) -> Iterable[str]:
    """Yield cleaned captures of ``rule`` over ``text``, left to right."""
    for match in rule.pattern.finditer(text):
        raw = match.group(rule.group)
        if raw is None:
            continue
        yield rule.cleaner(raw)


def first_valid(text: str, rules: Iterable[Rule], default: str = "") -> str:
    """Return the first cleaned capture that passes its rule's validator."""
    for rule in rules:
        for value in candidates(text, rule):
            if rule.validator(value):
                logger.debug("Rule %s matched %r", rule.name, value)
                return value
    return default
