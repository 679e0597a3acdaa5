import re

from services.extraction_rules import Rule, candidates, first_valid


def _is_long(value: str) -> bool:
    return len(value) > 3


def test_first_rule_that_validates_wins():
    rules = [
        Rule("short", re.compile(r"a=(\w+)"), _is_long),
        Rule("second", re.compile(r"b=(\w+)")),
    ]
    assert first_valid("a=xy b=found", rules) == "found"


def test_later_match_of_same_rule_is_tried():
    rules = [Rule("word", re.compile(r"a=(\w+)"), _is_long)]
    assert first_valid("a=no a=yes! a=longer", rules) == "longer"


def test_cleaner_runs_before_validator():
    rules = [Rule("upper", re.compile(r"x=(\S+)"), str.isupper, str.upper)]
    assert first_valid("x=abc", rules) == "ABC"


def test_default_when_nothing_validates():
    rules = [Rule("never", re.compile(r"(\w+)"), lambda v: False)]
    assert first_valid("some text", rules, default="n/a") == "n/a"
    assert first_valid("", rules) == ""


def test_candidates_skip_unmatched_groups():
    rule = Rule("opt", re.compile(r"k(?:=(\w+))?"))
    assert list(candidates("k k=v", rule)) == ["v"]
