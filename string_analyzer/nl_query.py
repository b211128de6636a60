"""
Natural language to filter translation.

Best-effort pattern matching, not language understanding. The query is
lower-cased and checked against every rule in ``RULES`` in order; each
matching rule contributes filters, and a later rule overwrites an earlier
one targeting the same key.

Examples:
- "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
- "strings longer than 10 characters" -> {min_length: 11}
- "strings containing the letter z" -> {contains_character: "z"}
- "strings with the first vowel" -> {contains_character: "a"}
"""
import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from string_analyzer.errors import QueryParseError
from string_analyzer.filters import FilterSet

logger = logging.getLogger(__name__)


def _first_group(match: re.Match) -> str:
    return next(group for group in match.groups() if group is not None)


@dataclass(frozen=True)
class Rule:
    """A pattern paired with the filters it produces when it matches."""
    name: str
    pattern: re.Pattern
    produce: Callable[[re.Match], FilterSet]
    # rule is skipped when an earlier rule already set this key
    unless: Optional[str] = None

    def apply(self, query: str, filters: FilterSet) -> Optional[FilterSet]:
        if self.unless is not None and self.unless in filters:
            return None
        match = self.pattern.search(query)
        if match is None:
            return None
        return self.produce(match)


def _vowel_rule(ordinal: str, vowel: str) -> Rule:
    return Rule(
        name=f"{ordinal}_vowel",
        pattern=re.compile(rf"{ordinal} vowel"),
        produce=lambda m: {"contains_character": vowel},
    )


RULES: Sequence[Rule] = (
    Rule(
        name="palindrome",
        pattern=re.compile(r"palindrom"),
        produce=lambda m: {"is_palindrome": True},
    ),
    Rule(
        name="single_word",
        pattern=re.compile(r"single word|one word"),
        produce=lambda m: {"word_count": 1},
    ),
    Rule(
        name="two_words",
        pattern=re.compile(r"two word|double word"),
        produce=lambda m: {"word_count": 2},
    ),
    Rule(
        name="longer_than",
        pattern=re.compile(r"longer than (\d+)|more than (\d+) character"),
        produce=lambda m: {"min_length": int(_first_group(m)) + 1},
    ),
    Rule(
        name="shorter_than",
        pattern=re.compile(r"shorter than (\d+)|less than (\d+) character"),
        produce=lambda m: {"max_length": int(_first_group(m)) - 1},
    ),
    Rule(
        name="at_least",
        pattern=re.compile(r"at least (\d+) character"),
        produce=lambda m: {"min_length": int(m.group(1))},
    ),
    Rule(
        name="letter",
        pattern=re.compile(
            r"contain(?:ing|s)?\s+(?:the\s+)?letter\s+([a-z])"
            r"|with\s+(?:the\s+)?letter\s+([a-z])"
        ),
        produce=lambda m: {"contains_character": _first_group(m)},
    ),
    Rule(
        name="trailing_letter",
        pattern=re.compile(r"contain(?:ing|s)?\s+([a-z])\Z"),
        produce=lambda m: {"contains_character": m.group(1)},
        unless="contains_character",
    ),
    _vowel_rule("first", "a"),
    _vowel_rule("second", "e"),
    _vowel_rule("third", "i"),
    _vowel_rule("fourth", "o"),
    _vowel_rule("fifth", "u"),
)


def translate(query: str, rules: Sequence[Rule] = RULES) -> FilterSet:
    """Translate a free-text query into a filter set; empty when nothing matched."""
    lowered = query.lower()
    filters: Dict = {}
    for rule in rules:
        produced = rule.apply(lowered, filters)
        if produced:
            logger.debug(f"Rule {rule.name!r} matched {query!r}: {produced}")
            filters.update(produced)
    return filters


def parse_natural_language_query(query: str) -> FilterSet:
    """Translate a query, raising QueryParseError when no rule recognized it."""
    filters = translate(query)
    if not filters:
        logger.info(f"Unable to parse natural language query: {query!r}")
        raise QueryParseError("Unable to parse natural language query")
    return filters
