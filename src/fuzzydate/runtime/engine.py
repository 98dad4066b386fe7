"""Pattern matching and conversion engine.

Resolves a pattern string into an ordered list of template rules, then
applies them to the current time:

    "-2d 1h midnight"
        -> "-[int][short_unit] [int][short_unit] midnight"
        -> [-[int][short_unit], -[int][short_unit] (inferred sign), midnight]

Decomposition is greedy: at each step the longest template that is a prefix
of the remaining pattern wins. A template may also match with a sign
prepended to the remaining pattern. The sign is "-" when the whole
expression starts with "-", "prev" or "last", so "-2d 1h" means two days
and one hour back; otherwise it is "+".

Conversion never raises for bad input: any pattern that cannot be fully
decomposed, or any rule that hits an invalid calendar position, yields None.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .context import FuzzyContext, Rules
from .patterns import PATTERN_RULES, PatternRule, placeholder_count

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from datetime import datetime

__all__ = ["convert", "find_pattern_calls"]

logger = logging.getLogger(__name__)

_NEGATIVE_PREFIXES = ("-", "prev", "last")


def convert(
    pattern: str,
    values: Sequence[int],
    current_time: datetime,
    week_start_mon: bool = True,
    custom_patterns: Mapping[str, str] | None = None,
) -> datetime | None:
    """Convert a pattern and its token values into a datetime.

    Args:
        pattern: Pattern string produced by the tokenizer
        values: Token values, in placeholder order
        current_time: Timezone-aware reference time
        week_start_mon: True when weeks start on Monday, False for Sunday
        custom_patterns: Alias template -> built-in template. Aliases whose
            target is not a built-in template are ignored.

    Returns:
        Converted datetime, or None when the pattern is not supported or
        describes an invalid date or time.

    Example:
        >>> from datetime import datetime, timedelta, timezone
        >>> now = datetime(2024, 1, 12, 15, 22, 28, tzinfo=timezone(timedelta(hours=2)))
        >>> convert("yesterday", [], now).isoformat()
        '2024-01-11T00:00:00+02:00'
        >>> convert("+1day", [], now) is None
        True
    """
    calls = find_pattern_calls(pattern, custom_patterns)
    if not calls:
        logger.debug("No pattern decomposition for %r", pattern)
        return None

    rules = Rules(week_start_mon=week_start_mon)
    context = FuzzyContext(current_time)
    cursor = 0

    for template, rule in calls:
        used = placeholder_count(template)
        arguments = values[cursor : cursor + used]
        if len(arguments) < used:
            logger.debug("Pattern %r is missing values for %r", pattern, template)
            return None

        try:
            context = rule(context, arguments, rules)
        except (ValueError, OverflowError) as e:
            logger.debug("Rule %r failed for %r: %s", template, pattern, e)
            return None

        cursor += used

    return context.time


def find_pattern_calls(
    pattern: str,
    custom_patterns: Mapping[str, str] | None = None,
) -> list[tuple[str, PatternRule]]:
    """Decompose a pattern into the templates (and rules) that cover it.

    Matching is case-insensitive.

    Args:
        pattern: Pattern string produced by the tokenizer
        custom_patterns: Alias template -> built-in template

    Returns:
        List of (matched template, rule) in application order. Empty when
        some part of the pattern matches no template.
    """
    table = _build_rule_table(custom_patterns)
    search = pattern.lower()

    exact = table.get(search)
    if exact is not None:
        return [(search, exact)]

    prefix = "-" if search.startswith(_NEGATIVE_PREFIXES) else "+"
    signed_search = prefix + search
    calls: list[tuple[str, PatternRule]] = []

    while search:
        best: str | None = None
        best_consumed = 0

        for template in table:
            if search.startswith(template):
                consumed = len(template)
            elif signed_search.startswith(template):
                consumed = len(template) - len(prefix)
            else:
                continue

            if best is None or (len(template), template) > (len(best), best):
                best = template
                best_consumed = consumed

        if best is None or best_consumed <= 0:
            logger.debug("No template matches %r in %r", search, pattern)
            return []

        calls.append((str(best), table[best]))
        search = search[best_consumed:].lstrip()
        signed_search = prefix + search

    logger.debug("Pattern %r resolved to %s", pattern, [template for template, _ in calls])
    return calls


def _build_rule_table(custom_patterns: Mapping[str, str] | None) -> Mapping[str, PatternRule]:
    if not custom_patterns:
        return PATTERN_RULES

    table: dict[str, PatternRule] = dict(PATTERN_RULES)
    for alias, target in custom_patterns.items():
        rule = PATTERN_RULES.get(target)
        if rule is None:
            logger.debug("Ignoring pattern alias %r: unknown target %r", alias, target)
            continue
        table[alias.lower()] = rule
    return table
