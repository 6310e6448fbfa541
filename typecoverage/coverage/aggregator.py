# ABOUTME: Coverage aggregator folding a roster into offensive and defensive vectors.
# ABOUTME: Offense takes the max over a member's types; defense takes their product.

import logging
from collections.abc import Iterable

from typecoverage.coverage.models import CoverageResult, HasTypes
from typecoverage.utils.type_chart import TYPE_CHART, TYPES, EffectivenessTable, Type, get_effectiveness

logger = logging.getLogger(__name__)


def own_defense(attack: Type, type1: Type, type2: Type, table: EffectivenessTable = TYPE_CHART) -> float:
    """Multiplier a single member takes from `attack`.

    Dual types compose multiplicatively; a single-typed member (type1 == type2)
    applies its multiplier once, never squared.
    """
    return get_effectiveness(attack, type1, type2, table)


def compute(roster: Iterable[HasTypes], table: EffectivenessTable = TYPE_CHART) -> CoverageResult:
    """Compute offensive coverage and defensive weakness for a roster.

    Args:
        roster: Ordered members exposing has_types(). May be empty.
        table: Effectiveness table to read from.

    Returns:
        CoverageResult where offensive[d] is the best multiplier any member lands
        on defending type d, and defensive[a] is the worst multiplier any member
        takes from attacking type a. An empty roster yields all zeros with
        roster_size == 0.
    """
    offensive = [0.0] * len(TYPES)
    defensive = [0.0] * len(TYPES)
    size = 0

    for member in roster:
        type1, type2 = member.has_types()
        size += 1

        for defend in TYPES:
            best = table.multiplier(type1, defend)
            if type2 != type1:
                best = max(best, table.multiplier(type2, defend))
            offensive[defend.index] = max(offensive[defend.index], best)

        for attack in TYPES:
            defensive[attack.index] = max(defensive[attack.index], own_defense(attack, type1, type2, table))

    logger.debug("Computed coverage for %d roster members", size)

    return CoverageResult(offensive=tuple(offensive), defensive=tuple(defensive), roster_size=size)
