# ABOUTME: Team-level summaries built on top of the coverage vectors.
# ABOUTME: Per-member matchups, team vulnerability, critical weaknesses, coverage gaps, and suggestions.

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

import polars as pl

from typecoverage.coverage.aggregator import compute, own_defense
from typecoverage.coverage.classifier import classify, classify_defense
from typecoverage.coverage.models import Classification, CoverageResult, HasTypes, typing_label
from typecoverage.settings import settings
from typecoverage.utils.type_chart import (
    IMMUNITY_VALUE,
    NEUTRAL_VALUE,
    SUPER_EFFECTIVE_THRESHOLD,
    TYPE_CHART,
    TYPES,
    EffectivenessTable,
    Type,
)

logger = logging.getLogger(__name__)

# Weak members needed before an attacking type counts as a moderate team weakness
MODERATE_WEAKNESS_COUNT = 2

# Number of coverage gaps that get a suggestion line
MAX_GAP_SUGGESTIONS = 3


class VulnerabilityStatus(Enum):
    """Team-wide status for one attacking type, in precedence order."""

    IMMUNE = "immune"
    CRITICAL = "critical"
    MODERATE = "moderate"
    GOOD = "good"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class MemberMatchup:
    """One roster member's defensive row.

    Attributes:
        name: Member label, None when the member carries no name.
        type1: Primary type.
        type2: Secondary type (equal to type1 for single types).
        defensive: Multiplier taken from each attacking type, by ordinal.
    """

    name: str | None
    type1: Type
    type2: Type
    defensive: tuple[float, ...]

    def label(self) -> str:
        return typing_label(self.type1, self.type2, self.name)


@dataclass(frozen=True)
class TypeVulnerability:
    """How many members are weak, resistant, or immune to one attacking type."""

    attack_type: Type
    weak_count: int
    resist_count: int
    immune_count: int
    status: VulnerabilityStatus


@dataclass(frozen=True)
class TeamAnalysis:
    """Everything derived from one roster."""

    coverage: CoverageResult
    classifications: tuple[Classification, ...]
    members: tuple[MemberMatchup, ...]
    vulnerabilities: tuple[TypeVulnerability, ...]
    critical_weaknesses: tuple[Type, ...]
    coverage_gaps: tuple[Type, ...]
    suggestions: tuple[str, ...]
    summary: str


def member_matchups(roster: Iterable[HasTypes], table: EffectivenessTable = TYPE_CHART) -> list[MemberMatchup]:
    """Build the per-member defensive rows."""
    rows: list[MemberMatchup] = []
    for member in roster:
        type1, type2 = member.has_types()
        rows.append(
            MemberMatchup(
                name=getattr(member, "name", None),
                type1=type1,
                type2=type2,
                defensive=tuple(own_defense(attack, type1, type2, table) for attack in TYPES),
            )
        )
    return rows


def _vulnerability_status(
    weak_count: int,
    resist_count: int,
    immune_count: int,
    roster_size: int,
    threshold: int,
) -> VulnerabilityStatus:
    if immune_count > 0:
        return VulnerabilityStatus.IMMUNE
    if weak_count >= threshold:
        return VulnerabilityStatus.CRITICAL
    if weak_count >= MODERATE_WEAKNESS_COUNT:
        return VulnerabilityStatus.MODERATE
    if resist_count > 0 and resist_count >= roster_size // 2:
        return VulnerabilityStatus.GOOD
    return VulnerabilityStatus.NEUTRAL


def team_vulnerability(
    members: Sequence[MemberMatchup],
    threshold: int | None = None,
) -> list[TypeVulnerability]:
    """Count weak / resistant / immune members per attacking type.

    Args:
        members: Per-member rows from member_matchups().
        threshold: Weak members needed for CRITICAL. Defaults to settings.

    Returns:
        One TypeVulnerability per attacking type, in ordinal order.
    """
    if threshold is None:
        threshold = settings.CRITICAL_WEAKNESS_THRESHOLD

    result: list[TypeVulnerability] = []
    for attack in TYPES:
        values = [m.defensive[attack.index] for m in members]
        weak = sum(1 for v in values if v > NEUTRAL_VALUE)
        resist = sum(1 for v in values if IMMUNITY_VALUE < v < NEUTRAL_VALUE)
        immune = sum(1 for v in values if v == IMMUNITY_VALUE)
        result.append(
            TypeVulnerability(
                attack_type=attack,
                weak_count=weak,
                resist_count=resist,
                immune_count=immune,
                status=_vulnerability_status(weak, resist, immune, len(members), threshold),
            )
        )
    return result


def critical_weaknesses(vulnerabilities: Iterable[TypeVulnerability], threshold: int | None = None) -> list[Type]:
    """Attacking types that hit at least `threshold` members super effectively, most members first."""
    if threshold is None:
        threshold = settings.CRITICAL_WEAKNESS_THRESHOLD

    hits = [v for v in vulnerabilities if v.weak_count >= threshold]
    # sorted() is stable, so ties keep ordinal order
    return [v.attack_type for v in sorted(hits, key=lambda v: v.weak_count, reverse=True)]


def coverage_gaps(result: CoverageResult) -> list[Type]:
    """Defending types no member hits super effectively. An empty roster has no gaps."""
    if result.is_empty:
        return []
    return [t for t in TYPES if result.offensive_against(t) < SUPER_EFFECTIVE_THRESHOLD]


def counter_types(defend: Type, table: EffectivenessTable = TYPE_CHART) -> list[Type]:
    """Attacking types that hit `defend` for 2x or more, in ordinal order."""
    return [attack for attack in TYPES if table.multiplier(attack, defend) >= SUPER_EFFECTIVE_THRESHOLD]


def suggestions(
    critical: Sequence[Type],
    gaps: Sequence[Type],
    table: EffectivenessTable = TYPE_CHART,
) -> list[str]:
    """Human-readable advice for critical weaknesses and the first few coverage gaps."""
    lines = [f"Consider adding a {t}-resistant member to cover your {t} weakness." for t in critical]

    for gap in gaps[:MAX_GAP_SUGGESTIONS]:
        counters = counter_types(gap, table)
        line = f"Your team lacks super-effective coverage against {gap}-types."
        if counters:
            names = "/".join(str(t) for t in counters)
            line += f" Consider adding a {names}-type attacker."
        lines.append(line)

    return lines


def summary_line(roster_size: int, critical: Sequence[Type], gaps: Sequence[Type]) -> str:
    return f"Team: {roster_size} members | Critical Weaknesses: {len(critical)} | Coverage Gaps: {len(gaps)}"


def analyze_team(
    roster: Iterable[HasTypes],
    table: EffectivenessTable = TYPE_CHART,
    threshold: int | None = None,
) -> TeamAnalysis:
    """Run the full analysis for a roster.

    Args:
        roster: Ordered members exposing has_types().
        table: Effectiveness table to read from.
        threshold: Weak members needed for a critical weakness. Defaults to settings.

    Returns:
        TeamAnalysis bundling coverage vectors, labels, per-member rows,
        vulnerabilities, critical weaknesses, gaps, suggestions, and summary.
    """
    members_in = list(roster)
    coverage = compute(members_in, table)
    members = member_matchups(members_in, table)
    vulnerabilities = team_vulnerability(members, threshold)
    critical = critical_weaknesses(vulnerabilities, threshold)
    gaps = coverage_gaps(coverage)

    logger.info(
        "Analyzed roster of %d: %d critical weaknesses, %d coverage gaps",
        coverage.roster_size,
        len(critical),
        len(gaps),
    )

    return TeamAnalysis(
        coverage=coverage,
        classifications=classify_defense(coverage),
        members=tuple(members),
        vulnerabilities=tuple(vulnerabilities),
        critical_weaknesses=tuple(critical),
        coverage_gaps=tuple(gaps),
        suggestions=tuple(suggestions(critical, gaps, table)),
        summary=summary_line(coverage.roster_size, critical, gaps),
    )


def coverage_frame(result: CoverageResult) -> pl.DataFrame:
    """Coverage vectors as a DataFrame.

    Returns:
        DataFrame with columns: type, offensive, defensive, classification
        One row per type in ordinal order.
    """
    return pl.DataFrame(
        {
            "type": [t.display_name for t in TYPES],
            "offensive": list(result.offensive),
            "defensive": list(result.defensive),
            "classification": [classify(m).value for m in result.defensive],
        },
        schema={
            "type": pl.String,
            "offensive": pl.Float64,
            "defensive": pl.Float64,
            "classification": pl.String,
        },
    )


def vulnerability_frame(vulnerabilities: Sequence[TypeVulnerability]) -> pl.DataFrame:
    """Team vulnerability as a DataFrame.

    Returns:
        DataFrame with columns: type, weak_count, resist_count, immune_count, status
    """
    return pl.DataFrame(
        {
            "type": [v.attack_type.display_name for v in vulnerabilities],
            "weak_count": [v.weak_count for v in vulnerabilities],
            "resist_count": [v.resist_count for v in vulnerabilities],
            "immune_count": [v.immune_count for v in vulnerabilities],
            "status": [v.status.value for v in vulnerabilities],
        },
        schema={
            "type": pl.String,
            "weak_count": pl.Int64,
            "resist_count": pl.Int64,
            "immune_count": pl.Int64,
            "status": pl.String,
        },
    )
