# ABOUTME: Coverage package for roster type-matchup analysis.
# ABOUTME: Contains the aggregator, the defensive classifier, and team summaries.

from typecoverage.coverage.aggregator import compute, own_defense
from typecoverage.coverage.classifier import classify, classify_defense, format_multiplier
from typecoverage.coverage.models import Classification, CoverageResult, HasTypes, TypedEntity
from typecoverage.coverage.summary import (
    MemberMatchup,
    TeamAnalysis,
    TypeVulnerability,
    VulnerabilityStatus,
    analyze_team,
    counter_types,
    coverage_frame,
    coverage_gaps,
    critical_weaknesses,
    member_matchups,
    suggestions,
    summary_line,
    team_vulnerability,
    vulnerability_frame,
)

__all__ = [
    "Classification",
    "CoverageResult",
    "HasTypes",
    "MemberMatchup",
    "TeamAnalysis",
    "TypeVulnerability",
    "TypedEntity",
    "VulnerabilityStatus",
    "analyze_team",
    "classify",
    "classify_defense",
    "compute",
    "counter_types",
    "coverage_frame",
    "coverage_gaps",
    "critical_weaknesses",
    "format_multiplier",
    "member_matchups",
    "own_defense",
    "suggestions",
    "summary_line",
    "team_vulnerability",
    "vulnerability_frame",
]
