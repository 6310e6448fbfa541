# ABOUTME: Classifies defensive multipliers into Resist / Neutral / Weak buckets.
# ABOUTME: Also formats multipliers for display ("1/2", "2x", ...).

from typecoverage.coverage.models import Classification, CoverageResult
from typecoverage.utils.type_chart import NEUTRAL_VALUE, SUPER_EFFECTIVE_THRESHOLD

_MULTIPLIER_LABELS: dict[float, str] = {
    0.0: "0x",
    0.25: "1/4",
    0.5: "1/2",
    1.0: "1x",
    2.0: "2x",
    4.0: "4x",
}


def classify(multiplier: float) -> Classification:
    """Bucket a defensive multiplier.

    >= 2 is Weak, >= 1 is Neutral, anything lower is Resist. Total over all
    floats, including 4x and 1/4 from dual types.
    """
    if multiplier >= SUPER_EFFECTIVE_THRESHOLD:
        return Classification.WEAK
    if multiplier >= NEUTRAL_VALUE:
        return Classification.NEUTRAL
    return Classification.RESIST


def classify_defense(result: CoverageResult) -> tuple[Classification, ...]:
    """Classify every entry of the defensive vector, in type ordinal order."""
    return tuple(classify(m) for m in result.defensive)


def format_multiplier(multiplier: float) -> str:
    return _MULTIPLIER_LABELS.get(multiplier, f"{multiplier:g}x")
