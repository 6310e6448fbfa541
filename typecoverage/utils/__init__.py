# ABOUTME: Utils package for typecoverage utility functions.
# ABOUTME: Contains the type enum and the effectiveness table module.

from typecoverage.utils.type_chart import (
    TYPE_CHART,
    EffectivenessTable,
    Type,
    TypeChartError,
    get_effectiveness,
    get_immunities,
    get_neutral,
    get_resistances,
    get_weaknesses,
)

__all__ = [
    "TYPE_CHART",
    "EffectivenessTable",
    "Type",
    "TypeChartError",
    "get_effectiveness",
    "get_immunities",
    "get_neutral",
    "get_resistances",
    "get_weaknesses",
]
