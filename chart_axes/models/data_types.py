"""
Data types for cartesian axis layout.

Provides type-safe containers for:
- Extent / AxisRange: numeric span of a series and resolved axis bounds
- ColumnInfo / DimensionModel: where the X value comes from
- ChartModel: read-only input of a layout pass
- AxesFormatters: label formatters per axis slot
- FontStyle: font passed to the text measurer
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, TypedDict


Extent = Tuple[float, float]
AxisFormatter = Callable[[Any], str]

NUMERIC_BASE_TYPES = (
    "type/Number",
    "type/Integer",
    "type/BigInteger",
    "type/Float",
    "type/Decimal",
)
KEY_SEMANTIC_TYPES = ("type/PK", "type/FK")


# ==================== EXCEPTIONS ====================

class ChartLayoutError(Exception):
    """Base exception for chart layout input failures"""
    pass


class InvalidChartModelError(ChartLayoutError):
    """Raised when a chart model payload is malformed"""
    pass


# ==================== TYPES ====================

class AxisRange(TypedDict, total=False):
    """Resolved metric axis bounds; a missing bound is left to the renderer."""

    min: float
    max: float


@dataclass(frozen=True)
class FontStyle:
    """Font used to measure rendered text."""

    size: int
    weight: int
    family: str


@dataclass(frozen=True)
class ColumnInfo:
    """Column metadata for the dimension."""

    name: str
    base_type: str = "type/Text"
    semantic_type: Optional[str] = None

    @property
    def is_numeric(self) -> bool:
        """Numeric base type that is not a primary or foreign key."""
        return (
            self.base_type in NUMERIC_BASE_TYPES
            and self.semantic_type not in KEY_SEMANTIC_TYPES
        )

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ColumnInfo":
        """Create from dictionary."""
        if not isinstance(d, Mapping):
            raise InvalidChartModelError(f"dimension column must be an object, got {d!r}")
        return cls(
            name=str(d.get("name", "")),
            base_type=d.get("base_type", "type/Text"),
            semantic_type=d.get("semantic_type"),
        )


@dataclass(frozen=True)
class DimensionModel:
    """Identifies the dataset key supplying X values."""

    data_key: str
    column: ColumnInfo

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "DimensionModel":
        """Create from dictionary."""
        if not isinstance(d, Mapping):
            raise InvalidChartModelError(f"dimension must be an object, got {d!r}")
        column = ColumnInfo.from_dict(d.get("column") or {})
        return cls(data_key=str(d.get("data_key", column.name)), column=column)


@dataclass(frozen=True)
class AxesFormatters:
    """Tick label formatters; a missing Y formatter marks the slot unused."""

    bottom: AxisFormatter
    left: Optional[AxisFormatter] = None
    right: Optional[AxisFormatter] = None


def _parse_extent(raw: Any, slot: str) -> Optional[Extent]:
    if raw is None:
        return None
    if not isinstance(raw, Sequence) or isinstance(raw, str) or len(raw) != 2:
        raise InvalidChartModelError(f"{slot} extent must be a [min, max] pair, got {raw!r}")
    try:
        low, high = float(raw[0]), float(raw[1])
    except (TypeError, ValueError) as exc:
        raise InvalidChartModelError(f"{slot} extent is not numeric: {raw!r}") from exc
    if not (math.isfinite(low) and math.isfinite(high)):
        raise InvalidChartModelError(f"{slot} extent must be finite: {raw!r}")
    if low > high:
        raise InvalidChartModelError(f"{slot} extent min {low} exceeds max {high}")
    return (low, high)


@dataclass(frozen=True)
class ChartModel:
    """Computed chart data, immutable for the duration of a layout pass."""

    dataset: Tuple[Mapping[str, Any], ...]
    dimension_model: DimensionModel
    y_axis_extents: Tuple[Optional[Extent], Optional[Extent]] = (None, None)

    @property
    def dimension_values(self) -> Tuple[Any, ...]:
        """X value of every row, in dataset order."""
        key = self.dimension_model.data_key
        return tuple(row.get(key) for row in self.dataset)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ChartModel":
        """
        Create from dictionary.

        Raises:
            InvalidChartModelError: If extents, rows or the dimension are malformed
        """
        if not isinstance(d, Mapping):
            raise InvalidChartModelError("chart payload must be an object")

        rows = d.get("dataset", [])
        if not isinstance(rows, Sequence) or isinstance(rows, str):
            raise InvalidChartModelError("dataset must be a list of rows")
        if any(not isinstance(row, Mapping) for row in rows):
            raise InvalidChartModelError("every dataset row must be an object")

        extents = d.get("y_axis_extents") or [None, None]
        if not isinstance(extents, Sequence) or len(extents) != 2:
            raise InvalidChartModelError("y_axis_extents must hold a left and a right entry")

        return cls(
            dataset=tuple(rows),
            dimension_model=DimensionModel.from_dict(d.get("dimension") or {}),
            y_axis_extents=(
                _parse_extent(extents[0], "left"),
                _parse_extent(extents[1], "right"),
            ),
        )
