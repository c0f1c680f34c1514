from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

CHART_LINE = "line"
CHART_BAR = "bar"
CHART_PIE = "pie"
CHART_TYPES = (CHART_LINE, CHART_BAR, CHART_PIE)
DEFAULT_CHART_TYPE = CHART_LINE


@dataclass(frozen=True)
class ChartState:
    """
    Represents the current user selection.

    Fields:

    - chart_type: one of "line", "bar", "pie"
    - x_field: column used for the horizontal axis / pie categories ("" until selected)
    - y_field: column used for the values ("" until selected)
    """

    chart_type: str = DEFAULT_CHART_TYPE
    x_field: str = ""
    y_field: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_controls(
        cls,
        chart_type: Optional[str],
        x_field: Optional[str],
        y_field: Optional[str],
    ) -> ChartState:
        # Dash passes None for cleared dropdowns
        return cls(
            chart_type=chart_type or DEFAULT_CHART_TYPE,
            x_field=x_field or "",
            y_field=y_field or "",
        )
