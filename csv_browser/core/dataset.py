from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from csv_browser.core.coercion import CellValue

Row = Dict[str, CellValue]


class Dataset:
    """
    In-memory dataset abstraction used throughout the browser.

    Includes:
    - Ordered rows (mappings column -> typed cell value)
    - The column set, in first-seen order (header order of the first row)
    - A JSON-safe dict form, so the dataset can live in a dcc.Store

    Rows are never mutated after construction; every new upload builds a new Dataset.
    """

    def __init__(
        self,
        rows: Iterable[Mapping[str, CellValue]],
        columns: Optional[Sequence[str]] = None,
        name: Optional[str] = None,
    ) -> None:
        self.rows: List[Row] = [dict(r) for r in rows]
        self.columns: List[str] = (
            list(columns) if columns is not None else self._columns_from_rows(self.rows)
        )
        self.name = name

    @staticmethod
    def _columns_from_rows(rows: Sequence[Mapping[str, Any]]) -> List[str]:
        seen: Dict[str, None] = {}
        for row in rows:
            for key in row:
                seen.setdefault(str(key), None)
        return list(seen)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------
    @classmethod
    def empty(cls, name: Optional[str] = None) -> Dataset:
        return cls(rows=[], columns=[], name=name)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Dataset:
        if not data:
            return cls.empty()
        return cls(
            rows=data.get("rows") or [],
            columns=data.get("columns"),
            name=data.get("name"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "columns": list(self.columns), "rows": self.rows}

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def head(self, n: int) -> List[Row]:
        return self.rows[: max(0, n)]

    def summary(self) -> str:
        return f"{len(self.rows)} rows · {len(self.columns)} columns"

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, rows={len(self.rows)}, columns={self.columns!r})"
