from typing import Any, Dict, List

import pandas as pd
from pydantic import BaseModel, Field


class ReportResult(BaseModel):
    """Decoded report response and its table of rows."""

    body: Dict[str, Any]
    rows: List[List[str]] = Field(default_factory=list)

    @property
    def column_names(self) -> List[str]:
        return [h.get("name", "") for h in self.body.get("columnHeaders") or []]

    def to_dataframe(self) -> pd.DataFrame:
        """Build a DataFrame from the rows, using the column headers when they fit."""
        headers = self.column_names
        width = max([len(headers)] + [len(r) for r in self.rows])

        # Align columns
        aligned = [r + [""] * (width - len(r)) for r in self.rows]

        if headers and len(headers) == width:
            return pd.DataFrame(aligned, columns=headers)
        return pd.DataFrame(aligned)
