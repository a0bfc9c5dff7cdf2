# src/inspector/model.py
from typing import Optional

from pydantic import BaseModel

from inspector.dom.models import PageStructure


class AnalysisResult(BaseModel):
    """
    Outcome of analyzing one source (file path or URL).
    Exactly one of `structure` and `error` is set.
    """
    source: str
    structure: Optional[PageStructure] = None
    outline: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.structure is not None
