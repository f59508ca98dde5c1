from typing import List, Optional

from pydantic import BaseModel


class SelectionReport(BaseModel):
    anchor: int
    active: int
    start: int
    end: int
    text: str


class StepReport(BaseModel):
    command: str
    selections: List[SelectionReport]
    native: Optional[str] = None


class PathEntry(BaseModel):
    depth: int
    kind: str
    full_start: int
    end: int
    text: str
