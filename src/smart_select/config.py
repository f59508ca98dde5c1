from typing import Dict, Optional

from pydantic import BaseModel, Field

from .mapper import TEMPLATE_LITERAL_ADJUSTMENTS, AdjustmentTable
from .models import GrowthMode

DEFAULT_MAX_STEPS = 100


class EngineConfig(BaseModel):
    max_steps: int = Field(default=DEFAULT_MAX_STEPS, ge=1)
    trim_template_delimiters: bool = False
    native_fallback_on_empty: bool = True
    default_mode: GrowthMode = GrowthMode.STRUCTURAL
    languages: Dict[str, GrowthMode] = Field(default_factory=dict)

    def boundary_adjustments(self) -> Optional[AdjustmentTable]:
        return TEMPLATE_LITERAL_ADJUSTMENTS if self.trim_template_delimiters else None
