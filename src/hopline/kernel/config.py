from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TrampolineConfig(BaseModel):
    """Runtime options for the trampoline evaluator.

    None of these options bound the number of iterations.
    """

    model_config = ConfigDict(frozen=True)

    log_every: int = Field(default=0, ge=0)  # 0 disables progress records
    logger_name: str = "hopline.trampoline"


DEFAULT_CONFIG = TrampolineConfig()
