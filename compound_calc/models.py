from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from compound_calc.core.frequency import Frequency


class ProjectionConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    initialInvestment: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    regularDepositAmount: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    regularDepositInterval: Frequency = Frequency.MONTHLY
    interestRate: float = Field(default=3.0, allow_inf_nan=False)
    compoundInterval: Frequency = Frequency.MONTHLY
    timeframe: int = Field(default=30, ge=1, le=60)

    # Annualized fallback only: accrue mid-cycle interest at the 13-cycle
    # rate instead of the monthly rate.
    uniformAnnualizedRate: bool = False
