"""Data contracts for projection results."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PeriodRecord(BaseModel):
    """Single step of a projection.

    Fields that do not apply to a step (no deposit made, not a compounding
    boundary) are ``None``.
    """

    model_config = ConfigDict(frozen=True)

    depositNum: Optional[int] = Field(default=None, ge=1)
    deposit: Optional[float] = None
    periodNum: Optional[int] = Field(default=None, ge=1)
    periodDeposit: Optional[float] = None
    periodInterest: Optional[float] = None
    totalInterest: float
    totalInvested: float
    currentValue: float
    isYearEnd: bool = False


class ProjectionSummary(BaseModel):
    """Headline figures for a finished projection."""

    algorithm: str
    records: int = Field(..., ge=0)
    deposits: int = Field(..., ge=0)
    finalValue: float
    totalInterest: float
    totalInvested: float


class ProjectionResponse(BaseModel):
    algorithm: str
    periodLabel: str
    summary: ProjectionSummary
    records: List[PeriodRecord]
