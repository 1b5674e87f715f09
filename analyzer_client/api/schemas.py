from typing import List, Union

from pydantic import BaseModel, Field


class Ratings(BaseModel):
    """Risk/opportunity ratings, each on a 0-10 scale."""

    risk_score: float
    opportunity_score: float


class ClauseBuckets(BaseModel):
    """Clauses grouped by classification."""

    risk: List[str] = Field(description="被判定为风险的条款")
    opportunity: List[str] = Field(description="被判定为机会的条款")
    neutral: List[str] = Field(description="中性条款")


class AnalysisResult(BaseModel):
    """Combined analysis returned by ``POST /upload-documents/``."""

    summary: List[str]
    ratings: Ratings
    clauses: ClauseBuckets
    anomalies: List[str]


class LogEntry(BaseModel):
    """One request/response record returned by ``GET /logs/``."""

    id: Union[int, str]
    request: str
    response: str
    timestamp: str
