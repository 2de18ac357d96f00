"""
Cascade analysis request and response models.

These wrap the engine's CascadeResult with the request envelope consumed
from callers and the timestamped response returned to them.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .enums import Severity
from .network import CascadeResult


class CascadeAnalysisRequest(BaseModel):
    """
    Request to analyze how a disruption spreads through a region.

    Attributes:
        scenario_type: Scenario label, used to infer a default origin
        region: Region whose topology is analyzed
        origin_node: Explicit origin node id; inferred when omitted
        severity: Severity label; unknown or missing values mean "moderate"
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "scenarioType": "supplier_failure",
                "region": "asia",
                "originNode": "supplier-asia-001",
                "severity": "severe",
            }
        },
    )

    scenario_type: str = Field(min_length=1, description="Disruption scenario label")
    region: str = Field(min_length=1, description="Region identifier")
    origin_node: Optional[str] = Field(default=None, description="Origin node id")
    severity: Optional[str] = Field(default=None, description="Severity label")

    @field_validator("scenario_type", "region")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Required labels must carry more than whitespace."""
        if not v.strip():
            raise ValueError("Value must not be blank")
        return v.strip()

    @field_validator("origin_node")
    @classmethod
    def normalize_origin(cls, v: Optional[str]) -> Optional[str]:
        """Treat a blank origin the same as an omitted one."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def parsed_severity(self) -> Severity:
        """Severity normalized to the closed enum."""
        return Severity.parse(self.severity)


class CascadeAnalysisResponse(CascadeResult):
    """CascadeResult stamped with the time the analysis ran (UTC, ISO-8601)."""

    analysis_timestamp: str = Field(description="UTC time of analysis, ISO-8601")


class CascadeSummary(BaseModel):
    """
    Human-oriented digest of a cascade.

    Attributes:
        narrative: One-paragraph description of the cascade
        affected_node_count: Number of affected nodes, origin included
        direct_impacts: Count of direct propagation steps
        indirect_impacts: Count of indirect propagation steps
        cascading_impacts: Count of cascading propagation steps
        max_depth: Deepest hop reached
        critical_path: Node ids along the highest cumulative-magnitude chain
        recommendations: Up to five suggested response actions
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    narrative: str
    affected_node_count: int = Field(ge=0)
    direct_impacts: int = Field(ge=0)
    indirect_impacts: int = Field(ge=0)
    cascading_impacts: int = Field(ge=0)
    max_depth: int = Field(ge=0)
    critical_path: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list, max_length=5)


class CascadeSummaryResponse(CascadeAnalysisResponse):
    """Analysis response with the summary attached."""

    summary: CascadeSummary
