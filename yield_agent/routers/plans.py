"""Plan endpoints for the Yield Agent FastAPI backend."""

from __future__ import annotations

from fastapi import APIRouter

from ..agent import run_earnings_agent
from ..report import build_export
from ..schemas import (
    AgentResponse,
    Asset,
    OptionDefinition,
    OptionsResponse,
    PlanExport,
    Preference,
    ProfileRequest,
    RiskTolerance,
)


router = APIRouter(prefix="/agent", tags=["agent"])

RISK_LABELS = {
    RiskTolerance.LOW: "Low - prefer predictable returns",
    RiskTolerance.MEDIUM: "Medium - balanced risk & upside",
    RiskTolerance.HIGH: "High - comfortable with volatility",
}

PREFERENCE_LABELS = {
    Preference.SERVICE: "Service",
    Preference.PRODUCT: "Product",
    Preference.AUTOMATION: "Automation",
    Preference.SAAS: "SaaS",
    Preference.CONTENT: "Content",
}


@router.get("/health")
async def healthcheck() -> dict[str, str]:
    """Simple health check endpoint."""

    return {"status": "ok"}


@router.get("/options", response_model=OptionsResponse)
async def list_options() -> OptionsResponse:
    """Expose the form vocabularies to the UI."""

    return OptionsResponse(
        risk_tolerances=[OptionDefinition(value=risk.value, label=RISK_LABELS[risk]) for risk in RiskTolerance],
        assets=[OptionDefinition(value=asset.value, label=asset.value) for asset in Asset],
        preferences=[OptionDefinition(value=pref.value, label=PREFERENCE_LABELS[pref]) for pref in Preference],
    )


@router.post("/plan", response_model=AgentResponse)
async def create_plan(payload: ProfileRequest) -> AgentResponse:
    """Compute a fresh plan for the submitted profile."""

    return run_earnings_agent(payload)


@router.post("/plan/export", response_model=PlanExport)
async def export_plan(payload: ProfileRequest) -> PlanExport:
    """Compute a plan and return it with markdown and revenue totals."""

    return build_export(run_earnings_agent(payload))
