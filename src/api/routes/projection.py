"""Projection routes — the primary API entry point."""

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from fastapi import APIRouter

from src.api.schemas import (
    ProjectionRequest,
    ProjectionResponse,
    PeriodRecordResponse,
    KPIResponse,
    MilestoneRowResponse,
)
from src.config import settings
from src.engine.proforma import run_projection
from src.engine.summary import headline_kpis, milestone_table
from src.models.results import ProjectionResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["projection"])

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")

# Record fields reported as ratios; everything else is money
RATIO_FIELDS = {"irr", "cash_on_cash", "cap_rate", "dscr", "roi", "one_percent_ratio"}


def _round(value: Decimal | None, field: str) -> Decimal | None:
    if value is None:
        return None
    places = FOUR_PLACES if field in RATIO_FIELDS else TWO_PLACES
    try:
        return value.quantize(places, ROUND_HALF_UP)
    except InvalidOperation:
        # Too many digits to round (degenerate IRR); report as computed
        return value


def _result_to_response(result: ProjectionResult, milestone_years: list[int]) -> ProjectionResponse:
    """Convert engine ProjectionResult to API response."""
    yearly = [
        PeriodRecordResponse(
            year=p.year,
            **{
                name: _round(getattr(p, name), name)
                for name in PeriodRecordResponse.model_fields
                if name != "year"
            },
        )
        for p in result.yearly_projections
    ]

    kpis = headline_kpis(result)
    kpi_resp = KPIResponse(
        monthly_cash_flow=_round(kpis["monthly_cash_flow"], "monthly_cash_flow"),
        cash_on_cash=_round(kpis["cash_on_cash"], "cash_on_cash"),
        cap_rate=_round(kpis["cap_rate"], "cap_rate"),
        one_percent_ratio=_round(kpis["one_percent_ratio"], "one_percent_ratio"),
        one_percent_rule=kpis["one_percent_rule"],
    )

    milestones = [
        MilestoneRowResponse(
            label=row["label"],
            metric=row["metric"],
            values=[_round(v, row["metric"]) for v in row["values"]],
        )
        for row in milestone_table(result.yearly_projections, milestone_years)
    ]

    return ProjectionResponse(
        total_cash_invested=_round(result.total_cash_invested, "total_cash_invested"),
        loan_amount=_round(result.loan_amount, "loan_amount"),
        monthly_payment=_round(result.monthly_payment, "monthly_payment"),
        kpis=kpi_resp,
        milestone_years=milestone_years,
        milestones=milestones,
        yearly_projections=yearly,
    )


@router.get("/projection/defaults", response_model=ProjectionRequest)
async def projection_defaults():
    """The calculator's reset values."""
    return ProjectionRequest()


@router.post("/projection", response_model=ProjectionResponse)
def project(req: ProjectionRequest):
    """Raw calculator inputs → 40-year schedule, headline KPIs and milestone table."""
    assumptions = req.to_assumptions()
    logger.info(
        "Projection requested: price=%s rent=%s down=%s%% rate=%s%%",
        req.purchase_price, req.gross_monthly_rent, req.down_payment_pct, req.mortgage_rate,
    )
    result = run_projection(assumptions, years=settings.projection_years)
    return _result_to_response(result, list(settings.summary_years))
