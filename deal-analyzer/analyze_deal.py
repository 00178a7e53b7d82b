"""CLI client for the Rental Projection API — posts a deal and prints a terminal report.

Usage:
    python deal-analyzer/analyze_deal.py
    python deal-analyzer/analyze_deal.py --price 250,000 --rent 2200 --down 25 --rate 6.5
    python deal-analyzer/analyze_deal.py --down 100 --schedule
"""

import argparse
import asyncio
import sys

import httpx


# ── Helpers ──────────────────────────────────────────────────────────────────

def _pct(v) -> str:
    """Format a decimal/float as a percentage string."""
    return f"{float(v) * 100:.2f}%"


def _dollar(v) -> str:
    return f"${float(v):,.0f}"


def _dec(v) -> str:
    return f"{float(v):.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


# Display format per milestone metric
METRIC_FORMATS = {
    "irr": _pct,
    "cash_flow": _dollar,
    "cash_on_cash": _pct,
    "cap_rate": _pct,
    "dscr": _dec,
    "principal": _dollar,
    "roi": _pct,
    "profit_if_sold": _dollar,
}


# ── Report sections ──────────────────────────────────────────────────────────

def print_deal_metrics(data: dict) -> None:
    kpis = data["kpis"]
    _header("Deal Metrics")
    print(f"  Total Cash Invested:  {_dollar(data['total_cash_invested'])}")
    print(f"  Loan Amount:          {_dollar(data['loan_amount'])}")
    print(f"  Monthly P&I:          {_dollar(data['monthly_payment'])}")
    print(f"  Monthly Cash Flow:    {_dollar(kpis['monthly_cash_flow'])}")
    print(f"  Cash-on-Cash:         {_pct(kpis['cash_on_cash'])}")
    print(f"  Cap Rate:             {_pct(kpis['cap_rate'])}")
    print(f"  1% Rule:              {_pct(kpis['one_percent_ratio'])} ({kpis['one_percent_rule']})")


def print_milestones(data: dict) -> None:
    years = data.get("milestone_years", [])
    rows = data.get("milestones", [])
    if not rows:
        return
    _header("Returns by Year")
    print(f"  {'Metric':<20}" + "".join(f"{'Yr ' + str(y):>12}" for y in years))
    print(f"  {'-' * 20}" + "".join(f"{'-' * 10:>12}" for _ in years))
    for row in rows:
        fmt = METRIC_FORMATS.get(row["metric"], _dec)
        cells = "".join(f"{fmt(v) if v is not None else '-':>12}" for v in row["values"])
        print(f"  {row['label']:<20}{cells}")


def print_schedule(data: dict) -> None:
    projections = data.get("yearly_projections", [])
    if not projections:
        return
    _header("Projection Schedule")
    header = (
        f"  {'Yr':>3}  {'Cash Flow':>11}  {'Home Value':>12}  {'Loan':>11}  "
        f"{'Equity':>12}  {'CoC':>7}  {'DSCR':>5}  {'IRR':>7}"
    )
    print(header)
    print(f"  {'---':>3}  {'-' * 11}  {'-' * 12}  {'-' * 11}  {'-' * 12}  {'-' * 7}  {'-' * 5}  {'-' * 7}")
    for yr in projections:
        print(
            f"  {yr['year']:>3}  {_dollar(yr['cash_flow']):>11}  "
            f"{_dollar(yr['home_value']):>12}  {_dollar(yr['loan_balance']):>11}  "
            f"{_dollar(yr['equity']):>12}  {_pct(yr['cash_on_cash']):>7}  "
            f"{_dec(yr['dscr']):>5}  {_pct(yr['irr']):>7}"
        )


# ── Main ─────────────────────────────────────────────────────────────────────

async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Project a rental deal via the Rental Projection API"
    )
    # Money accepts "300,000"; rates are percentages. Omitted flags use the API defaults.
    parser.add_argument("--price", help="Purchase price")
    parser.add_argument("--rehab", help="Rehab costs")
    parser.add_argument("--arv", help="After-repair value")
    parser.add_argument("--closing", help="Closing costs (%% of price)")
    parser.add_argument("--down", help="Down payment (%%)")
    parser.add_argument("--rate", help="Mortgage rate (%%)")
    parser.add_argument("--term", help="Loan term (years)")
    parser.add_argument("--pmi", help="PMI (%% of loan per year)")
    parser.add_argument("--rent", help="Gross monthly rent")
    parser.add_argument("--taxes", help="Annual property taxes")
    parser.add_argument("--insurance", help="Insurance (%% of price per year)")
    parser.add_argument("--hoa", help="Monthly HOA fees")
    parser.add_argument("--vacancy", help="Vacancy rate (%%)")
    parser.add_argument("--utilities", help="Monthly utilities")
    parser.add_argument("--repairs", help="Repairs (%% of gross rent)")
    parser.add_argument("--capex", help="CapEx reserve (%% of gross rent)")
    parser.add_argument("--management", help="Management (%% of EGI)")
    parser.add_argument("--appreciation", help="Home appreciation (%%/yr)")
    parser.add_argument("--rent-growth", help="Rent growth (%%/yr)")
    parser.add_argument("--inflation", help="Cost inflation (%%/yr)")
    parser.add_argument("--sale-costs", help="Sale closing costs (%%)")
    parser.add_argument("--schedule", action="store_true", help="Also print the full yearly schedule")
    parser.add_argument(
        "--api-url",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )

    args = parser.parse_args()

    # Build payload from the flags that were given
    field_map = {
        "price": "purchase_price",
        "rehab": "rehab_costs",
        "arv": "arv",
        "closing": "closing_costs_pct",
        "down": "down_payment_pct",
        "rate": "mortgage_rate",
        "term": "loan_term",
        "pmi": "pmi_pct",
        "rent": "gross_monthly_rent",
        "taxes": "property_taxes",
        "insurance": "insurance_pct",
        "hoa": "hoa_fees",
        "vacancy": "vacancy_rate",
        "utilities": "utilities",
        "repairs": "repairs_pct",
        "capex": "capex_pct",
        "management": "management_pct",
        "appreciation": "appreciation_home",
        "rent_growth": "appreciation_rent",
        "inflation": "inflation_costs",
        "sale_costs": "sale_closing_costs",
    }
    payload: dict = {}
    for cli_name, api_name in field_map.items():
        val = getattr(args, cli_name)
        if val is not None:
            payload[api_name] = val

    url = f"{args.api_url}/api/v1/projection"

    async with httpx.AsyncClient(timeout=60) as client:
        try:
            resp = await client.post(url, json=payload)
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {args.api_url}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn src.api.app:app --reload", file=sys.stderr)
            sys.exit(1)
        except httpx.TimeoutException:
            print("Error: Request timed out", file=sys.stderr)
            sys.exit(1)

        if resp.status_code != 200:
            print(f"Error: API returned {resp.status_code}", file=sys.stderr)
            try:
                detail = resp.json().get("detail", resp.text)
            except ValueError:
                detail = resp.text
            print(f"  {detail}", file=sys.stderr)
            sys.exit(1)

        data = resp.json()

    # Print report
    print_deal_metrics(data)
    print_milestones(data)
    if args.schedule:
        print_schedule(data)
    print()


if __name__ == "__main__":
    asyncio.run(main())
