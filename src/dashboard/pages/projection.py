"""Projection page — deal inputs, headline KPIs, milestone table and charts."""

import dash
from dash import html, dcc, callback, Input, Output, State, ALL, ctx

from src.api.schemas import ProjectionRequest
from src.config import settings
from src.dashboard.charts import cash_flow_figure, breakdown_figure, equity_figure
from src.engine.proforma import run_projection
from src.engine.summary import headline_kpis, milestone_table

dash.register_page(__name__, path="/", name="Projection")

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#2E5638",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

# (request field, label); money fields are text so "300,000" is accepted
INPUT_GROUPS = [
    ("Purchase", [
        ("purchase_price", "Purchase Price ($)"),
        ("rehab_costs", "Rehab Costs ($)"),
        ("arv", "After-Repair Value ($)"),
        ("closing_costs_pct", "Closing Costs (%)"),
    ]),
    ("Financing", [
        ("down_payment_pct", "Down Payment (%)"),
        ("mortgage_rate", "Mortgage Rate (%)"),
        ("loan_term", "Loan Term (yrs)"),
        ("pmi_pct", "PMI (%)"),
    ]),
    ("Income & Expenses", [
        ("gross_monthly_rent", "Monthly Rent ($)"),
        ("property_taxes", "Annual Taxes ($)"),
        ("insurance_pct", "Insurance (% of price)"),
        ("hoa_fees", "Monthly HOA ($)"),
        ("vacancy_rate", "Vacancy (%)"),
        ("utilities", "Monthly Utilities ($)"),
    ]),
    ("Reserves & Growth", [
        ("repairs_pct", "Repairs (%)"),
        ("capex_pct", "CapEx (%)"),
        ("management_pct", "Management (%)"),
        ("appreciation_home", "Home Appreciation (%)"),
        ("appreciation_rent", "Rent Growth (%)"),
        ("inflation_costs", "Cost Inflation (%)"),
        ("sale_closing_costs", "Sale Closing Costs (%)"),
    ]),
]

FIELD_ORDER = [name for _, fields in INPUT_GROUPS for name, _ in fields]


def _defaults() -> dict[str, str]:
    defaults = ProjectionRequest()
    return {name: f"{getattr(defaults, name):,}" for name in FIELD_ORDER}


def _pct(v) -> str:
    return f"{float(v) * 100:.2f}%"


def _dollar(v) -> str:
    return f"${float(v):,.0f}"


def _dec(v) -> str:
    return f"{float(v):.2f}"


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


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "140px"})


def _input_section(defaults: dict[str, str]):
    sections = []
    for title, fields in INPUT_GROUPS:
        sections.append(html.H4(title, style={"margin": "1rem 0 0.5rem"}))
        sections.append(html.Div([
            _field(label, dcc.Input(
                id={"type": "deal-input", "field": name},
                type="text",
                value=defaults[name],
                debounce=True,
                style=FIELD_STYLE,
            ))
            for name, label in fields
        ], style={"display": "flex", "flexWrap": "wrap", "gap": "1rem"}))
    return sections


layout = html.Div([
    html.H2("Rental Projection"),
    html.Div(_input_section(_defaults()), style={"marginBottom": "1rem"}),
    html.Div([
        html.Button("Calculate", id="calculate-btn", n_clicks=0, style=BTN_STYLE),
        html.Button("Reset", id="reset-btn", n_clicks=0, style={**BTN_STYLE, "backgroundColor": "#82877d"}),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "2rem"}),
    dcc.Loading(html.Div(id="projection-results")),
])


def _kpi_card(label, value, color="#1a1a2e"):
    return html.Div([
        html.Div(label, style={"fontSize": "0.8rem", "color": "#666"}),
        html.Div(value, style={"fontSize": "1.5rem", "fontWeight": "bold", "color": color}),
    ], style={"flex": "1", "padding": "1rem", "backgroundColor": "#f5f5f5", "borderRadius": "8px"})


def _milestone_table(records, years):
    header = html.Tr([html.Th("Metric")] + [html.Th(f"Year {y}") for y in years])
    rows = []
    for row in milestone_table(records, years):
        fmt = METRIC_FORMATS.get(row["metric"], _dec)
        rows.append(html.Tr(
            [html.Td(row["label"])]
            + [html.Td(fmt(v) if v is not None else "-") for v in row["values"]]
        ))
    return html.Table(
        [html.Thead(header), html.Tbody(rows)],
        style={"width": "100%", "borderCollapse": "collapse", "marginBottom": "2rem"},
    )


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


@callback(
    Output({"type": "deal-input", "field": ALL}, "value"),
    Input("reset-btn", "n_clicks"),
    prevent_initial_call=True,
)
def reset_inputs(_n_clicks):
    defaults = _defaults()
    return [defaults[item["id"]["field"]] for item in ctx.outputs_list]


@callback(
    Output("projection-results", "children"),
    Input("calculate-btn", "n_clicks"),
    Input("reset-btn", "n_clicks"),
    State({"type": "deal-input", "field": ALL}, "value"),
    State({"type": "deal-input", "field": ALL}, "id"),
)
def update_projection(_calc_clicks, _reset_clicks, values, ids):
    """Recalculate on page load, Calculate and Reset. Typing alone does not."""
    if ctx.triggered_id == "reset-btn":
        raw = {}
    else:
        raw = {item["field"]: value for item, value in zip(ids, values)}
    assumptions = ProjectionRequest(**raw).to_assumptions()
    result = run_projection(assumptions, years=settings.projection_years)
    records = result.yearly_projections
    if not records:
        return html.P("No projection years configured.")

    kpis = headline_kpis(result)
    passes = kpis["one_percent_rule"] == "Pass"
    cf_color = "#e7543c" if kpis["monthly_cash_flow"] < 0 else "#2E5638"

    kpi_row = html.Div([
        _kpi_card("Monthly Cash Flow (Yr 1)", _dollar(kpis["monthly_cash_flow"]), cf_color),
        _kpi_card("Cash-on-Cash (Yr 1)", _pct(kpis["cash_on_cash"])),
        _kpi_card("Cap Rate (Yr 1)", _pct(kpis["cap_rate"])),
        _kpi_card(
            "1% Rule",
            f"{_pct(kpis['one_percent_ratio'])} · {kpis['one_percent_rule']}",
            "#2E5638" if passes else "#e7543c",
        ),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "2rem"})

    return html.Div([
        kpi_row,
        _milestone_table(records, list(settings.summary_years)),
        dcc.Tabs([
            dcc.Tab(label="Cash Flow", children=[dcc.Graph(figure=cash_flow_figure(records))]),
            dcc.Tab(label="Expenses", children=[
                dcc.Graph(figure=breakdown_figure(records, settings.chart_interval_years)),
            ]),
            dcc.Tab(label="Equity", children=[dcc.Graph(figure=equity_figure(records))]),
        ]),
    ])
