"""IRR computation via Newton-Raphson.

Pure functions. No I/O.
"""

import logging
from decimal import Decimal, DecimalException

logger = logging.getLogger(__name__)

DEFAULT_GUESS = Decimal("0.10")
MAX_ITERATIONS = 1000
TOLERANCE = Decimal("1e-7")
MIN_DERIVATIVE = Decimal("1e-10")


def _npv_and_derivative(cash_flows: list[Decimal], rate: Decimal) -> tuple[Decimal, Decimal]:
    """NPV at `rate` and its derivative with respect to `rate`."""
    factor = 1 + rate
    discount = Decimal("1")  # (1 + rate) ** t
    npv = Decimal("0")
    d_npv = Decimal("0")
    for t, cf in enumerate(cash_flows):
        npv += cf / discount
        d_npv -= t * cf / (discount * factor)
        discount *= factor
    return npv, d_npv


def compute_irr(cash_flows: list[Decimal], guess: Decimal = DEFAULT_GUESS) -> Decimal:
    """Compute IRR from a vector of periodic cash flows.

    cash_flows[0] should be negative (initial investment).

    Always returns a number. Streams with no sign change (or no flows at all)
    yield an economically meaningless rate rather than an error, since the
    projection calls this once per year and must never abort.
    """
    rate = Decimal(guess)
    if not cash_flows:
        return rate

    for _ in range(MAX_ITERATIONS):
        try:
            npv, d_npv = _npv_and_derivative(cash_flows, rate)
            if abs(d_npv) < MIN_DERIVATIVE:
                logger.debug("IRR derivative flat at rate %s, stopping", rate)
                return rate
            new_rate = rate - npv / d_npv
        except DecimalException as e:
            # 1 + rate hit zero or the iteration left the representable range
            logger.debug("IRR iteration stopped at rate %s: %r", rate, e)
            return rate

        if not new_rate.is_finite():
            return rate
        if abs(new_rate - rate) < TOLERANCE:
            return new_rate
        rate = new_rate

    logger.debug("IRR did not converge after %d iterations, last rate %s", MAX_ITERATIONS, rate)
    return rate
