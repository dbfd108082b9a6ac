import logging
from datetime import date
from fractions import Fraction

from fees.billing.dataclasses import (
    AmountResult,
    AmountStatus,
    FeeKind,
    Invoice,
    Plan,
    PlanInterval,
    Subscription,
)
from fees.billing.exceptions import UnsupportedIntervalError
from fees.utils import beginning_of_month, beginning_of_year, end_of_month, end_of_year

logger = logging.getLogger(__name__)

PERIOD_BOUNDARIES = {
    PlanInterval.MONTHLY: (beginning_of_month, end_of_month),
    PlanInterval.YEARLY: (beginning_of_year, end_of_year),
}


class ProrationCalculator:
    """
    Computes the subscription amount of a single invoice period.

    The full plan amount is billed unless the plan is billed at the beginning
    of the period, is pro-rata, and the subscription has never been billed
    before. In that case only the days left in the first period are billed.
    """

    def compute(self, plan: Plan, invoice: Invoice, subscription: Subscription) -> AmountResult:
        if not plan.beginning_of_period:
            return AmountResult.ok(plan.amount_cents)
        if not plan.pro_rata:
            return AmountResult.ok(plan.amount_cents)
        if subscription.has_fee_of_kind(FeeKind.SUBSCRIPTION):
            return AmountResult.ok(plan.amount_cents)

        if plan.interval not in PERIOD_BOUNDARIES:
            return AmountResult.unsupported_interval(plan.interval)

        period_start, period_end = PERIOD_BOUNDARIES[plan.interval]

        # first invoice of a pay in advance plan has from_date == to_date,
        # the days to bill run up to the end of the billing period
        to_date = invoice.to_date
        if plan.pay_in_advance:
            to_date = period_end(invoice.to_date)

        days_to_bill = (to_date - invoice.from_date).days
        period_duration = self.period_duration(period_start(invoice.to_date), to_date)
        day_price = Fraction(plan.amount_cents, period_duration)
        amount_cents = int(days_to_bill * day_price)

        logger.debug(
            f"{invoice}: {plan.code=} {days_to_bill=} {period_duration=} "
            f"{float(day_price)=:.4f} {amount_cents=}"
        )
        return AmountResult.ok(amount_cents)

    @staticmethod
    def period_duration(period_start: date, to_date: date) -> int:
        """
        Number of days of the billing period, both ends included.
        Args:
            period_start (date): beginning of the month or year of the invoice.
            to_date (date): last day billed.
        """
        return (to_date - period_start).days + 1


def compute_amount(plan: Plan, invoice: Invoice, subscription: Subscription) -> int:
    """
    Returns the amount in cents of the subscription fee of the invoice.

    Raises:
        UnsupportedIntervalError: the plan interval cannot be prorated.
    """
    result = ProrationCalculator().compute(plan, invoice, subscription)
    if result.status == AmountStatus.UNSUPPORTED_INTERVAL:
        raise UnsupportedIntervalError(result.interval.value)
    return result.amount_cents
