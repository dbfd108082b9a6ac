from datetime import date
from decimal import Decimal

import pytest

from fees.billing.dataclasses import (
    BillingPeriod,
    Fee,
    FeeKind,
    Invoice,
    Plan,
    PlanInterval,
    Subscription,
)
from fees.billing.repository import InMemoryFeeRepository


@pytest.fixture()
def plan_factory():
    def _plan(
        amount_cents=3000,
        interval=PlanInterval.MONTHLY,
        pay_in_advance=True,
        pro_rata=True,
        billing_period=BillingPeriod.BEGINNING_OF_PERIOD,
        amount_currency="EUR",
        vat_rate=Decimal("20"),
    ):
        return Plan(
            code="premium",
            amount_cents=amount_cents,
            amount_currency=amount_currency,
            interval=interval,
            vat_rate=vat_rate,
            pay_in_advance=pay_in_advance,
            pro_rata=pro_rata,
            billing_period=billing_period,
        )

    return _plan


@pytest.fixture()
def subscription_factory(plan_factory):
    def _subscription(plan=None, subscription_id="SUB-0001"):
        return Subscription(id=subscription_id, plan=plan or plan_factory())

    return _subscription


@pytest.fixture()
def invoice_factory(subscription_factory):
    def _invoice(
        from_date=date(2024, 1, 10),
        to_date=date(2024, 1, 10),
        subscription=None,
        invoice_id="INV-0001",
    ):
        return Invoice(
            id=invoice_id,
            from_date=from_date,
            to_date=to_date,
            subscription=subscription or subscription_factory(),
        )

    return _invoice


@pytest.fixture()
def fee_factory():
    def _fee(invoice, amount_cents=3000, kind=FeeKind.SUBSCRIPTION, **kwargs):
        plan = invoice.subscription.plan
        return Fee(
            invoice=invoice,
            subscription=invoice.subscription,
            amount_cents=amount_cents,
            amount_currency=kwargs.pop("amount_currency", plan.amount_currency),
            vat_rate=kwargs.pop("vat_rate", plan.vat_rate),
            kind=kind,
            **kwargs,
        )

    return _fee


@pytest.fixture()
def monthly_plan(plan_factory):
    return plan_factory()


@pytest.fixture()
def yearly_plan(plan_factory):
    return plan_factory(amount_cents=12000, interval=PlanInterval.YEARLY)


@pytest.fixture()
def fee_repository():
    return InMemoryFeeRepository()


@pytest.fixture()
def billing_settings(settings):
    settings.BILLING_CONFIG = {"SUPPORTED_CURRENCIES": ["EUR", "USD"]}
    return settings
