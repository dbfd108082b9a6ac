import logging

from fees.billing.dataclasses import Fee, FeeKind, FeeResult, FeeResultStatus, Invoice
from fees.billing.exceptions import FeeValidationError
from fees.billing.helpers import compute_vat
from fees.billing.proration import compute_amount
from fees.billing.repository import FeeRepository

logger = logging.getLogger(__name__)


class PrefixAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        return f"[{self.extra['prefix']}] {msg}", kwargs


class SubscriptionFeeService:
    """
    Creates the subscription fee of an invoice, at most once per invoice.
    """

    def __init__(self, invoice: Invoice, repository: FeeRepository):
        self.invoice = invoice
        self.repository = repository
        self.subscription = invoice.subscription
        self.plan = invoice.subscription.plan
        self.logger = PrefixAdapter(logging.getLogger(__name__), {"prefix": invoice.id})

    def create(self) -> FeeResult:
        """
        Returns the existing subscription fee of the invoice if any, otherwise
        computes, validates and saves a new one.

        Validation failures are returned as a FeeResult with the
        VALIDATION_FAILED status. UnsupportedIntervalError is not handled.
        """
        existing_fee = self.repository.find_invoice_fee(self.invoice, FeeKind.SUBSCRIPTION)
        if existing_fee:
            self.logger.info(f"Subscription fee {existing_fee.id} already billed: skip")
            return FeeResult(FeeResultStatus.FEE_ALREADY_BILLED, fee=existing_fee)

        amount_cents = compute_amount(self.plan, self.invoice, self.subscription)

        fee = Fee(
            invoice=self.invoice,
            subscription=self.subscription,
            amount_cents=amount_cents,
            amount_currency=self.plan.amount_currency,
            vat_rate=self.plan.vat_rate,
        )
        compute_vat(fee)

        try:
            self.repository.save(fee)
        except FeeValidationError as error:
            self.logger.warning(f"Invalid subscription fee: {error}")
            return FeeResult(
                FeeResultStatus.VALIDATION_FAILED,
                fee=error.record,
                errors=error.errors,
            )

        self.logger.info(
            f"Subscription fee {fee.id} created: {fee.amount_cents} {fee.amount_currency} "
            f"(vat {fee.vat_amount_cents})"
        )
        return FeeResult(FeeResultStatus.FEE_CREATED, fee=fee)
