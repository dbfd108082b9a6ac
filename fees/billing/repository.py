import logging
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import UTC, datetime

from fees.billing.dataclasses import Fee, FeeKind, Invoice
from fees.billing.error import ERR_FEE_ALREADY_EXISTS
from fees.billing.exceptions import FeeValidationError
from fees.billing.helpers import validate_fee
from fees.utils import find_first

logger = logging.getLogger(__name__)


class FeeRepository(ABC):
    @abstractmethod
    def find_invoice_fee(self, invoice: Invoice, kind: FeeKind) -> Fee | None:
        raise NotImplementedError

    @abstractmethod
    def save(self, fee: Fee) -> Fee:
        """
        Persists the fee.

        Raises:
            FeeValidationError: the fee is invalid or violates the
            one fee of a kind per invoice constraint.
        """
        raise NotImplementedError


class InMemoryFeeRepository(FeeRepository):
    """
    Keeps fees in memory and attaches them to their invoice and subscription.
    Uniqueness of subscription fees per invoice is checked under a lock.
    """

    def __init__(self):
        self.fees: list[Fee] = []
        self._lock = threading.Lock()

    def find_invoice_fee(self, invoice: Invoice, kind: FeeKind) -> Fee | None:
        return find_first(lambda fee: fee.kind == kind, invoice.fees)

    def save(self, fee: Fee) -> Fee:
        validate_fee(fee)

        with self._lock:
            if fee.kind == FeeKind.SUBSCRIPTION and find_first(
                lambda stored: stored.kind == fee.kind, fee.invoice.fees
            ):
                raise FeeValidationError(
                    fee,
                    [
                        ERR_FEE_ALREADY_EXISTS.to_dict(
                            invoice_id=fee.invoice.id, kind=fee.kind.value
                        )
                    ],
                )

            fee.id = str(uuid.uuid4())
            fee.created_at = datetime.now(UTC)
            self.fees.append(fee)
            fee.invoice.fees.append(fee)
            fee.subscription.fees.append(fee)

        logger.debug(f"Fee {fee.id} saved for invoice {fee.invoice.id}")
        return fee
