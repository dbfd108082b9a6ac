from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


class PlanInterval(Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class BillingPeriod(Enum):
    BEGINNING_OF_PERIOD = "beginning_of_period"
    SUBSCRIPTION_DATE = "subscription_date"


class FeeKind(Enum):
    SUBSCRIPTION = "subscription"
    CHARGE = "charge"


@dataclass(frozen=True)
class Plan:
    code: str
    amount_cents: int
    amount_currency: str
    interval: PlanInterval
    vat_rate: Decimal = Decimal(0)
    pay_in_advance: bool = False
    pro_rata: bool = False
    billing_period: BillingPeriod = BillingPeriod.BEGINNING_OF_PERIOD

    @property
    def beginning_of_period(self) -> bool:
        return self.billing_period == BillingPeriod.BEGINNING_OF_PERIOD


@dataclass(eq=False)
class Subscription:
    id: str
    plan: Plan
    fees: list["Fee"] = field(default_factory=list)

    def has_fee_of_kind(self, kind: FeeKind) -> bool:
        return any(fee.kind == kind for fee in self.fees)


@dataclass(eq=False)
class Invoice:
    id: str
    from_date: date
    to_date: date
    subscription: Subscription
    fees: list["Fee"] = field(default_factory=list)

    def __str__(self):
        return f"{self.id} ({self.from_date.isoformat()} - {self.to_date.isoformat()})"


@dataclass(eq=False)
class Fee:
    invoice: Invoice
    subscription: Subscription
    amount_cents: int
    amount_currency: str
    vat_rate: Decimal
    kind: FeeKind = FeeKind.SUBSCRIPTION
    vat_amount_cents: int | None = None
    vat_amount_currency: str | None = None
    id: str | None = None
    created_at: datetime | None = None


class AmountStatus(Enum):
    OK = "ok"
    UNSUPPORTED_INTERVAL = "unsupported_interval"


@dataclass(frozen=True)
class AmountResult:
    status: AmountStatus
    amount_cents: int | None = None
    interval: PlanInterval | None = None

    @classmethod
    def ok(cls, amount_cents: int) -> "AmountResult":
        return cls(AmountStatus.OK, amount_cents=amount_cents)

    @classmethod
    def unsupported_interval(cls, interval: PlanInterval) -> "AmountResult":
        return cls(AmountStatus.UNSUPPORTED_INTERVAL, interval=interval)


class FeeResultStatus(Enum):
    FEE_CREATED = "fee_created"
    FEE_ALREADY_BILLED = "fee_already_billed"
    VALIDATION_FAILED = "validation_failed"


@dataclass
class FeeResult:
    status: FeeResultStatus
    fee: Fee | None = None
    errors: list[dict[str, Any]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status != FeeResultStatus.VALIDATION_FAILED
