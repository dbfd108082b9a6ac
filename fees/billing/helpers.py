from decimal import ROUND_CEILING, Decimal

from django.conf import settings

from fees.billing.dataclasses import Fee
from fees.billing.error import (
    ERR_AMOUNT_CENTS,
    ERR_AMOUNT_CURRENCY,
    ERR_VAT_AMOUNT_CENTS,
    ERR_VAT_AMOUNT_MISSING,
    ERR_VAT_RATE,
)
from fees.billing.exceptions import FeeValidationError


MAX_VAT_RATE = Decimal(100)


def compute_vat(fee: Fee) -> Fee:
    """
    Computes the VAT amount of the fee, rounded up to the next cent.
    Args:
        fee (Fee): the fee with amount_cents and vat_rate set.
    Returns:
        Fee: the same fee, updated in place.
    """
    vat_amount = Decimal(fee.amount_cents) * Decimal(fee.vat_rate) / MAX_VAT_RATE
    fee.vat_amount_cents = int(vat_amount.to_integral_value(rounding=ROUND_CEILING))
    fee.vat_amount_currency = fee.amount_currency
    return fee


def validate_fee(fee: Fee) -> None:
    errors = []
    if fee.amount_cents < 0:
        errors.append(ERR_AMOUNT_CENTS.to_dict(amount_cents=fee.amount_cents))
    if fee.amount_currency not in settings.BILLING_CONFIG["SUPPORTED_CURRENCIES"]:
        errors.append(ERR_AMOUNT_CURRENCY.to_dict(currency=fee.amount_currency))
    if not Decimal(0) <= Decimal(fee.vat_rate) <= MAX_VAT_RATE:
        errors.append(ERR_VAT_RATE.to_dict(vat_rate=fee.vat_rate))
    if fee.vat_amount_cents is None:
        errors.append(ERR_VAT_AMOUNT_MISSING.to_dict())
    elif fee.vat_amount_cents < 0:
        errors.append(ERR_VAT_AMOUNT_CENTS.to_dict(vat_amount_cents=fee.vat_amount_cents))

    if errors:
        raise FeeValidationError(fee, errors)
