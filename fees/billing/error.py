class ValidationError:
    def __init__(self, id, message):
        self.id = id
        self.message = message

    def to_dict(self, **kwargs):
        return {
            "id": self.id,
            "message": self.message.format(**kwargs),
        }


ERR_AMOUNT_CENTS = ValidationError("FEE0001", "Amount cents must not be negative, got {amount_cents}")
ERR_AMOUNT_CURRENCY = ValidationError("FEE0002", "Currency `{currency}` is not supported")
ERR_VAT_RATE = ValidationError("FEE0003", "VAT rate must be between 0 and 100, got {vat_rate}")
ERR_VAT_AMOUNT_MISSING = ValidationError("FEE0004", "VAT amount must be computed before saving")
ERR_FEE_ALREADY_EXISTS = ValidationError(
    "FEE0005", "Invoice {invoice_id} already has a `{kind}` fee"
)
ERR_VAT_AMOUNT_CENTS = ValidationError(
    "FEE0006", "VAT amount cents must not be negative, got {vat_amount_cents}"
)
