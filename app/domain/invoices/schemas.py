from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from pydantic import BaseModel, ConfigDict, Field, field_validator
from app.core.utils.validators import blank_to_zero
from app.domain.invoices.models import InvoiceStatus


MAX_AMOUNT_CENTS = 2**31 - 1
MAX_AMOUNT = Decimal(MAX_AMOUNT_CENTS) / 100
AMOUNT_POSITIVE_MESSAGE = "Please enter an amount greater than $0."
AMOUNT_MAX_MESSAGE = f"Please enter an amount no greater than ${MAX_AMOUNT:,}."


def to_cents(amount: Decimal) -> int:
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class InvoiceFormDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(alias="customerId")
    amount: Decimal = Field(allow_inf_nan=False)
    status: InvoiceStatus

    @field_validator("customer_id", mode="before")
    def _check_customer(cls, v):
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Please select a customer.")
        return v.strip()

    @field_validator("amount", mode="before")
    def _coerce_amount(cls, v):
        v = blank_to_zero(v)
        if isinstance(v, str):
            try:
                v = Decimal(v.strip())
            except InvalidOperation:
                raise ValueError(AMOUNT_POSITIVE_MESSAGE)
        if isinstance(v, Decimal) and not v.is_finite():
            raise ValueError(AMOUNT_POSITIVE_MESSAGE)
        return v

    @field_validator("amount")
    def _check_amount(cls, v: Decimal) -> Decimal:
        if v > MAX_AMOUNT:
            raise ValueError(AMOUNT_MAX_MESSAGE)
        if to_cents(v) < 1:
            raise ValueError(AMOUNT_POSITIVE_MESSAGE)
        return v

    @field_validator("status", mode="before")
    def _check_status(cls, v):
        try:
            return InvoiceStatus(v)
        except ValueError:
            raise ValueError("Please select an invoice status.")

    @property
    def amount_in_cents(self) -> int:
        return to_cents(self.amount)


class InvoicesQueryDTO(BaseModel):
    model_config = ConfigDict(extra='forbid')

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=6, ge=1, le=100)
    query: str | None = Field(default=None, max_length=256)

    @field_validator("query", mode="before")
    def _strip_query(cls, v):
        if isinstance(v, str):
            v = v.strip()
        return v or None

    @property
    def is_default(self) -> bool:
        return self.page == 1 and self.query is None


class InvoiceListItemDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    name: str
    email: str
    image_url: str | None
    amount: int
    status: InvoiceStatus
    date: date
