from .customers.models import Customer
from .invoices.models import Invoice, InvoiceStatus
from .users.models import User

__all__ = ("Customer", "Invoice", "InvoiceStatus", "User")
