"""Domain layer - row shapes and their search projections."""

from .model import (
    INVOICE_WEIGHTS,
    TRANSACTION_WEIGHTS,
    Invoice,
    InvoiceClient,
    Transaction,
    TransactionProduct,
    invoice_fields,
    invoices_table,
    load_fixture,
    load_rows,
    transaction_fields,
    transactions_table,
)


__all__ = [
    "INVOICE_WEIGHTS",
    "TRANSACTION_WEIGHTS",
    "Invoice",
    "InvoiceClient",
    "Transaction",
    "TransactionProduct",
    "invoice_fields",
    "invoices_table",
    "load_fixture",
    "load_rows",
    "transaction_fields",
    "transactions_table",
]
