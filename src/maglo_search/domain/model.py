"""Domain model - the row shapes shown in the transaction and invoice tables.

Rows are immutable value objects parsed from camelCase JSON (the shape the
dashboard fixtures and API responses use). Each row type ships a field
projection and weights describing how it participates in search.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from importlib import resources
from pathlib import Path
from typing import Literal, TypeVar

import orjson
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from maglo_search.service_layer.search_table import SearchParamNames, SearchTableConfig


ModelT = TypeVar("ModelT", bound=BaseModel)

TransactionStatus = Literal["completed", "pending", "failed"]

DEFAULT_TRANSACTION_STATUS: TransactionStatus = "completed"


class _Row(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class TransactionProduct(_Row):
    name: str
    image: str = ""
    email: str = ""
    site_url: str | None = Field(default=None, alias="siteUrl")


class Transaction(_Row):
    """A payment line in the transactions table."""

    id: str
    product: TransactionProduct
    type: str
    amount: float
    created_at: datetime = Field(alias="createdAt")
    invoice_id: str = Field(alias="invoiceID")
    status: TransactionStatus | None = None


class InvoiceClient(_Row):
    name: str
    invoice_number: str = Field(alias="invoiceNumber")
    profile_picture: str = Field(default="", alias="profilePicture")
    email: str = ""


class Invoice(_Row):
    """An invoice in the invoices table."""

    id: str
    client: InvoiceClient
    created_at: datetime = Field(alias="createdAt")
    orders: int = 0
    type: str
    amount: float
    status: str


def transaction_fields(row: Transaction) -> dict[str, str]:
    """Searchable projection of a transaction; missing status reads as completed."""
    return {
        "name": row.product.name,
        "email": row.product.email,
        "type": row.type,
        "invoiceID": row.invoice_id,
        "status": row.status or DEFAULT_TRANSACTION_STATUS,
    }


def invoice_fields(row: Invoice) -> dict[str, str]:
    return {
        "name": row.client.name,
        "invoiceNumber": row.client.invoice_number,
        "email": row.client.email,
        "type": row.type,
        "status": row.status,
    }


TRANSACTION_WEIGHTS: Mapping[str, float] = {"name": 3, "invoiceID": 2, "email": 2, "type": 1, "status": 1}
INVOICE_WEIGHTS: Mapping[str, float] = {"name": 3, "invoiceNumber": 2, "email": 2, "type": 1, "status": 1}


def transactions_table(
    param_names: SearchParamNames | None = None,
    max_query_tokens: int | None = None,
) -> SearchTableConfig:
    """Search configuration for the transactions table, driven by URL params."""
    return SearchTableConfig(
        name="transactions",
        get_fields=transaction_fields,
        use_url_params=True,
        param_names=param_names or SearchParamNames(),
        weights=dict(TRANSACTION_WEIGHTS),
        status_field_key="status",
        max_query_tokens=max_query_tokens,
    )


def invoices_table(
    param_names: SearchParamNames | None = None,
    max_query_tokens: int | None = None,
) -> SearchTableConfig:
    """Search configuration for the invoices table, driven by URL params."""
    return SearchTableConfig(
        name="invoices",
        get_fields=invoice_fields,
        use_url_params=True,
        param_names=param_names or SearchParamNames(),
        weights=dict(INVOICE_WEIGHTS),
        status_field_key="status",
        max_query_tokens=max_query_tokens,
    )


def load_rows(source: Path | str | bytes, model: type[ModelT]) -> list[ModelT]:
    """Parse a JSON array of rows into ``model`` instances.

    Args:
        source: Path to a JSON file, or the raw JSON document.
        model: Row model to validate each element against.

    Raises:
        OSError: When the file cannot be read.
        ValueError: When the document is not valid JSON or a row fails
            validation (``pydantic.ValidationError`` is a ``ValueError``).
    """
    raw = Path(source).read_bytes() if isinstance(source, (Path, str)) else source
    data = orjson.loads(raw)
    if not isinstance(data, list):
        raise ValueError("Row data must be a JSON array")
    return TypeAdapter(list[model]).validate_python(data)


def load_fixture(name: Literal["transactions", "invoices"]) -> list[Transaction] | list[Invoice]:
    """Load one of the bundled sample datasets."""
    model: type[BaseModel] = Transaction if name == "transactions" else Invoice
    raw = resources.files("maglo_search.fixtures").joinpath(f"{name}.json").read_bytes()
    return load_rows(raw, model)
