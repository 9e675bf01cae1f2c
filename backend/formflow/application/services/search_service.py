"""Case-insensitive text filters over store snapshots."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from formflow.domain.entities import (
    Client,
    Form,
    Invoice,
    InvoiceStatus,
    StoreSnapshot,
)


@dataclass(frozen=True)
class SearchResult:
    type: str
    id: str
    title: str
    subtitle: str
    link: str


def _matches(query: str, *values: str | None) -> bool:
    return any(value and query in value.lower() for value in values)


def _normalise(query: str | None) -> str:
    return (query or "").strip().lower()


def filter_clients(clients: Iterable[Client], query: str | None) -> list[Client]:
    """Match on name, email, company or phone. A blank query keeps everything."""
    q = _normalise(query)
    if not q:
        return list(clients)
    return [c for c in clients if _matches(q, c.name, c.email, c.company, c.phone)]


def filter_invoices(
    invoices: Iterable[Invoice],
    query: str | None,
    status: InvoiceStatus | None = None,
) -> list[Invoice]:
    """Match on number and on the embedded client's name, company or email."""
    q = _normalise(query)
    result = []
    for invoice in invoices:
        if status is not None and invoice.status != status:
            continue
        if q and not _matches(
            q,
            invoice.number,
            invoice.client.name,
            invoice.client.company,
            invoice.client.email,
        ):
            continue
        result.append(invoice)
    return result


def filter_forms(forms: Iterable[Form], query: str | None) -> list[Form]:
    q = _normalise(query)
    if not q:
        return list(forms)
    return [f for f in forms if _matches(q, f.title, f.description)]


def status_counts(invoices: Iterable[Invoice]) -> dict[str, int]:
    """Invoice count per status plus ``all``, for filter labels."""
    invoices = list(invoices)
    counts = Counter(invoice.status for invoice in invoices)
    result = {"all": len(invoices)}
    for status in InvoiceStatus:
        result[status.value] = counts.get(status, 0)
    return result


def global_search(snapshot: StoreSnapshot, query: str | None) -> list[SearchResult]:
    """Search invoices, forms and clients at once (in that order).

    Deliberately narrower than the per-page filters: invoices match on number
    or client name, clients on name, email or company.
    """
    q = _normalise(query)
    if not q:
        return []

    results: list[SearchResult] = []
    for invoice in snapshot.invoices:
        if _matches(q, invoice.number, invoice.client.name):
            results.append(SearchResult(
                type="invoice",
                id=invoice.id,
                title=f"Invoice #{invoice.number}",
                subtitle=f"{invoice.client.name} - {invoice.status.value}",
                link=f"/invoices/{invoice.id}",
            ))
    for form in snapshot.forms:
        if _matches(q, form.title, form.description):
            results.append(SearchResult(
                type="form",
                id=form.id,
                title=form.title,
                subtitle=f"{form.response_count} responses",
                link=f"/forms/{form.id}",
            ))
    for client in snapshot.clients:
        if _matches(q, client.name, client.email, client.company):
            results.append(SearchResult(
                type="client",
                id=client.id,
                title=client.name,
                subtitle=client.company or client.email,
                link=f"/clients/{client.id}",
            ))
    return results
