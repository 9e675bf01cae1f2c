"""DomainStore — single owner of clients, invoices, forms and the dashboard aggregate.

Every mutation changes a collection and the ``DashboardStats`` aggregate
together while holding the store lock, then publishes an immutable
``StoreChange`` to observers. Updates and deletes that reference an unknown
id are silent no-ops: nothing changes and nothing is published.
"""

import copy
import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from formflow.application.schemas import (
    ClientCreate,
    ClientUpdate,
    FormCreate,
    FormFieldSchema,
    FormUpdate,
    InvoiceCreate,
    InvoiceItemSchema,
    InvoiceUpdate,
    SeedData,
)
from formflow.domain.entities import (
    ActivityEntry,
    ActivityType,
    Client,
    DashboardStats,
    FieldValidation,
    Form,
    FormField,
    Invoice,
    InvoiceItem,
    StoreChange,
    StoreSnapshot,
)
from formflow.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

StoreObserver = Callable[[StoreChange], None]

_Schema = TypeVar("_Schema", bound=BaseModel)

# Operation name → whether it appends to the activity log.
ACTIVITY_POLICY: dict[str, bool] = {
    "client.added": True,
    "client.updated": False,
    "client.deleted": True,
    "invoice.added": True,
    "invoice.updated": False,
    "invoice.status_changed": True,
    "invoice.deleted": True,
    "form.added": True,
    "form.updated": False,
    "form.fields_changed": False,
    "form.published": True,
    "form.unpublished": True,
    "form.response_recorded": False,
    "form.deleted": True,
}

# Entity attributes an update may never set to None.
_CLIENT_REQUIRED = frozenset({"name", "email"})
_INVOICE_REQUIRED = frozenset(
    {"number", "client", "issue_date", "due_date", "items", "status", "currency"}
)
_FORM_REQUIRED = frozenset({"title", "fields", "published", "response_count"})


class DomainStore:
    """Authoritative in-memory state for the application.

    Construct one per process and hand it to whoever needs it; call
    ``load`` once with the seed and ``close`` at shutdown.
    """

    def __init__(
        self,
        *,
        activity_log_limit: int | None = None,
        activity_policy: Mapping[str, bool] | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._clients: list[Client] = []
        self._invoices: list[Invoice] = []
        self._forms: list[Form] = []
        self._stats = DashboardStats()
        self._loaded = False
        self._observers: list[StoreObserver] = []
        # Non-positive limits mean unbounded.
        if activity_log_limit is not None and activity_log_limit <= 0:
            activity_log_limit = None
        self._activity_limit = activity_log_limit
        self._policy = {**ACTIVITY_POLICY, **(activity_policy or {})}

    # ── Lifecycle & reads ───────────────────────────────────────────

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load(self, seed: SeedData | Mapping[str, Any]) -> StoreSnapshot:
        """Replace every collection and the aggregate with ``seed``.

        Counters are derived from the seeded collections; only the seeded
        activity entries are taken over, newest first.
        """
        seed = _coerce(SeedData, seed)
        clients = [_client_from_schema(c) for c in seed.clients]
        invoices = [_invoice_from_schema(i) for i in seed.invoices]
        forms = [_form_from_schema(f) for f in seed.forms]
        activity = [
            ActivityEntry(id=a.id, type=a.type, action=a.action, date=a.date)
            for a in seed.recent_activity
        ]
        stats = DashboardStats.from_collections(clients, invoices, forms, activity)
        if self._activity_limit is not None:
            del stats.recent_activity[self._activity_limit:]

        with self._lock:
            self._clients = clients
            self._invoices = invoices
            self._forms = forms
            self._stats = stats
            self._loaded = True
            logger.info(
                "Store loaded: %d clients, %d invoices, %d forms",
                len(clients), len(invoices), len(forms),
            )
            return self._publish("store.loaded", "store", None)

    def snapshot(self) -> StoreSnapshot:
        with self._lock:
            return self._snapshot()

    def subscribe(self, observer: StoreObserver) -> Callable[[], None]:
        """Register ``observer`` for every applied mutation. Returns an unsubscribe callable."""
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def close(self) -> None:
        with self._lock:
            self._observers.clear()
            logger.debug("Store closed")

    def verify_consistency(self) -> bool:
        """True when every counter matches a from-scratch recomputation."""
        with self._lock:
            expected = DashboardStats.from_collections(self._clients, self._invoices, self._forms)
            return expected.counters() == self._stats.counters()

    def get_client(self, client_id: str) -> Client:
        with self._lock:
            return copy.deepcopy(self._require(self._clients, client_id, "Client"))

    def get_invoice(self, invoice_id: str) -> Invoice:
        with self._lock:
            return copy.deepcopy(self._require(self._invoices, invoice_id, "Invoice"))

    def get_form(self, form_id: str) -> Form:
        with self._lock:
            return copy.deepcopy(self._require(self._forms, form_id, "Form"))

    # ── Clients ─────────────────────────────────────────────────────

    def add_client(self, data: ClientCreate | Mapping[str, Any]) -> Client:
        client = _client_from_schema(_coerce(ClientCreate, data))
        with self._lock:
            self._clients.append(client)
            self._stats.total_clients += 1
            self._log_activity("client.added", f"Added client {client.name}")
            logger.info("Added client %s (%s)", client.name, client.id)
            self._publish("client.added", "client", client.id)
            return copy.deepcopy(client)

    def update_client(self, client_id: str, changes: ClientUpdate | Mapping[str, Any]) -> bool:
        values = _changes(_coerce(ClientUpdate, changes), _CLIENT_REQUIRED)
        with self._lock:
            client = _find(self._clients, client_id)
            if client is None:
                logger.debug("update_client ignored — unknown id %s", client_id)
                return False
            client.update(**values)
            self._log_activity("client.updated", f"Updated client {client.name}")
            self._publish("client.updated", "client", client.id)
            return True

    def delete_client(self, client_id: str) -> bool:
        with self._lock:
            client = _find(self._clients, client_id)
            if client is None:
                logger.debug("delete_client ignored — unknown id %s", client_id)
                return False
            self._clients.remove(client)
            self._stats.total_clients -= 1
            self._log_activity("client.deleted", f"Deleted client {client.name}")
            logger.info("Deleted client %s (%s)", client.name, client.id)
            self._publish("client.deleted", "client", client.id)
            return True

    # ── Invoices ────────────────────────────────────────────────────

    def add_invoice(self, data: InvoiceCreate | Mapping[str, Any]) -> Invoice:
        invoice = _invoice_from_schema(_coerce(InvoiceCreate, data))
        with self._lock:
            self._invoices.append(invoice)
            self._stats.count_invoice(invoice.status, 1)
            self._log_activity("invoice.added", f"Created invoice #{invoice.number}")
            logger.info("Created invoice #%s (%s, %s)", invoice.number, invoice.id, invoice.status.value)
            self._publish("invoice.added", "invoice", invoice.id)
            return copy.deepcopy(invoice)

    def update_invoice(self, invoice_id: str, changes: InvoiceUpdate | Mapping[str, Any]) -> bool:
        update = _coerce(InvoiceUpdate, changes)
        values = _changes(update, _INVOICE_REQUIRED)
        if "client" in values:
            values["client"] = _client_from_schema(update.client)
        if "items" in values:
            values["items"] = [_item_from_schema(item) for item in update.items]

        with self._lock:
            invoice = _find(self._invoices, invoice_id)
            if invoice is None:
                logger.debug("update_invoice ignored — unknown id %s", invoice_id)
                return False
            old_status, old_number = invoice.status, invoice.number
            invoice.update(**values)

            operation = "invoice.updated"
            action = f"Updated invoice #{old_number}"
            if invoice.status != old_status:
                self._stats.move_invoice(old_status, invoice.status)
                operation = "invoice.status_changed"
                action = f"Updated invoice #{old_number} status to {invoice.status.value}"
                logger.info(
                    "Invoice #%s status %s → %s", old_number, old_status.value, invoice.status.value
                )
            self._log_activity(operation, action)
            self._publish(operation, "invoice", invoice.id)
            return True

    def delete_invoice(self, invoice_id: str) -> bool:
        with self._lock:
            invoice = _find(self._invoices, invoice_id)
            if invoice is None:
                logger.debug("delete_invoice ignored — unknown id %s", invoice_id)
                return False
            self._invoices.remove(invoice)
            self._stats.count_invoice(invoice.status, -1)
            self._log_activity("invoice.deleted", f"Deleted invoice #{invoice.number}")
            logger.info("Deleted invoice #%s (%s)", invoice.number, invoice.id)
            self._publish("invoice.deleted", "invoice", invoice.id)
            return True

    # ── Forms ───────────────────────────────────────────────────────

    def add_form(self, data: FormCreate | Mapping[str, Any]) -> Form:
        form = _form_from_schema(_coerce(FormCreate, data))
        with self._lock:
            self._forms.append(form)
            self._stats.total_forms += 1
            self._log_activity("form.added", f'Created form "{form.title}"')
            logger.info('Created form "%s" (%s)', form.title, form.id)
            self._publish("form.added", "form", form.id)
            return copy.deepcopy(form)

    def update_form(self, form_id: str, changes: FormUpdate | Mapping[str, Any]) -> bool:
        update = _coerce(FormUpdate, changes)
        values = _changes(update, _FORM_REQUIRED)
        if "fields" in values:
            values["fields"] = [_field_from_schema(f) for f in update.fields]

        with self._lock:
            form = _find(self._forms, form_id)
            if form is None:
                logger.debug("update_form ignored — unknown id %s", form_id)
                return False
            old_title, old_published, old_responses = form.title, form.published, form.response_count
            form.update(**values)
            self._stats.form_responses += form.response_count - old_responses

            if form.published != old_published:
                operation = "form.published" if form.published else "form.unpublished"
                verb = "Published" if form.published else "Unpublished"
                action = f'{verb} form "{old_title}"'
            elif "fields" in values:
                operation = "form.fields_changed"
                action = f'Updated fields of form "{old_title}"'
            else:
                operation = "form.updated"
                action = f'Updated form "{old_title}"'
            self._log_activity(operation, action)
            self._publish(operation, "form", form.id)
            return True

    def record_form_response(self, form_id: str) -> bool:
        """Count one submitted response for ``form_id``."""
        with self._lock:
            form = _find(self._forms, form_id)
            if form is None:
                logger.debug("record_form_response ignored — unknown id %s", form_id)
                return False
            form.update(response_count=form.response_count + 1)
            self._stats.form_responses += 1
            self._log_activity("form.response_recorded", f'Received a new response for "{form.title}"')
            self._publish("form.response_recorded", "form", form.id)
            return True

    def delete_form(self, form_id: str) -> bool:
        with self._lock:
            form = _find(self._forms, form_id)
            if form is None:
                logger.debug("delete_form ignored — unknown id %s", form_id)
                return False
            self._forms.remove(form)
            self._stats.total_forms -= 1
            self._stats.form_responses -= form.response_count
            self._log_activity("form.deleted", f'Deleted form "{form.title}"')
            logger.info('Deleted form "%s" (%s)', form.title, form.id)
            self._publish("form.deleted", "form", form.id)
            return True

    # ── Internals (call with the lock held) ─────────────────────────

    def _log_activity(self, operation: str, action: str) -> None:
        if not self._policy.get(operation, False):
            return
        activity_type = ActivityType(operation.split(".", 1)[0])
        self._stats.record(ActivityEntry(type=activity_type, action=action), self._activity_limit)

    def _snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            clients=tuple(copy.deepcopy(self._clients)),
            invoices=tuple(copy.deepcopy(self._invoices)),
            forms=tuple(copy.deepcopy(self._forms)),
            stats=copy.deepcopy(self._stats),
            loaded=self._loaded,
        )

    def _publish(self, operation: str, entity_type: str, entity_id: str | None) -> StoreSnapshot:
        snapshot = self._snapshot()
        change = StoreChange(
            operation=operation,
            entity_type=entity_type,
            entity_id=entity_id,
            snapshot=snapshot,
        )
        for observer in list(self._observers):
            try:
                observer(change)
            except Exception:
                logger.exception("Store observer %r failed on %s", observer, operation)
        return snapshot

    @staticmethod
    def _require(collection: list, entity_id: str, entity_type: str):
        entity = _find(collection, entity_id)
        if entity is None:
            raise EntityNotFoundError(entity_type, entity_id)
        return entity


# ── Schema → entity mapping ──────────────────────────────────────────


def _coerce(schema: type[_Schema], data: _Schema | Mapping[str, Any]) -> _Schema:
    """Validate raw input up front so a bad payload never reaches the state."""
    if isinstance(data, schema):
        return data
    return schema.model_validate(data)


def _changes(update: BaseModel, required: frozenset[str]) -> dict[str, Any]:
    """Fields explicitly set on ``update``, minus None for non-nullable attributes."""
    values: dict[str, Any] = {}
    for name in update.model_fields_set:
        value = getattr(update, name)
        if value is None and name in required:
            continue
        values[name] = value
    return values


def _find(collection: list, entity_id: str):
    for entity in collection:
        if entity.id == entity_id:
            return entity
    return None


def _client_from_schema(data: BaseModel) -> Client:
    return Client(**data.model_dump(exclude_none=True))


def _item_from_schema(data: InvoiceItemSchema) -> InvoiceItem:
    return InvoiceItem(**data.model_dump(exclude_none=True))


def _invoice_from_schema(data: BaseModel) -> Invoice:
    values = data.model_dump(exclude_none=True, exclude={"client", "items"})
    return Invoice(
        client=_client_from_schema(data.client),
        items=[_item_from_schema(item) for item in data.items],
        **values,
    )


def _field_from_schema(data: FormFieldSchema) -> FormField:
    values = data.model_dump(exclude_none=True, exclude={"validation"})
    validation = FieldValidation(**data.validation.model_dump()) if data.validation else None
    return FormField(validation=validation, **values)


def _form_from_schema(data: BaseModel) -> Form:
    values = data.model_dump(exclude_none=True, exclude={"fields"})
    return Form(fields=[_field_from_schema(f) for f in data.fields], **values)
