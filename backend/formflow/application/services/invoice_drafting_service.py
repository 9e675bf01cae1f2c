"""Invoice drafting — defaults, numbering and simulated email delivery."""

import logging
from datetime import date, timedelta

from formflow.application.schemas import (
    EmailPreview,
    InvoiceClientSchema,
    InvoiceCreate,
    InvoiceSchedule,
    InvoiceUpdate,
    ScheduleType,
)
from formflow.domain.entities import Invoice, InvoiceStatus

from .domain_store import DomainStore
from .settings_service import AppSettingsService

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_DAYS = 30

_TEMPLATES = {
    "invoice": "invoice_template",
    "reminder": "reminder_template",
    "receipt": "receipt_template",
}

_CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£"}


def format_currency(amount: float, currency: str = "USD") -> str:
    """``1234.5`` → ``$1,234.50``; unknown currencies are prefixed with their code."""
    symbol = _CURRENCY_SYMBOLS.get(currency.upper())
    sign = "-" if amount < 0 else ""
    body = f"{abs(amount):,.2f}"
    if symbol:
        return f"{sign}{symbol}{body}"
    return f"{sign}{currency.upper()} {body}"


def advance_number(next_number: str, today: date) -> str:
    """``2025-001`` → ``<current year>-002``. The counter keeps running across years."""
    counter = int(next_number.split("-")[1])
    return f"{today.year}-{counter + 1:03d}"


def format_date(value: date) -> str:
    """``date(2025, 4, 5)`` → ``4/5/2025``."""
    return f"{value.month}/{value.day}/{value.year}"


def render_template(template: str, values: dict[str, str]) -> str:
    """Substitute the first ``{token}`` of each placeholder literally. No escaping."""
    for token, value in values.items():
        template = template.replace("{" + token + "}", value, 1)
    return template


class InvoiceDraftingService:
    """Prepares new invoices from the invoicing defaults and previews their emails.

    Nothing is ever delivered; ``send_invoice`` only composes the message and
    moves the invoice to ``sent``.
    """

    def __init__(
        self,
        store: DomainStore,
        settings: AppSettingsService,
        default_currency: str = "USD",
    ):
        self._store = store
        self._settings = settings
        self._default_currency = default_currency

    def new_draft(self, client_id: str | None = None, today: date | None = None) -> dict:
        """Return an editable draft payload for ``InvoiceCreate``.

        The client, when given, is copied in as it is right now.
        """
        today = today or date.today()
        defaults = self._settings.get_invoicing()
        draft = {
            "number": f"{defaults.prefix}{defaults.next_number}",
            "issue_date": today,
            "due_date": today + timedelta(days=DEFAULT_PAYMENT_DAYS),
            "items": [],
            "notes": defaults.notes,
            "terms": defaults.terms,
            "tax_rate": defaults.default_tax_rate,
            "status": InvoiceStatus.DRAFT,
            "currency": self._default_currency,
        }
        if client_id is not None:
            client = self._store.get_client(client_id)
            draft["client"] = InvoiceClientSchema.model_validate(client, from_attributes=True)
        return draft

    def create_invoice(self, draft: InvoiceCreate | dict, today: date | None = None) -> Invoice:
        """Add the invoice to the store, then advance the next invoice number."""
        invoice = self._store.add_invoice(draft)
        defaults = self._settings.get_invoicing()
        next_number = advance_number(defaults.next_number, today or date.today())
        self._settings.update_invoicing({"next_number": next_number})
        logger.info("Invoice #%s created; next number is %s", invoice.number, next_number)
        return invoice

    def compose_email(self, invoice: Invoice, template: str = "invoice") -> EmailPreview:
        if template not in _TEMPLATES:
            raise ValueError(f"Unknown email template '{template}'")
        company = self._settings.get_company()
        email = self._settings.get_email()
        body = render_template(
            getattr(email, _TEMPLATES[template]),
            {
                "client_name": invoice.client.name,
                "invoice_number": invoice.number,
                "amount": format_currency(invoice.total, invoice.currency),
                "due_date": format_date(invoice.due_date),
                "company_name": company.company_name,
            },
        )
        return EmailPreview(
            to=invoice.client.email,
            subject=f"Invoice {invoice.number} from {company.company_name}",
            body=body,
        )

    def send_invoice(self, invoice_id: str) -> EmailPreview:
        """Simulate delivery: compose the email and mark the invoice as sent."""
        invoice = self._store.get_invoice(invoice_id)
        preview = self.compose_email(invoice)
        self._store.update_invoice(invoice_id, InvoiceUpdate(status=InvoiceStatus.SENT))
        logger.info("Simulated delivery of invoice #%s to %s", invoice.number, preview.to)
        return preview

    def schedule(
        self,
        invoice_number: str,
        *,
        send_on: date | None = None,
        monthly_day: int | None = None,
    ) -> InvoiceSchedule | None:
        """Record when ``invoice_number`` should be sent.

        ``send_on`` schedules a single delivery, ``monthly_day`` a recurring one.
        With neither, the invoice is sent manually and nothing is stored.
        """
        if send_on is not None and monthly_day is not None:
            raise ValueError("Pass either send_on or monthly_day, not both")
        if send_on is not None:
            schedule = InvoiceSchedule(type=ScheduleType.SCHEDULED, date=send_on)
        elif monthly_day is not None:
            schedule = InvoiceSchedule(type=ScheduleType.MONTHLY, day=monthly_day)
        else:
            return None
        self._settings.set_schedule(invoice_number, schedule)
        return schedule

    def mark_overdue(self, today: date | None = None) -> list[str]:
        """Move every sent invoice past its due date to ``overdue``. Returns their ids."""
        today = today or date.today()
        moved = []
        for invoice in self._store.snapshot().invoices:
            if not invoice.is_past_due(today):
                continue
            if self._store.update_invoice(invoice.id, InvoiceUpdate(status=InvoiceStatus.OVERDUE)):
                moved.append(invoice.id)
        if moved:
            logger.info("Marked %d invoice(s) overdue", len(moved))
        return moved

