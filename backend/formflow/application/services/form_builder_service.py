"""Form builder — field-level edits applied through the store."""

import logging
from typing import Any, Literal

from formflow.application.schemas import FormCreate, FormFieldSchema, FormUpdate
from formflow.domain.entities import Form, FormField, FormFieldType
from formflow.domain.exceptions import EntityNotFoundError

from .domain_store import DomainStore

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = ("Option 1", "Option 2", "Option 3")

EMBED_TEMPLATE = """<iframe
  src="{base_url}/embed/form/{form_id}"
  width="100%"
  height="600"
  frameborder="0"
></iframe>"""


class FormBuilderService:
    """Adds, edits, removes and reorders fields of a stored form, and duplicates forms.

    Every edit replaces the form's field list with one ``update_form`` call,
    so it is atomic and, under the default activity policy, silent.
    Unknown form or field ids are ignored.
    """

    def __init__(self, store: DomainStore, embed_base_url: str = "https://your-domain.com"):
        self._store = store
        self._embed_base_url = embed_base_url.rstrip("/")

    def add_field(self, form_id: str, field_type: FormFieldType | str) -> FormField | None:
        form = self._load(form_id)
        if form is None:
            return None
        field_type = FormFieldType(field_type)
        new_field = FormField(
            type=field_type,
            label=f"New {field_type.value} field",
            placeholder=f"Enter {field_type.value}",
            required=False,
            options=list(DEFAULT_OPTIONS) if field_type.has_options else None,
        )
        form.fields.append(new_field)
        self._save(form)
        return new_field

    def update_field(self, form_id: str, field_id: str, **changes: Any) -> bool:
        form = self._load(form_id)
        if form is None:
            return False
        index = form.field_index(field_id)
        if index is None:
            return False
        current = _to_schema(form.fields[index])
        # Re-validate the merged field so a bad edit never reaches the store.
        merged = FormFieldSchema.model_validate({**current.model_dump(), **changes, "id": field_id})
        fields = [_to_schema(f) for f in form.fields]
        fields[index] = merged
        return self._store.update_form(form_id, FormUpdate(fields=fields))

    def remove_field(self, form_id: str, field_id: str) -> bool:
        form = self._load(form_id)
        if form is None:
            return False
        index = form.field_index(field_id)
        if index is None:
            return False
        del form.fields[index]
        return self._save(form)

    def move_field(self, form_id: str, field_id: str, direction: Literal["up", "down"]) -> bool:
        """Swap a field with its neighbour. The ends of the list do not wrap."""
        form = self._load(form_id)
        if form is None:
            return False
        index = form.field_index(field_id)
        if index is None:
            return False
        target = index - 1 if direction == "up" else index + 1
        if target < 0 or target >= len(form.fields):
            return False
        form.fields[index], form.fields[target] = form.fields[target], form.fields[index]
        return self._save(form)

    def duplicate_form(self, form_id: str) -> Form | None:
        """Add an unpublished copy of a form with freshly generated field ids."""
        form = self._load(form_id)
        if form is None:
            return None
        duplicate = FormCreate(
            title=f"{form.title} (Copy)",
            description=form.description,
            fields=[_to_schema(f).model_copy(update={"id": None}) for f in form.fields],
            published=False,
        )
        return self._store.add_form(duplicate)

    def embed_code(self, form_id: str) -> str:
        return EMBED_TEMPLATE.format(base_url=self._embed_base_url, form_id=form_id)

    def _load(self, form_id: str) -> Form | None:
        try:
            return self._store.get_form(form_id)
        except EntityNotFoundError:
            logger.debug("Form builder ignored unknown form %s", form_id)
            return None

    def _save(self, form: Form) -> bool:
        return self._store.update_form(
            form.id, FormUpdate(fields=[_to_schema(f) for f in form.fields])
        )


def _to_schema(form_field: FormField) -> FormFieldSchema:
    return FormFieldSchema.model_validate(form_field, from_attributes=True)
