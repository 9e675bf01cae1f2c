"""Unit tests for the FormBuilderService."""

import pytest
from pydantic import ValidationError

from formflow.application.services import DomainStore, FormBuilderService
from formflow.domain.entities import FormFieldType


@pytest.fixture
def store() -> DomainStore:
    return DomainStore()


@pytest.fixture
def builder(store: DomainStore) -> FormBuilderService:
    return FormBuilderService(store, embed_base_url="https://forms.example.com/")


@pytest.fixture
def form_id(store: DomainStore) -> str:
    return store.add_form({
        "title": "Intake",
        "fields": [
            {"id": "f1", "type": "text", "label": "Name"},
            {"id": "f2", "type": "email", "label": "Email"},
            {"id": "f3", "type": "textarea", "label": "Notes"},
        ],
    }).id


def _labels(store: DomainStore, form_id: str) -> list[str]:
    return [f.label for f in store.get_form(form_id).fields]


def test_add_text_field_defaults(builder, store, form_id):
    field = builder.add_field(form_id, "number")

    assert field.label == "New number field"
    assert field.placeholder == "Enter number"
    assert field.required is False
    assert field.options is None
    assert _labels(store, form_id)[-1] == "New number field"


def test_add_choice_field_gets_default_options(builder, store, form_id):
    field = builder.add_field(form_id, FormFieldType.RADIO)
    stored = store.get_form(form_id).fields[-1]
    assert field.options == ["Option 1", "Option 2", "Option 3"]
    assert stored.id == field.id
    assert stored.options == field.options


def test_builder_edits_are_silent(builder, store, form_id):
    builder.add_field(form_id, "text")
    builder.move_field(form_id, "f1", "down")
    builder.remove_field(form_id, "f3")

    assert [a.action for a in store.snapshot().stats.recent_activity] == ['Created form "Intake"']


def test_update_field(builder, store, form_id):
    assert builder.update_field(form_id, "f2", label="Work email", required=True) is True
    field = store.get_form(form_id).fields[1]
    assert (field.id, field.label, field.required) == ("f2", "Work email", True)


def test_update_field_rejects_invalid_values(builder, store, form_id):
    with pytest.raises(ValidationError):
        builder.update_field(form_id, "f2", label="")
    assert _labels(store, form_id) == ["Name", "Email", "Notes"]


def test_remove_field(builder, store, form_id):
    assert builder.remove_field(form_id, "f2") is True
    assert _labels(store, form_id) == ["Name", "Notes"]


def test_move_field(builder, store, form_id):
    assert builder.move_field(form_id, "f3", "up") is True
    assert _labels(store, form_id) == ["Name", "Notes", "Email"]
    assert builder.move_field(form_id, "f1", "down") is True
    assert _labels(store, form_id) == ["Notes", "Name", "Email"]


def test_move_at_the_edges_is_a_no_op(builder, store, form_id):
    assert builder.move_field(form_id, "f1", "up") is False
    assert builder.move_field(form_id, "f3", "down") is False
    assert _labels(store, form_id) == ["Name", "Email", "Notes"]


def test_unknown_ids_are_ignored(builder, form_id):
    assert builder.add_field("missing", "text") is None
    assert builder.remove_field(form_id, "missing") is False
    assert builder.move_field("missing", "f1", "up") is False
    assert builder.update_field(form_id, "missing", label="x") is False


def test_embed_code(builder):
    code = builder.embed_code("form-1")
    assert 'src="https://forms.example.com/embed/form/form-1"' in code
    assert code.startswith("<iframe")
    assert code.endswith("></iframe>")


def test_duplicate_form(builder, store, form_id):
    store.update_form(form_id, {"published": True, "description": "New clients"})

    duplicate = builder.duplicate_form(form_id)

    assert duplicate.id != form_id
    assert duplicate.title == "Intake (Copy)"
    assert duplicate.description == "New clients"
    assert duplicate.published is False
    assert duplicate.response_count == 0
    assert [f.label for f in duplicate.fields] == ["Name", "Email", "Notes"]
    assert {f.id for f in duplicate.fields}.isdisjoint({"f1", "f2", "f3"})

    stats = store.snapshot().stats
    assert stats.total_forms == 2
    assert stats.recent_activity[0].action == 'Created form "Intake (Copy)"'


def test_duplicate_is_independent_of_source(builder, store, form_id):
    duplicate = builder.duplicate_form(form_id)
    builder.update_field(duplicate.id, duplicate.fields[0].id, label="Full name")

    assert _labels(store, form_id) == ["Name", "Email", "Notes"]
    assert builder.duplicate_form("missing") is None
