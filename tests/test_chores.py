"""Tests for core.chores — both store backends."""

import pytest

from core.errors import MissingField, NotCompleted, NotFound


class TestCreateAndList:
    def test_created_chore_is_listed_pending(self, chore_store):
        chore = chore_store.create("Dishes", "Alice", created_by="bob")
        assert chore.completed is False

        chores = chore_store.list()
        assert len(chores) == 1
        assert chores[0].id == chore.id
        assert chores[0].title == "Dishes"
        assert chores[0].assigned_to == "Alice"
        assert chores[0].created_by == "bob"
        assert chores[0].completed is False

    def test_ids_start_at_one_and_increase(self, chore_store):
        first = chore_store.create("A", "X", created_by="bob")
        second = chore_store.create("B", "Y", created_by="bob")
        assert first.id == 1
        assert second.id == 2

    def test_list_keeps_insertion_order(self, chore_store):
        for title in ["C", "A", "B"]:
            chore_store.create(title, "X", created_by="bob")
        assert [c.title for c in chore_store.list()] == ["C", "A", "B"]

    @pytest.mark.parametrize("title,assigned_to", [("", "Alice"), ("Dishes", "")])
    def test_create_requires_title_and_assignee(self, chore_store, title, assigned_to):
        with pytest.raises(MissingField) as exc:
            chore_store.create(title, assigned_to, created_by="bob")
        assert exc.value.message == "title and assignedTo required"
        assert chore_store.list() == []

    def test_listed_chores_are_copies(self, chore_store):
        chore_store.create("Dishes", "Alice", created_by="bob")
        chore_store.list()[0].completed = True
        assert chore_store.list()[0].completed is False

    def test_json_uses_camel_case_keys(self, chore_store):
        chore = chore_store.create("Dishes", "Alice", created_by="bob")
        assert chore.to_json() == {
            "id": 1,
            "title": "Dishes",
            "assignedTo": "Alice",
            "completed": False,
            "createdBy": "bob",
        }


class TestComplete:
    def test_complete_unknown_id(self, chore_store):
        with pytest.raises(NotFound):
            chore_store.complete(42)

    def test_complete_sets_flag_and_is_repeatable(self, chore_store):
        chore = chore_store.create("Dishes", "Alice", created_by="bob")
        assert chore_store.complete(chore.id).completed is True
        assert chore_store.complete(chore.id).completed is True
        assert chore_store.list()[0].completed is True


class TestDelete:
    def test_delete_pending_chore_fails(self, chore_store):
        chore = chore_store.create("Dishes", "Alice", created_by="bob")
        with pytest.raises(NotCompleted):
            chore_store.delete(chore.id)
        assert len(chore_store.list()) == 1

    def test_delete_completed_then_not_found(self, chore_store):
        chore = chore_store.create("Dishes", "Alice", created_by="bob")
        chore_store.complete(chore.id)
        chore_store.delete(chore.id)
        assert chore_store.list() == []
        with pytest.raises(NotFound):
            chore_store.delete(chore.id)

    def test_ids_are_not_reused_after_delete(self, chore_store):
        chore_store.create("A", "X", created_by="bob")
        second = chore_store.create("B", "Y", created_by="bob")
        chore_store.complete(second.id)
        chore_store.delete(second.id)

        third = chore_store.create("C", "Z", created_by="bob")
        assert third.id == 3
        assert [c.id for c in chore_store.list()] == [1, 3]
