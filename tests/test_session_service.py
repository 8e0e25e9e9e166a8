# tests/test_session_service.py
import pytest

from conftest import make_poem


def test_completed_generation_becomes_current(session):
    token = session.begin_generation()
    assert session.is_generating

    assert session.complete_generation(token, make_poem(1))
    assert session.current_poem == make_poem(1)
    assert not session.is_generating

def test_stale_result_is_discarded(session):
    first = session.begin_generation()
    second = session.begin_generation()

    assert not session.complete_generation(first, make_poem(1))
    assert session.current_poem is None
    assert session.is_generating

    assert session.complete_generation(second, make_poem(2))
    assert session.current_poem == make_poem(2)

def test_stale_failure_does_not_override_newer_poem(session):
    first = session.begin_generation()
    second = session.begin_generation()
    session.complete_generation(second, make_poem(2))

    assert not session.fail_generation(first, "Failed to generate poem. Please try again.")
    assert session.error is None
    assert session.current_poem == make_poem(2)

def test_failure_keeps_previous_poem(session):
    token = session.begin_generation()
    session.complete_generation(token, make_poem(1))

    token = session.begin_generation()
    assert session.fail_generation(token, "boom")
    assert session.error == "boom"
    assert session.current_poem == make_poem(1)
    assert not session.is_generating

def test_toggle_save(session, store):
    session.select_poem(make_poem(1))

    assert session.toggle_save() == "saved"
    assert session.is_current_saved()
    assert store.is_saved(make_poem(1).id)

    assert session.toggle_save() == "removed"
    assert not session.is_current_saved()
    assert store.list() == []

def test_toggle_save_without_poem(session):
    with pytest.raises(LookupError):
        session.toggle_save()
    assert not session.is_current_saved()
