"""End-to-end tests for the pull pipeline with a fake transport and store."""

from __future__ import annotations

import threading

import pytest

from ghpull import pull as pull_module
from ghpull.errors import ConfigurationMissing, NoActiveDocument, PullInProgress, RemoteFailure
from ghpull.notes import EditorState, Note
from ghpull.pull import preview, pull
from tests.helpers import FakeGraphQL, make_draft, make_node, make_page


def board_pages():
    return [
        make_page([
            make_node(title="Mine", url="https://github.com/acme/web/issues/1"),
            make_node(title="Bobs", assignees=("bob",)),
            make_draft(),
        ], True, "c1"),
        make_page([
            make_node(title="Closed", state="CLOSED"),
            make_node(title="Urgent", labels=("urgent",), url="https://github.com/acme/web/issues/4"),
            make_node(title="Todo", status="Todo"),
        ], False, "c2"),
    ]


def test_pull_appends_checklist(settings) -> None:
    state = EditorState(Note("Today", "# Today"))
    fake = FakeGraphQL(board_pages())
    result = pull(state, settings, graphql=fake)

    assert len(fake.calls) == 2
    assert result.fetched == 5
    assert [i.title for i in result.issues] == ["Mine", "Urgent"]
    assert state.editing_note.body == (
        "# Today\n\n"
        "## In Progress\n"
        "- [ ] [Mine](https://github.com/acme/web/issues/1)\n"
        "- [ ] [Urgent](https://github.com/acme/web/issues/4)\n"
    )
    assert state.changed is True
    assert len(state.dispatched) == 2


def test_assignee_scenario(settings) -> None:
    fake = FakeGraphQL([make_page([
        make_node(title="a", assignees=("alice",), labels=("bug",)),
        make_node(title="b", assignees=("bob",), labels=("bug",)),
    ])])
    result = preview(settings, graphql=fake)
    assert [i.title for i in result.issues] == ["a"]


def test_missing_token_makes_no_network_call(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("GHPULL_WORKSPACE", str(tmp_path))
    for key in ("GHPULL_CONFIG", "GHPULL_TOKEN", "GH_TOKEN", "GITHUB_TOKEN"):
        monkeypatch.delenv(key, raising=False)
    for key, value in {"PROJECT_ID": "7", "ORGANIZATION_NAME": "acme", "ASSIGNEE": "alice",
                       "STATUS": "In Progress", "LABELS": "bug"}.items():
        monkeypatch.setenv(f"GHPULL_{key}", value)

    fake = FakeGraphQL(board_pages())
    notes = []
    state = EditorState(Note(body="# Today"))
    with pytest.raises(ConfigurationMissing):
        pull(state, graphql=fake, notify=notes.append)
    assert len(fake.calls) == 0
    assert len(notes) == 1
    assert state.dispatched == []


def test_no_active_document_leaves_nothing_dispatched(settings) -> None:
    state = EditorState()
    with pytest.raises(NoActiveDocument):
        pull(state, settings, graphql=FakeGraphQL(board_pages()))
    assert state.dispatched == []


def test_remote_failure_leaves_note_untouched(settings) -> None:
    def broken(query, variables=None, token=None):
        raise RemoteFailure("HTTP 502")

    state = EditorState(Note(body="# Today"))
    with pytest.raises(RemoteFailure):
        pull(state, settings, graphql=broken)
    assert state.editing_note.body == "# Today"
    assert state.dispatched == []


def test_empty_selection_still_writes_heading(settings) -> None:
    state = EditorState(Note(body="x"))
    pull(state, settings, graphql=FakeGraphQL([make_page([])]))
    assert state.editing_note.body == "x\n\n## In Progress\n"


def test_preview_does_not_need_a_store(settings) -> None:
    result = preview(settings, graphql=FakeGraphQL(board_pages()))
    assert result.markdown.startswith("## In Progress\n")
    assert len(result.issues) == 2


def test_reentrant_pull_is_rejected(settings) -> None:
    entered = threading.Event()
    release = threading.Event()

    def slow(query, variables=None, token=None):
        entered.set()
        release.wait(5)
        return make_page([])

    first = threading.Thread(target=pull, args=(EditorState(Note()), settings), kwargs={"graphql": slow})
    first.start()
    try:
        assert entered.wait(5)
        with pytest.raises(PullInProgress):
            pull(EditorState(Note()), settings, graphql=FakeGraphQL([make_page([])]))
    finally:
        release.set()
        first.join(5)
    assert not pull_module._PULL_LOCK.locked()


def test_notify_unused_when_settings_given(settings) -> None:
    notes = []
    pull(EditorState(Note(body="x")), settings, graphql=FakeGraphQL([make_page([])]), notify=notes.append)
    preview(settings, graphql=FakeGraphQL([make_page([])]), notify=notes.append)
    assert notes == []
