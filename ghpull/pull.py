"""
pull — The fetch → filter → render → merge pipeline.

    settings  = load_settings()          fresh per run
    records   = fetch_project_items()    one GraphQL call per page
    issues    = select_issues()
    markdown  = render_checklist()
    merge_into(store, markdown)          note written exactly once

Any failure leaves the note untouched.
"""

import threading
from contextlib import contextmanager

from .config import load_settings
from .errors import PullInProgress
from .filters import FilterCriteria, select_issues
from .gh import fetch_project_items, gh_graphql
from .markdown import render_checklist
from .notes import merge_into
from .ui import notify_error

_PULL_LOCK = threading.Lock()


class PullResult:
    __slots__ = ("fetched", "issues", "markdown")

    def __init__(self, fetched, issues, markdown):
        self.fetched = fetched
        self.issues = issues
        self.markdown = markdown

    def __repr__(self):
        return f"PullResult(fetched={self.fetched}, selected={len(self.issues)})"


@contextmanager
def _single_run():
    if not _PULL_LOCK.acquire(blocking=False):
        raise PullInProgress()
    try:
        yield
    finally:
        _PULL_LOCK.release()


def _collect(settings, graphql):
    graphql = graphql or gh_graphql
    records = fetch_project_items(
        settings.organization_name,
        settings.project_number,
        settings.token,
        graphql=graphql,
    )
    issues = select_issues(records, FilterCriteria.from_settings(settings))
    return records, issues


def preview(settings=None, *, graphql=None, notify=notify_error):
    """Fetch, filter and render without touching any note.

    `notify` is used only when `settings` is None and they are loaded here.
    """
    if settings is None:
        settings = load_settings(notify=notify)
    records, issues = _collect(settings, graphql)
    return PullResult(len(records), issues, render_checklist(settings.status, issues))


def pull(store, settings=None, *, graphql=None, notify=notify_error):
    """Append the checklist of matching issues to the store's active note.

    `notify` is used only when `settings` is None and they are loaded here.
    """
    with _single_run():
        if settings is None:
            settings = load_settings(notify=notify)
        records, issues = _collect(settings, graphql)
        markdown = render_checklist(settings.status, issues)
        merge_into(store, markdown)
        return PullResult(len(records), issues, markdown)
