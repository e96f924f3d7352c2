"""Board item builders and a fake GraphQL transport shared by the test suites."""

from __future__ import annotations


def make_node(status="In Progress", state="OPEN", title="Fix bug", url="https://github.com/acme/web/issues/1",
              labels=("bug",), assignees=("alice",)) -> dict:
    return {
        "fieldValueByName": None if status is None else {"name": status},
        "content": {
            "state": state,
            "title": title,
            "url": url,
            "labels": {"nodes": [{"name": name} for name in labels]},
            "assignees": {"nodes": [{"login": login} for login in assignees]},
        },
    }


def make_draft(status="In Progress") -> dict:
    return {"fieldValueByName": {"name": status}, "content": {}}


def make_page(nodes, has_next_page=False, end_cursor=None) -> dict:
    return {
        "organization": {
            "projectV2": {
                "items": {
                    "pageInfo": {"endCursor": end_cursor, "hasNextPage": has_next_page},
                    "nodes": list(nodes),
                }
            }
        }
    }


class FakeGraphQL:
    """Stands in for gh_graphql; serves canned pages and records every call."""

    def __init__(self, pages):
        self.pages = list(pages)
        self.calls = []

    def __call__(self, query, variables=None, token=None):
        self.calls.append((query, dict(variables or {}), token))
        return self.pages[len(self.calls) - 1]
