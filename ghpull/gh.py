"""
gh — GitHub CLI GraphQL wrapper and the project board fetcher.
"""

import json
import os
import subprocess

from pydantic import ValidationError

from .errors import RemoteFailure
from .models import IssueRecord, ItemsPage


# labels/assignees stop at the first 20; extra entries are silently dropped.
PROJECT_ITEMS_QUERY = """
query ($login: String!, $projectID: Int!, $endCursor: String!) {
  organization(login: $login) {
    projectV2(number: $projectID) {
      items(first: 100, after: $endCursor) {
        pageInfo {
          endCursor
          hasNextPage
        }
        nodes {
          fieldValueByName(name: "Status") {
            ... on ProjectV2ItemFieldSingleSelectValue {
              name
            }
          }
          content {
            ... on Issue {
              state
              title
              url
              labels(first: 20) {
                nodes {
                  name
                }
              }
              assignees(first: 20) {
                nodes {
                  login
                }
              }
            }
          }
        }
      }
    }
  }
}
"""


# ── Low-level gh CLI ─────────────────────────────────────────────────────

def gh_graphql(query, variables=None, token=None, *, runner=subprocess.run):
    """Run one query through `gh api graphql` and return its `data` object."""
    cmd = ["gh", "api", "graphql", "-f", f"query={query}"]
    for name, value in (variables or {}).items():
        # -F lets gh send the value as a JSON number; -f always sends a string
        flag = "-F" if isinstance(value, int) and not isinstance(value, bool) else "-f"
        cmd.extend([flag, f"{name}={value}"])
    env = None
    if token:
        cmd.extend(["-H", f"Authorization: token {token}"])
        # gh refuses `api` calls without a stored login unless GH_TOKEN is set
        env = {**os.environ, "GH_TOKEN": token}

    try:
        r = runner(cmd, capture_output=True, text=True, env=env)
    except FileNotFoundError as exc:
        raise RemoteFailure("gh CLI not found; install it from https://cli.github.com") from exc
    if r.returncode != 0:
        raise RemoteFailure(f"GraphQL error: {r.stderr.strip()}")

    try:
        payload = json.loads(r.stdout)
    except json.JSONDecodeError as exc:
        raise RemoteFailure(f"GraphQL response is not JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise RemoteFailure("GraphQL response root must be a JSON object")
    if payload.get("errors"):
        messages = "; ".join(
            e.get("message", str(e)) if isinstance(e, dict) else str(e)
            for e in payload["errors"]
        )
        raise RemoteFailure(f"GraphQL error: {messages}")
    data = payload.get("data")
    if not isinstance(data, dict):
        raise RemoteFailure("GraphQL response has no data")
    return data


# ── Project items ────────────────────────────────────────────────────────

def _items_page(data):
    try:
        items = data["organization"]["projectV2"]["items"]
        return ItemsPage.model_validate(items)
    except (KeyError, TypeError) as exc:
        raise RemoteFailure(f"Unexpected project items response: missing {exc}") from exc
    except ValidationError as exc:
        raise RemoteFailure(f"Unexpected project items response: {exc}") from exc


def fetch_item_nodes(organization, project_number, token, *, graphql=gh_graphql):
    """Page through every item of a project board, in board order."""
    nodes = []
    has_next_page = True
    end_cursor = ""
    while has_next_page:
        data = graphql(
            PROJECT_ITEMS_QUERY,
            {"login": organization, "projectID": project_number, "endCursor": end_cursor},
            token,
        )
        page = _items_page(data)
        has_next_page = page.page_info.has_next_page
        if has_next_page and page.page_info.end_cursor is None:
            raise RemoteFailure("Project items page has more results but no endCursor")
        end_cursor = page.page_info.end_cursor
        nodes.extend(page.nodes)
    return nodes


def normalize_items(nodes):
    """Drop draft / status-less items and flatten the rest to IssueRecords."""
    records = []
    for node in nodes:
        if node is None:
            continue
        if node.status is None or node.status.name is None:
            continue
        if node.content is None or node.content.is_empty():
            continue
        records.append(IssueRecord.from_node(node))
    return records


def fetch_project_items(organization, project_number, token, *, graphql=gh_graphql):
    nodes = fetch_item_nodes(organization, project_number, token, graphql=graphql)
    return normalize_items(nodes)
