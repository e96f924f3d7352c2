"""
models — Issue records and the GraphQL response shapes they come from.

Only the fields the project-items query actually selects are modelled.
Anything GitHub may leave out (the Status value, non-issue content) is
optional, so a draft item parses cleanly and is dropped during normalisation.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

OPEN = "OPEN"
CLOSED = "CLOSED"


# ═════════════════════════════════════════════════════════════════════════════
# WIRE SHAPES
# ═════════════════════════════════════════════════════════════════════════════

class _Wire(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LabelNode(_Wire):
    name: str


class UserNode(_Wire):
    login: str


class LabelConnection(_Wire):
    nodes: list[LabelNode] = []


class UserConnection(_Wire):
    nodes: list[UserNode] = []


class StatusValue(_Wire):
    name: Optional[str] = None


class IssueContent(_Wire):
    state: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    labels: Optional[LabelConnection] = None
    assignees: Optional[UserConnection] = None

    def is_empty(self):
        # `... on Issue` selects nothing for drafts and PRs, leaving `{}`.
        return not self.model_dump(exclude_none=True)


class ProjectItemNode(_Wire):
    status: Optional[StatusValue] = Field(None, alias="fieldValueByName")
    content: Optional[IssueContent] = None


class PageInfo(_Wire):
    end_cursor: Optional[str] = Field(None, alias="endCursor")
    has_next_page: bool = Field(alias="hasNextPage")


class ItemsPage(_Wire):
    page_info: PageInfo = Field(alias="pageInfo")
    nodes: list[Optional[ProjectItemNode]] = []


# ═════════════════════════════════════════════════════════════════════════════
# ISSUE RECORD
# ═════════════════════════════════════════════════════════════════════════════

class IssueRecord:
    """One issue on the board, flattened for filtering and rendering."""

    __slots__ = ("status", "state", "title", "url", "labels", "assignees")

    def __init__(self, status, state, title, url, labels=(), assignees=()):
        self.status = status
        self.state = state
        self.title = title
        self.url = url
        self.labels = frozenset(labels)
        self.assignees = frozenset(assignees)

    @classmethod
    def from_node(cls, node):
        content = node.content
        labels = content.labels.nodes if content.labels else []
        assignees = content.assignees.nodes if content.assignees else []
        return cls(
            status=node.status.name,
            state=content.state,
            title=content.title,
            url=content.url,
            labels=[label.name for label in labels],
            assignees=[user.login for user in assignees],
        )

    def _key(self):
        return (self.status, self.state, self.title, self.url, self.labels, self.assignees)

    def __eq__(self, other):
        if not isinstance(other, IssueRecord):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f"IssueRecord({self.title!r}, {self.state}, {self.status!r})"
