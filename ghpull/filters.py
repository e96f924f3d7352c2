"""
filters — Select the open issues assigned to you with a matching label and status.
"""

from .models import OPEN


def parse_labels(text):
    """Split the comma-separated labels setting exactly as written."""
    return text.split(",")


class FilterCriteria:
    __slots__ = ("assignee", "labels", "status")

    def __init__(self, assignee, labels, status):
        self.assignee = assignee
        self.labels = tuple(labels)
        self.status = status

    @classmethod
    def from_settings(cls, settings):
        return cls(settings.assignee, parse_labels(settings.labels), settings.status)

    def matches(self, issue):
        if not issue:
            return False
        if issue.state != OPEN:
            return False
        if self.assignee not in issue.assignees:
            return False
        if not any(label in issue.labels for label in self.labels):
            return False
        return issue.status == self.status

    def __repr__(self):
        return f"FilterCriteria({self.assignee!r}, {list(self.labels)!r}, {self.status!r})"


def select_issues(issues, criteria):
    """Return the issues matching every criterion, in their original order."""
    return [issue for issue in issues if criteria.matches(issue)]
