"""
errors — Exceptions raised by the pull pipeline.

Every failure of an invocation is a PullError; the CLI reports it and exits.
"""


class PullError(Exception):
    """Base class for a failed pull."""


class ConfigurationMissing(PullError):
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"missing settings: {', '.join(self.missing)}")


class ConfigurationInvalid(PullError):
    pass


class NoActiveDocument(PullError):
    def __init__(self, message="no note is currently being edited"):
        super().__init__(message)


class RemoteFailure(PullError):
    """The GraphQL call failed: transport, auth, or response shape."""


class PullInProgress(PullError):
    def __init__(self, message="a pull is already running"):
        super().__init__(message)


class NoteWriteFailed(PullError):
    """The merged body could not be saved; the note keeps its old content."""
