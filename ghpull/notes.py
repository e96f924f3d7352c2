"""
notes — Where the rendered checklist lands.

A note store exposes the body of the note currently being edited and accepts
a replacement body. Two stores ship:

  FileNoteStore   the active note is a markdown file on disk
  EditorState     an in-memory editor state (editing note + changed flag)
                  for embedding ghpull in another application
"""

import os
import shutil
import tempfile

from .errors import NoActiveDocument, NoteWriteFailed
from .markdown import merge_body


class NoteStore:
    def read_active_body(self):
        """Return the active note's body, or None when nothing is open."""
        raise NotImplementedError

    def apply_merged_body(self, body):
        """Persist `body` as the active note's body and mark it changed."""
        raise NotImplementedError


# ═════════════════════════════════════════════════════════════════════════════
# IN-MEMORY EDITOR STATE
# ═════════════════════════════════════════════════════════════════════════════

class Note:
    __slots__ = ("title", "body")

    def __init__(self, title="", body=""):
        self.title = title
        self.body = body

    def __repr__(self):
        return f"Note({self.title!r})"


class EditorState(NoteStore):
    def __init__(self, editing_note=None):
        self.editing_note = editing_note
        self.changed = False
        self.dispatched = []  # [(action, payload), ...]

    def dispatch(self, action, payload):
        self.dispatched.append((action, payload))
        if action == "editingNote.update":
            self.editing_note.body = payload["body"]
        elif action == "editor.change":
            self.changed = payload

    def read_active_body(self):
        if self.editing_note is None:
            return None
        return self.editing_note.body

    def apply_merged_body(self, body):
        if self.editing_note is None:
            raise NoActiveDocument()
        self.dispatch("editingNote.update", {"body": body})
        self.dispatch("editor.change", True)


# ═════════════════════════════════════════════════════════════════════════════
# MARKDOWN FILE
# ═════════════════════════════════════════════════════════════════════════════

class FileNoteStore(NoteStore):
    def __init__(self, path=None):
        self.path = path

    def read_active_body(self):
        if not self.path or not os.path.isfile(self.path):
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise NoActiveDocument(f"cannot read {self.path}: {exc}") from exc

    def apply_merged_body(self, body):
        if not self.path:
            raise NoActiveDocument()
        # temp file beside the note, renamed over it once fully written
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".ghpull-", suffix=".md")
        except OSError as exc:
            raise NoteWriteFailed(f"cannot write {self.path}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(body)
            if os.path.exists(self.path):
                shutil.copymode(self.path, tmp_path)
            os.replace(tmp_path, self.path)
        except (OSError, UnicodeEncodeError) as exc:
            os.unlink(tmp_path)
            raise NoteWriteFailed(f"cannot write {self.path}: {exc}") from exc


def merge_into(store, markdown):
    """Append `markdown` to the active note. Returns the new body."""
    body = store.read_active_body()
    if body is None:
        raise NoActiveDocument()
    merged = merge_body(body, markdown)
    store.apply_merged_body(merged)
    return merged
