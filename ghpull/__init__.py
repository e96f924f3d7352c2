"""
ghpull — Pull GitHub Project (v2) issues into a markdown note.

Usage:
    ghpull                       # pull into the configured note
    ghpull pull --note NOTE.md   # pull into a specific note
    ghpull preview               # show the checklist only
    ghpull --help                # CLI flags reference

Requires: gh CLI installed; a token with the `project` scope.
"""

from .cli import main
