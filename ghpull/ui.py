"""
ui — Terminal output primitives for ghpull.

Colours and the notification helpers used in place of the editor's
notification area.
"""

import sys

# ── Colour constants ─────────────────────────────────────────────────────

CYAN    = "\033[36m"
BOLD    = "\033[1m"
DIM     = "\033[2m"
GREEN   = "\033[32m"
RED     = "\033[31m"
RESET   = "\033[0m"


# ── Notifications ────────────────────────────────────────────────────────

def notify_error(message, file=None):
    """Show one dismissable error line on stderr."""
    print(f"  {RED}❌ {message}{RESET}", file=file or sys.stderr)


def notify_success(message, file=None):
    print(f"  {GREEN}✓ {message}{RESET}", file=file or sys.stdout)


def detail(message, file=None):
    print(f"    {DIM}{message}{RESET}", file=file or sys.stdout)


def heading(title, file=None):
    print(f"\n  {BOLD}{title}{RESET}\n", file=file or sys.stdout)
