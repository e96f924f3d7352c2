"""
views — Read-only output for the `config` and `preview` commands.
"""

from .ui import BOLD, CYAN, DIM, RESET, detail, heading


def view_config(settings):
    heading("⚙️  Settings")
    values = settings.masked()
    width = max(len(k) for k in values) + 2
    for key, value in values.items():
        shown = value if value is not None else f"{DIM}(not set){RESET}"
        print(f"    {key:{width}s}{shown}")
    print()
    detail(f"Config file: {settings.source or 'none (environment only)'}")
    url = f"https://github.com/orgs/{settings.organization_name}/projects/{settings.project_id}"
    detail(f"Board: {url}")
    print()


def view_preview(result):
    heading(f"📋 {len(result.issues)} of {result.fetched} board issues match")
    for issue in result.issues:
        labels = ", ".join(sorted(issue.labels))
        print(f"    {CYAN}•{RESET} {BOLD}{issue.title}{RESET}  {DIM}[{labels}]{RESET}")
        detail(issue.url)
    print()
    print(result.markdown, end="")
