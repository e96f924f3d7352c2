"""
markdown — Render selected issues as a checklist and merge it into a note body.

Output format:
  ## <status>
  - [ ] [<title>](<url>)
  - [ ] [<title>](<url>)

Titles and URLs are inserted verbatim; a `]` or `)` in a title can break
the link.
"""


def render_checklist(status, issues):
    markdown = f"## {status}\n"
    for issue in issues:
        markdown += f"- [ ] [{issue.title}]({issue.url})\n"
    return markdown


def merge_body(body, markdown):
    return body + "\n\n" + markdown
