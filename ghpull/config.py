"""
config — Settings for one ghpull run.

Configuration can be provided with a JSON file and overridden per key with
environment variables. File search order:
1) --config PATH (explicit path)
2) $GHPULL_CONFIG
3) <workspace>/.ghpull/config.json
4) ~/.ghpull/config.json

Environment overrides: GHPULL_TOKEN, GHPULL_PROJECT_ID, ...; the token also
falls back to $GH_TOKEN and $GITHUB_TOKEN.

Settings are loaded fresh for every invocation and passed down explicitly.
"""

import json
import os

from .errors import ConfigurationInvalid, ConfigurationMissing
from .ui import notify_error


REQUIRED_KEYS = ("token", "project_id", "organization_name", "assignee", "status", "labels")
OPTIONAL_KEYS = ("note",)

_TOKEN_FALLBACKS = ("GH_TOKEN", "GITHUB_TOKEN")


def workspace(environ=None):
    environ = os.environ if environ is None else environ
    return environ.get("GHPULL_WORKSPACE") or os.getcwd()


def _candidate_paths(path=None, environ=None):
    environ = os.environ if environ is None else environ
    return [
        path,
        environ.get("GHPULL_CONFIG"),
        os.path.join(workspace(environ), ".ghpull", "config.json"),
        os.path.expanduser("~/.ghpull/config.json"),
    ]


def find_config_file(path=None, environ=None):
    for candidate in _candidate_paths(path, environ):
        if candidate and os.path.isfile(candidate):
            return candidate
    return None


def _read_config_file(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationInvalid(f"cannot read {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationInvalid(f"{path}: config root must be a JSON object")
    return data


def _file_value(values, key, source):
    """A config file value as a string; only project_id may be a JSON number."""
    value = values.get(key)
    if value is None or isinstance(value, str):
        return value
    if key == "project_id" and isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise ConfigurationInvalid(
        f"{source}: \"{key}\" must be a string, got {type(value).__name__}"
        + (" (write labels comma-separated)" if key == "labels" else "")
    )


def _is_set(value):
    if value is None:
        return False
    return not (isinstance(value, str) and not value.strip())


class Settings:
    """The six required keys plus the optional note path."""

    def __init__(self, token, project_id, organization_name, assignee, status, labels,
                 note=None, source=None):
        self.token = token
        self.project_id = str(project_id)
        self.organization_name = organization_name
        self.assignee = assignee
        self.status = status
        self.labels = labels
        self.note = note
        self.source = source

    @property
    def project_number(self):
        try:
            return int(self.project_id)
        except ValueError:
            raise ConfigurationInvalid(
                f"project_id must be a project number, got {self.project_id!r}"
            ) from None

    def masked(self):
        """Settings as a dict with the token hidden, for display."""
        values = {key: getattr(self, key) for key in REQUIRED_KEYS + OPTIONAL_KEYS}
        token = values["token"] or ""
        values["token"] = f"{token[:4]}…" if len(token) > 8 else "****"
        return values


def load_settings(path=None, environ=None, notify=notify_error):
    """Build Settings from the config file and environment.

    Each missing required key is reported through `notify` before
    ConfigurationMissing is raised.
    """
    environ = os.environ if environ is None else environ
    if path and not os.path.isfile(path):
        raise ConfigurationInvalid(f"config file not found: {path}")
    source = find_config_file(path, environ)
    values = _read_config_file(source) if source else {}

    merged = {}
    for key in REQUIRED_KEYS + OPTIONAL_KEYS:
        value = environ.get(f"GHPULL_{key.upper()}")
        if not _is_set(value):
            value = _file_value(values, key, source)
        merged[key] = value
    if not _is_set(merged["token"]):
        for name in _TOKEN_FALLBACKS:
            if _is_set(environ.get(name)):
                merged["token"] = environ[name]
                break

    missing = [key for key in REQUIRED_KEYS if not _is_set(merged[key])]
    for key in missing:
        notify(
            f"{key} is not set. Set \"{key}\" in {source or '.ghpull/config.json'} "
            f"or export GHPULL_{key.upper()}"
        )
    if missing:
        raise ConfigurationMissing(missing)

    settings = Settings(source=source, **merged)
    settings.project_number  # reject a non-numeric project id before any request
    return settings
