"""Remote URL parsing: best-effort hosting service and account detection.

Recognized forms:

- ``https://host/account/repo`` (and ``http://``)
- ``user@host:account/repo`` (scp-like SSH shorthand)
- ``ssh://user@host[:port]/account/repo``

Other ``scheme://host/...`` URLs (``git://``, ``git+ssh://``) yield only a
service. ``file://`` URLs, local paths and garbage yield nothing.
Parsing never raises.
"""

from __future__ import annotations

KNOWN_SERVICES: tuple[tuple[str, str], ...] = (
    ("github.com", "github"),
    ("gitlab.com", "gitlab"),
    ("bitbucket.org", "bitbucket"),
    ("codeberg.org", "codeberg"),
    ("sr.ht", "sourcehut"),
)

# Schemes whose first path segment is the account
ACCOUNT_SCHEMES = frozenset({"http", "https", "ssh"})


def parse_git_url(url: str) -> tuple[str | None, str | None]:
    """Return (service, account) guessed from a remote URL.

    >>> parse_git_url("https://github.com/torvalds/linux.git")
    ('github', 'torvalds')
    >>> parse_git_url("git@gitlab.com:org/project.git")
    ('gitlab', 'org')
    >>> parse_git_url("not-a-url")
    (None, None)
    """
    url = url.strip()
    if url.endswith(".git"):
        url = url[:-len(".git")]

    host, path = _split_host_and_path(url)
    if host is None:
        return None, None

    service = service_for_host(host)
    account = path.split('/', 1)[0] if path else ''
    return service, account or None


def service_for_host(host: str) -> str | None:
    """Map a hostname to a known hosting service, case-insensitively."""
    host = host.lower().rstrip('.')
    for domain, service in KNOWN_SERVICES:
        if host == domain or host.endswith('.' + domain):
            return service
    return None


def _split_host_and_path(url: str) -> tuple[str | None, str]:
    """Return (host, account-bearing path) or (None, '') when there is no host.

    Any ``scheme://[user@]host[:port]/...`` URL yields its host, but only
    http(s) and ssh URLs carry an account path.
    """
    scheme, sep, rest = url.partition("://")
    if sep and _is_scheme(scheme):
        scheme = scheme.lower()
        if scheme == "file":
            return None, ''
        authority, _, path = rest.partition('/')
        host = _strip_port(authority.rsplit('@', 1)[-1])
        if not host:
            return None, ''
        if scheme not in ACCOUNT_SCHEMES:
            path = ''
        return host, path

    # scp-like: user@host:path, with no scheme
    if '@' in url:
        after_at = url.split('@', 1)[1]
        host, sep, path = after_at.partition(':')
        if not sep or not host or '/' in host:
            return None, ''
        return host, path.lstrip('/')

    return None, ''


def _strip_port(authority: str) -> str:
    host, _, port = authority.partition(':')
    if port and not port.isdigit():
        return authority
    return host


def _is_scheme(text: str) -> bool:
    return bool(text) and text[0].isalpha() and all(c.isalnum() or c in "+-." for c in text)
