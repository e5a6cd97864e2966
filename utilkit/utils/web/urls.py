"""Pure functions for URL parsing and query-string manipulation.

Parsed URLs expose the same component names as the WHATWG URL API
(protocol, host, pathname, search, hash, ...). Query strings are
serialized as application/x-www-form-urlencoded, so spaces become ``+``.
"""

import re
from dataclasses import dataclass, replace
from typing import Iterable, Mapping
from urllib.parse import parse_qsl, quote_plus, urlencode, urljoin, urlsplit, uses_relative

_SCHEME = re.compile(r"^[a-z][a-z\d+\-.]*:", re.IGNORECASE)

# Schemes whose URLs always have a host and a non-empty path
_DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}


@dataclass(frozen=True)
class ParsedUrl:
    """Components of an absolute URL."""

    protocol: str
    username: str
    password: str
    hostname: str
    port: str
    pathname: str
    search: str
    hash: str

    @property
    def host(self) -> str:
        return f"{self.hostname}:{self.port}" if self.port else self.hostname

    @property
    def origin(self) -> str:
        scheme = self.protocol[:-1]
        if scheme not in _DEFAULT_PORTS:
            return "null"
        return f"{self.protocol}//{self.host}"

    @property
    def href(self) -> str:
        authority = ""
        if self.hostname or self.protocol[:-1] in _DEFAULT_PORTS:
            credentials = ""
            if self.username or self.password:
                credentials = self.username
                if self.password:
                    credentials += f":{self.password}"
                credentials += "@"
            authority = f"//{credentials}{self.host}"
        return f"{self.protocol}{authority}{self.pathname}{self.search}{self.hash}"

    def __str__(self) -> str:
        return self.href


def parse_url(url: str) -> ParsedUrl:
    """Parse an absolute URL into its components.

    Default ports are dropped and special schemes (http, https, ws, wss,
    ftp) get '/' as their path when none is given.

    Args:
        url: Absolute URL string

    Returns:
        ParsedUrl with protocol ('https:'), hostname, port, pathname,
        search ('?a=1' or '') and hash ('#frag' or '')

    Raises:
        ValueError: If the URL has no scheme, misses the host required by
            its scheme, or has an invalid port

    Examples:
        >>> parsed = parse_url("https://www.example.com:8080/path?a=1#top")
        >>> parsed.protocol, parsed.host, parsed.pathname, parsed.search, parsed.hash
        ('https:', 'www.example.com:8080', '/path', '?a=1', '#top')
        >>> parse_url("https://example.com:443").href
        'https://example.com/'
    """
    if not is_absolute_url(url):
        raise ValueError(f"Invalid URL: {url!r}")

    parts = urlsplit(url.strip())
    scheme = parts.scheme.lower()
    is_special = scheme in _DEFAULT_PORTS
    if is_special and not parts.hostname:
        raise ValueError(f"Invalid URL: {url!r} has no host")

    try:
        port = parts.port
    except ValueError as e:
        raise ValueError(f"Invalid URL: {url!r} ({e})") from e
    if port is not None and port == _DEFAULT_PORTS.get(scheme):
        port = None

    hostname = parts.hostname or ""
    if ":" in hostname:
        hostname = f"[{hostname}]"

    return ParsedUrl(
        protocol=f"{scheme}:",
        username=parts.username or "",
        password=parts.password or "",
        hostname=hostname,
        port="" if port is None else str(port),
        pathname=parts.path or ("/" if is_special else ""),
        search=f"?{parts.query}" if parts.query else "",
        hash=f"#{parts.fragment}" if parts.fragment else "",
    )


def _query_pairs(parsed: ParsedUrl) -> list[tuple[str, str]]:
    return parse_qsl(parsed.search[1:], keep_blank_values=True)


def _form_quote(value: str, safe: str = "", encoding: str | None = None, errors: str | None = None) -> str:
    """application/x-www-form-urlencoded escaping: only *-._ stay literal."""
    return quote_plus(value, safe="*", encoding=encoding, errors=errors).replace("~", "%7E")


def _with_query(parsed: ParsedUrl, pairs: list[tuple[str, str]]) -> str:
    query = urlencode(pairs, quote_via=_form_quote)
    return replace(parsed, search=f"?{query}" if query else "").href


def get_query_params(url: str) -> dict[str, str]:
    """Return query parameters as a dict; repeated names keep the last value.

    Examples:
        >>> get_query_params("https://www.example.com/page?param1=value1&param2=value2")
        {'param1': 'value1', 'param2': 'value2'}
    """
    return dict(_query_pairs(parse_url(url)))


def add_query_params(url: str, params: Mapping[str, object]) -> str:
    """Append query parameters to a URL.

    Existing parameters are kept, including ones with the same name.

    Examples:
        >>> add_query_params("https://www.example.com/page", {"param1": "value1", "param2": "value2"})
        'https://www.example.com/page?param1=value1&param2=value2'
    """
    parsed = parse_url(url)
    pairs = _query_pairs(parsed) + [(key, str(value)) for key, value in params.items()]
    return _with_query(parsed, pairs)


def remove_query_params(url: str, params_to_remove: Iterable[str]) -> str:
    """Remove every occurrence of the named query parameters.

    Examples:
        >>> remove_query_params("https://www.example.com/page?param1=value1&param2=value2&param3=value3", ["param1", "param3"])
        'https://www.example.com/page?param2=value2'
    """
    parsed = parse_url(url)
    removed = set(params_to_remove)
    pairs = [(key, value) for key, value in _query_pairs(parsed) if key not in removed]
    return _with_query(parsed, pairs)


def get_domain(url: str) -> str:
    """Return the last two labels of the URL's hostname.

    Multi-part public suffixes such as 'co.uk' are not recognised.

    Examples:
        >>> get_domain("https://sub.example.com/page")
        'example.com'
    """
    return ".".join(parse_url(url).hostname.split(".")[-2:])


def is_absolute_url(url: str) -> bool:
    """Check if a string starts with a URL scheme.

    Examples:
        >>> is_absolute_url("https://www.example.com")
        True
        >>> is_absolute_url("mailto:someone@example.com")
        True
        >>> is_absolute_url("/path/to/page")
        False
    """
    return _SCHEME.match(url.strip()) is not None


def resolve_relative_url(base: str, relative: str) -> str:
    """Resolve a relative reference against an absolute base URL.

    The result is normalized like parse_url(...).href: default ports are
    dropped and special schemes get at least a "/" path. Schemes unknown to
    urllib (e.g. "foo:") resolve with the same hierarchical rules as https.

    Raises:
        ValueError: If base is not a valid absolute URL, or has an opaque
            path (such as "mailto:...") that relative references cannot
            be resolved against

    Examples:
        >>> resolve_relative_url("https://www.example.com/path/", "../page")
        'https://www.example.com/page'
        >>> resolve_relative_url("foo://host/a/", "b")
        'foo://host/a/b'
    """
    parsed = parse_url(base)
    if is_absolute_url(relative):
        return parse_url(relative).href

    base_href = parsed.href
    scheme = parsed.protocol[:-1]
    if scheme in uses_relative:
        return parse_url(urljoin(base_href, relative)).href

    if not parsed.hostname and not parsed.pathname.startswith("/") and not relative.startswith("#"):
        raise ValueError(f"Cannot resolve {relative!r} against opaque URL {base!r}")

    # Resolve under a hierarchical stand-in scheme, then restore the real one
    stand_in = "https:" + base_href[len(parsed.protocol):]
    joined = urljoin(stand_in, relative)
    return parse_url(parsed.protocol + joined[len("https:"):]).href
