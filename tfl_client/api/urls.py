"""
URL construction for TfL API requests.
Every URL is built as a fresh value from the base origin; nothing shared is mutated.
"""
from collections.abc import Mapping, Sequence
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

# Characters left unescaped in the path (sub-delims, ":" and "@" are valid path characters).
PATH_SAFE_CHARS = "/:@!$&'()*+,;="


def build_url(
    base_url: str,
    path_segments: Sequence[str],
    query_params: Mapping[str, str] | None = None,
    *,
    app_id: str,
    app_key: str,
) -> str:
    """
    Join path_segments with "/" onto the origin of base_url (replacing its path and query)
    and append query_params plus app_id/app_key, sorted by key and form-encoded.
    Credentials are added last, so they overwrite caller params with the same key.
    Segments are not validated: a segment containing "/" produces extra path levels.
    """
    parts = urlsplit(base_url)
    path = quote("/" + "/".join(path_segments), safe=PATH_SAFE_CHARS)

    params: dict[str, str] = dict(query_params or {})
    params["app_id"] = app_id
    params["app_key"] = app_key
    query = urlencode(sorted(params.items()))

    return urlunsplit((parts.scheme, parts.netloc, path, query, ""))


def join_modes(modes: Sequence[str] | None) -> str | None:
    """Comma-join transport modes; None when there are none so the param can be omitted."""
    if not modes:
        return None
    return ",".join(modes)
