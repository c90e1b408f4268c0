"""HTTP cache header helpers.

Every response is classified as ``public``, ``private`` or ``none``. The
helpers here stamp ``Cache-Control``, ``ETag`` and ``Last-Modified`` and
answer conditional requests.
"""
import hashlib
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Mapping, Optional, Union

from starlette.responses import Response

from prepwise.utils.enums import CacheType


@dataclass(frozen=True)
class CachePolicy:
    type: CacheType
    max_age: int = 300


CACHE_CONFIG = {
    "STATIC": CachePolicy(CacheType.PUBLIC, 31536000),  # 1 year
    "PUBLIC": CachePolicy(CacheType.PUBLIC, 300),
    "PRIVATE": CachePolicy(CacheType.PRIVATE, 60),
    "DASHBOARD": CachePolicy(CacheType.PRIVATE, 30),
    "QUESTIONS": CachePolicy(CacheType.PUBLIC, 300),
    "INTERVIEWS": CachePolicy(CacheType.PRIVATE, 120),
    "FEEDBACK": CachePolicy(CacheType.PRIVATE, 60),
    "SUMMARY": CachePolicy(CacheType.PUBLIC, 180),
    "NONE": CachePolicy(CacheType.NONE, 0),
}


def generate_etag(content: Union[str, bytes, dict, list]) -> str:
    if isinstance(content, bytes):
        raw = content
    elif isinstance(content, str):
        raw = content.encode("utf-8")
    else:
        raw = json.dumps(content, sort_keys=True, separators=(",", ":"), default=str).encode("utf-8")
    return f'"{hashlib.md5(raw).hexdigest()}"'


def _http_date(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)


def _stamp_cache_control(response: Response, policy: CachePolicy) -> None:
    if policy.type == CacheType.NONE:
        response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
        response.headers["Pragma"] = "no-cache"
        response.headers["Expires"] = "0"
    else:
        response.headers["Cache-Control"] = (
            f"{policy.type.value}, max-age={policy.max_age}, s-maxage={policy.max_age * 2}"
        )


def apply_cache_headers(
    response: Response,
    policy: Union[CachePolicy, CacheType, str],
    max_age: int = 300,
    etag: Optional[str] = None,
    last_modified: Optional[datetime] = None,
) -> Response:
    if not isinstance(policy, CachePolicy):
        policy = CachePolicy(CacheType(policy), max_age)

    _stamp_cache_control(response, policy)
    response.headers["ETag"] = etag or generate_etag(response.body or b"")
    response.headers["Last-Modified"] = _http_date(last_modified or datetime.now(timezone.utc))
    return response


def _etag_matches(header: str, etag: str) -> bool:
    if header.strip() == "*":
        return True
    current = etag[2:] if etag.startswith("W/") else etag
    for candidate in header.split(","):
        candidate = candidate.strip()
        if candidate.startswith("W/"):
            candidate = candidate[2:]
        if candidate == current:
            return True
    return False


def is_not_modified(
    headers: Mapping[str, str],
    etag: str,
    last_modified: Optional[datetime] = None,
) -> bool:
    """Whether a conditional GET can be answered with 304.

    ``If-None-Match`` takes precedence. ``If-Modified-Since`` is only
    honoured when the resource's own modification time is known.
    """
    if_none_match = headers.get("if-none-match")
    if if_none_match:
        return _etag_matches(if_none_match, etag)

    if_modified_since = headers.get("if-modified-since")
    if not if_modified_since or last_modified is None:
        return False

    try:
        since = parsedate_to_datetime(if_modified_since)
    except (TypeError, ValueError):
        return False
    if since is None:
        return False
    if since.tzinfo is None:
        since = since.replace(tzinfo=timezone.utc)
    if last_modified.tzinfo is None:
        last_modified = last_modified.replace(tzinfo=timezone.utc)

    # HTTP dates carry whole seconds only
    return last_modified.replace(microsecond=0) <= since


def not_modified_response(etag: str, policy: CachePolicy) -> Response:
    """An empty 304 carrying the validator and caching rules of the full response."""
    response = Response(status_code=304)
    _stamp_cache_control(response, policy)
    response.headers["ETag"] = etag
    return response
