from datetime import datetime, timedelta, timezone

import pytest
from fastapi.responses import JSONResponse

from prepwise.utils.cache import (
    CACHE_CONFIG,
    CachePolicy,
    apply_cache_headers,
    generate_etag,
    is_not_modified,
    not_modified_response,
)
from prepwise.utils.enums import CacheType


@pytest.mark.parametrize("max_age", [0, 60, 31536000])
def test_none_disables_caching_regardless_of_max_age(max_age):
    response = apply_cache_headers(JSONResponse({"ok": True}), "none", max_age)

    assert response.headers["Cache-Control"] == "no-cache, no-store, must-revalidate"
    assert response.headers["Pragma"] == "no-cache"
    assert response.headers["Expires"] == "0"


def test_public_and_private_cache_control():
    public = apply_cache_headers(JSONResponse({}), CacheType.PUBLIC, 300)
    private = apply_cache_headers(JSONResponse({}), CACHE_CONFIG["DASHBOARD"])

    assert public.headers["Cache-Control"] == "public, max-age=300, s-maxage=600"
    assert private.headers["Cache-Control"] == "private, max-age=30, s-maxage=60"
    assert "Pragma" not in public.headers


def test_classification_table():
    assert CACHE_CONFIG["STATIC"] == CachePolicy(CacheType.PUBLIC, 31536000)
    assert CACHE_CONFIG["QUESTIONS"] == CachePolicy(CacheType.PUBLIC, 300)
    assert CACHE_CONFIG["INTERVIEWS"] == CachePolicy(CacheType.PRIVATE, 120)
    assert CACHE_CONFIG["FEEDBACK"] == CachePolicy(CacheType.PRIVATE, 60)
    assert CACHE_CONFIG["NONE"].type == CacheType.NONE


def test_etag_is_derived_from_body():
    first = apply_cache_headers(JSONResponse({"a": 1}), "public")
    second = apply_cache_headers(JSONResponse({"a": 1}), "public")
    other = apply_cache_headers(JSONResponse({"a": 2}), "public")

    assert first.headers["ETag"] == second.headers["ETag"]
    assert first.headers["ETag"] != other.headers["ETag"]
    assert first.headers["ETag"].startswith('"')


def test_explicit_etag_and_last_modified():
    stamp = datetime(2024, 3, 5, 8, 30, tzinfo=timezone.utc)
    response = apply_cache_headers(JSONResponse({}), "private", 60, etag='"v1"', last_modified=stamp)

    assert response.headers["ETag"] == '"v1"'
    assert response.headers["Last-Modified"] == "Tue, 05 Mar 2024 08:30:00 GMT"


def test_last_modified_defaults_to_now():
    response = apply_cache_headers(JSONResponse({}), "public")
    assert response.headers["Last-Modified"].endswith("GMT")


def test_generate_etag_ignores_key_order():
    assert generate_etag({"a": 1, "b": 2}) == generate_etag({"b": 2, "a": 1})
    assert generate_etag("abc") == generate_etag(b"abc")


@pytest.mark.parametrize("header", ['"abc"', 'W/"abc"', '"zzz", "abc"', "*"])
def test_if_none_match_hits(header):
    assert is_not_modified({"if-none-match": header}, '"abc"')


def test_if_none_match_miss():
    assert not is_not_modified({"if-none-match": '"old"'}, '"abc"')
    assert not is_not_modified({}, '"abc"')


def test_if_none_match_takes_precedence_over_date():
    modified = datetime(2024, 1, 1, tzinfo=timezone.utc)
    headers = {
        "if-none-match": '"old"',
        "if-modified-since": "Wed, 01 Jan 2025 00:00:00 GMT",
    }
    assert not is_not_modified(headers, '"abc"', modified)


def test_if_modified_since_uses_resource_time():
    modified = datetime(2024, 1, 1, 12, 0, 0, 500, tzinfo=timezone.utc)
    headers = {"if-modified-since": "Mon, 01 Jan 2024 12:00:00 GMT"}

    assert is_not_modified(headers, '"abc"', modified)
    assert not is_not_modified(headers, '"abc"', modified + timedelta(seconds=1))


def test_if_modified_since_without_known_modification_time():
    recent = datetime.now(timezone.utc).strftime("%a, %d %b %Y %H:%M:%S GMT")
    assert not is_not_modified({"if-modified-since": recent}, '"abc"')


def test_if_modified_since_garbage():
    assert not is_not_modified({"if-modified-since": "yesterday"}, '"abc"', datetime.now(timezone.utc))


def test_not_modified_response():
    response = not_modified_response('"abc"', CACHE_CONFIG["QUESTIONS"])
    assert response.status_code == 304
    assert response.headers["ETag"] == '"abc"'
    assert response.headers["Cache-Control"] == "public, max-age=300, s-maxage=600"
    assert response.body == b""


def test_not_modified_response_keeps_no_store():
    response = not_modified_response('"abc"', CACHE_CONFIG["NONE"])
    assert response.headers["Cache-Control"] == "no-cache, no-store, must-revalidate"
    assert response.headers["Pragma"] == "no-cache"
