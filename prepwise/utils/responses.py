from typing import Optional

from fastapi.responses import JSONResponse

from prepwise.utils.cache import CACHE_CONFIG, CachePolicy, apply_cache_headers


def success_response(payload: dict, policy: CachePolicy, status_code: int = 200) -> JSONResponse:
    response = JSONResponse({"success": True, **payload}, status_code=status_code)
    return apply_cache_headers(response, policy)


def error_response(status_code: int, message: str, error: Optional[str] = None) -> JSONResponse:
    content = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    # errors are never cached
    return apply_cache_headers(JSONResponse(content, status_code=status_code), CACHE_CONFIG["NONE"])
