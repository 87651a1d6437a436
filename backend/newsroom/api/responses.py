"""
Response envelopes shared by every endpoint.

Success: ``{"statusCode": <int>, "payload": {...}}``
Error:   ``{"status": <int>, "message": <str>, "errors": [...]}``
"""

from typing import Any, Dict, List, Optional

from fastapi.responses import JSONResponse


def api_response(status_code: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {"statusCode": status_code, "payload": payload}


def error_response(
    status_code: int, message: str, errors: Optional[List[Any]] = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": status_code, "message": message, "errors": errors or []},
    )
