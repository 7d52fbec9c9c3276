"""API 요청 로깅 미들웨어 — 로컬 로그 + Axiom 전송.

Request logging middleware.
Every request is logged to the ``sinsaflower.access`` logger (method, path,
status, duration, error detail). When Axiom is configured the same event is
also shipped to the Axiom dataset.
Sensitive fields (password, token, secret) are masked before logging.
"""

import json
import logging
import re
import time
import uuid
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

logger = logging.getLogger("sinsaflower.access")

# 마스킹 대상 필드 패턴: Fields to mask in request bodies and query params
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로: Paths excluded from logging
_SKIP_PATHS = frozenset({"/health", "/docs", "/redoc", "/openapi.json"})

# 느린 요청 경고 기준 (ms)
_SLOW_REQUEST_MS: float = 1000.0


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 재귀 마스킹 — Recursively mask sensitive keys in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def _error_detail(body: bytes) -> str:
    """에러 응답 body 에서 detail 추출 (500자 제한)."""
    try:
        data = json.loads(body)
        detail = data.get("detail", data) if isinstance(data, dict) else data
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:500]
    text = detail if isinstance(detail, str) else json.dumps(detail, ensure_ascii=False)
    return text[:500]


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 로깅하는 미들웨어.

    Logs method, path, status code, duration and (for 4xx/5xx) the error
    detail. Adds an ``X-Request-ID`` header, reusing the client's one if sent.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        request_id: str = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        start = time.perf_counter()

        method = request.method
        path = request.url.path

        # Request body 읽기: JSON body 만, 마스킹 후 기록
        request_body: Any = None
        if method in ("POST", "PUT", "PATCH"):
            body_bytes = await request.body()
            if body_bytes:
                try:
                    request_body = mask_sensitive(json.loads(body_bytes))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    request_body = "(non-json body)"

        error_detail: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body 에서 사유 추출 후 응답 재구성
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error_detail = _error_detail(resp_body)
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
            response.headers["X-Request-ID"] = request_id
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            event: dict[str, Any] = {
                "request_id": request_id,
                "method": method,
                "path": path,
                "status_code": status_code,
                "duration_ms": duration_ms,
            }
            if request.query_params:
                event["query_params"] = mask_sensitive(dict(request.query_params))
            if request_body is not None:
                event["request_body"] = request_body
            if error_detail:
                event["error"] = error_detail
            self._emit(event)

        return response

    def _emit(self, event: dict[str, Any]) -> None:
        level = logging.WARNING if event["status_code"] >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s -> %s (%.2f ms)",
            event["method"], event["path"], event["status_code"], event["duration_ms"],
            extra={"request_id": event["request_id"]},
        )
        if event["duration_ms"] > _SLOW_REQUEST_MS:
            logger.warning("Slow request: %s %s (%.2f ms)", event["method"], event["path"], event["duration_ms"])

        if self._client is None:
            return
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            # 로깅 실패가 요청 처리에 영향주지 않도록
            logger.warning("Axiom ingest failed", exc_info=True)
