from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from convogen.errors import DecodeError, HTTPStatusError, NetworkError, SerializationError

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def bearer_http_request(
    token: str,
    url: str,
    method: str,
    request_body: Any,
    response_model: type[ResponseT],
    *,
    client: httpx.Client | None = None,
) -> ResponseT:
    """
    Perform one authenticated JSON exchange and decode the reply into `response_model`.

    - single attempt: no retries, no timeout
    - any status outside 200..299 is an error
    - every failure is logged here, once, and then raised
    """
    try:
        content = _encode_json(request_body)
    except (TypeError, ValueError) as exc:
        logger.error("could not marshal json for request url=%s obj=%r err=%s", url, request_body, exc)
        raise SerializationError(f"could not marshal json for request: {exc}", url=url) from exc

    headers = {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }

    if client is None:
        with httpx.Client(timeout=None) as default_client:
            return _send(default_client, method, url, content, headers, response_model)
    return _send(client, method, url, content, headers, response_model)


def _encode_json(body: Any) -> bytes:
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json")
    return json.dumps(body, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def _send(
    client: httpx.Client,
    method: str,
    url: str,
    content: bytes,
    headers: dict[str, str],
    response_model: type[ResponseT],
) -> ResponseT:
    try:
        req = client.build_request(method, url, content=content, headers=headers)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.error("bearer http request failed url=%s err=%s", url, exc)
        raise NetworkError(f"bearer http request failed: {exc}", url=url) from exc

    try:
        res = client.send(req, stream=True)
    except httpx.HTTPError as exc:
        logger.error("request init failed url=%s err=%s", url, exc)
        raise NetworkError(f"request init failed: {exc}", url=url) from exc

    try:
        if res.status_code < 200 or res.status_code > 299:
            logger.error("non 2xx response url=%s status=%d", url, res.status_code)
            raise HTTPStatusError(res.status_code, url=url)

        try:
            raw = res.read()
        except httpx.HTTPError as exc:
            logger.error("failed to read response body url=%s err=%s", url, exc)
            raise NetworkError(f"failed to read response body: {exc}", url=url) from exc
    finally:
        res.close()

    body_text = raw.decode("utf-8", errors="replace")
    try:
        return response_model.model_validate_json(raw)
    except ValidationError as exc:
        logger.error(
            "failed to unmarshal response body url=%s response_body=%s err=%s",
            url,
            body_text,
            exc,
        )
        raise DecodeError(
            f"failed to unmarshal response body: {exc}", url=url, response_body=body_text
        ) from exc
