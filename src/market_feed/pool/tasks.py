"""Single request + decode unit of work."""

from __future__ import annotations

from typing import Callable, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from ..errors import DecodeError, StatusError, TransportError

M = TypeVar("M", bound=BaseModel)


def fetch_and_decode(
    session: requests.Session,
    request: requests.Request,
    schema: Type[M],
    timeout: float,
) -> M:
    try:
        prepared = session.prepare_request(request)
        response = session.send(prepared, timeout=timeout)
    except requests.RequestException as exc:
        raise TransportError(f"request failed: {exc}", url=request.url) from exc

    try:
        if not 200 <= response.status_code < 300:
            raise StatusError(
                f"unexpected status code: {response.status_code}",
                status_code=response.status_code,
                url=prepared.url,
            )
        try:
            return schema.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(f"failed to decode response: {exc}", url=prepared.url) from exc
    finally:
        response.close()


def decode_json_task(
    session: requests.Session,
    schema: Type[M],
    timeout: float,
) -> Callable[[requests.Request], M]:
    """Bind a shared session and target schema into a pool task."""

    def task(request: requests.Request) -> M:
        return fetch_and_decode(session, request, schema, timeout)

    return task
