from __future__ import annotations

import errno
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

import httpx

from .auth import ResolvedAuth
from .config import ClientConfig
from .errors import RedmineBodyTooLargeError
from .outcomes import HttpFailure, NoResponse, Other, Outcome, Success

JSON_CONTENT_TYPE = "application/json"

QueryParams = Sequence[Tuple[str, Any]]


def error_code(exc: BaseException) -> str:
    """
    Symbolic errno (e.g. ECONNREFUSED) from the exception chain, falling
    back to the httpx exception class name.
    """
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        code = getattr(current, "errno", None)
        if isinstance(current, OSError) and isinstance(code, int):
            return errno.errorcode.get(code, str(code))
        current = current.__cause__ or current.__context__
    return type(exc).__name__


def _decode_body(resp: httpx.Response) -> Optional[Any]:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return None


class Session:
    """
    One transport binding per client: base URL, resolved auth and the
    request body ceiling. Holds no per-call state, so concurrent sends
    can share it.
    """

    def __init__(
        self,
        config: ClientConfig,
        auth: ResolvedAuth,
        *,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = config.base_url
        self.max_body_size = config.body_size_limit
        self.auth_mode = auth.mode
        self.auth = auth.auth
        self.headers: Dict[str, str] = {
            "Accept": JSON_CONTENT_TYPE,
            "Content-Type": JSON_CONTENT_TYPE,
            **auth.headers,
        }

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=self.base_url,
            auth=self.auth,
            headers=self.headers,
            timeout=config.timeout_seconds,
            follow_redirects=True,
        )

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def send(
        self,
        method: str,
        endpoint: str,
        *,
        params: Optional[QueryParams] = None,
        json: Optional[Any] = None,
        content: Optional[bytes] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Outcome:
        request = self.http.build_request(
            method,
            self.url_for(endpoint),
            params=params,
            json=json,
            content=content,
            headers={**self.headers, **(headers or {})},
        )

        size = len(request.content)
        if size > self.max_body_size:
            raise RedmineBodyTooLargeError(
                size=size, limit=self.max_body_size, path=endpoint
            )

        try:
            resp = await self.http.send(
                request,
                auth=self.auth if self.auth is not None else httpx.USE_CLIENT_DEFAULT,
                follow_redirects=True,
            )
        except httpx.TransportError as exc:
            return NoResponse(error_code=error_code(exc), error=exc)
        except httpx.HTTPError as exc:
            return Other(error=exc)

        if resp.is_success:
            return Success(response=resp)

        path = resp.request.url.raw_path.decode("ascii", errors="replace")
        return HttpFailure(
            status_code=resp.status_code,
            reason=resp.reason_phrase,
            path=path,
            body=_decode_body(resp),
            error=httpx.HTTPStatusError(
                f"{resp.status_code} {resp.request.method} {resp.request.url}",
                request=resp.request,
                response=resp,
            ),
        )


__all__ = ["Session", "error_code", "JSON_CONTENT_TYPE"]
