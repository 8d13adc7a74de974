import logging
import time
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .core.auth import resolve_auth
from .core.config import DEFAULT_TIMEOUT_SECONDS, ClientConfig, config_from_env
from .core.errors import (
    RedmineClientError,
    RedmineModelValidationError,
    RedmineParseError,
    translate,
)
from .core.observability import log_event
from .core.outcomes import Outcome, Success
from .core.params import query_items
from .core.transport import Session

T = TypeVar("T", bound=BaseModel)

ALLOWED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})
UPLOAD_PATH = "uploads"
OCTET_STREAM = "application/octet-stream"


class RedmineClient:
    """
    Async client for the Redmine REST API.
    - Resolves authentication once and caches a single transport session
    - Joins list values in GET query params; JSON bodies are sent as-is
    - Translates failures into RedmineApiError (no retries)
    - Returns decoded JSON payloads; resource modules own endpoint shapes
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        impersonate_user: Optional[str] = None,
        max_upload_size: Optional[int] = None,
        timeout_seconds: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        settings = {
            "base_url": base_url,
            "api_key": api_key,
            "username": username,
            "password": password,
            "impersonate_user": impersonate_user,
            "max_upload_size": max_upload_size,
            "timeout_seconds": timeout_seconds,
        }
        if config is None:
            config = ClientConfig(
                base_url=base_url or "",
                api_key=api_key,
                username=username,
                password=password,
                impersonate_user=impersonate_user,
                max_upload_size=max_upload_size,
                timeout_seconds=(
                    DEFAULT_TIMEOUT_SECONDS if timeout_seconds is None else timeout_seconds
                ),
            )
        else:
            conflicting = sorted(k for k, v in settings.items() if v is not None)
            if conflicting:
                raise ValueError(
                    "Pass either config or connection settings, not both "
                    f"(got {', '.join(conflicting)})."
                )

        self.config = config
        self.log = logger or logging.getLogger("redmine_client.client")
        self._http = http
        self._session: Optional[Session] = None
        self._closed = False

    @classmethod
    def from_env(
        cls,
        *,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
        **overrides: Any,
    ) -> "RedmineClient":
        """
        Build a client from REDMINE_* variables.

        Keyword overrides (base_url, api_key, timeout_seconds, ...) win over
        the environment; None values are ignored.
        """
        return cls(config_from_env(**overrides), logger=logger, http=http)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def session(self) -> Session:
        return self._ensure_session()

    def _ensure_session(self) -> Session:
        if self._closed:
            raise RedmineClientError("RedmineClient is closed.")
        # No await between the check and the assignment: one session per client.
        if self._session is None:
            auth = resolve_auth(self.config)
            self._session = Session(self.config, auth, http=self._http)
            log_event(
                "redmine.session_created",
                self.log,
                level=logging.DEBUG,
                auth_mode=auth.mode.value,
            )
        return self._session

    async def aclose(self) -> None:
        """Close the session; later requests raise RedmineClientError."""
        self._closed = True
        session, self._session = self._session, None
        if session is not None:
            await session.aclose()

    async def __aenter__(self) -> "RedmineClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request(
        self, method: str, path: str, payload: Optional[Any] = None
    ) -> Any:
        """
        Core request method.
        - `path` is the resource path without leading "/" or ".json"
        - GET: payload is {"params": {...}}; lists are comma-joined into the query
        - POST/PUT/DELETE: payload is the JSON body, unmodified
        - "uploads": payload is raw bytes sent as application/octet-stream
        - Raises RedmineApiError for connection, validation and status failures
        - Raises RedmineParseError if a successful response isn't JSON
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        path = path.strip("/")
        endpoint = f"{path}.json"
        session = self._ensure_session()
        start = time.perf_counter()

        if path == UPLOAD_PATH:
            if not isinstance(payload, (bytes, bytearray)):
                raise TypeError("uploads expects the raw file content as bytes.")
            outcome = await session.send(
                method,
                endpoint,
                content=bytes(payload),
                headers={"Content-Type": OCTET_STREAM},
            )
        elif method == "GET":
            outcome = await session.send(
                method, endpoint, params=self._query_params(payload)
            )
        else:
            outcome = await session.send(method, endpoint, json=payload)

        return self._handle_outcome(outcome, method=method, endpoint=endpoint, start=start)

    @staticmethod
    def _query_params(payload: Optional[Mapping[str, Any]]):
        if not payload:
            return None
        unexpected = set(payload) - {"params"}
        if unexpected:
            raise ValueError(
                f"GET payload only accepts 'params', got: {sorted(unexpected)}"
            )
        params = payload.get("params")
        return query_items(params) if params else None

    def _handle_outcome(
        self, outcome: Outcome, *, method: str, endpoint: str, start: float
    ) -> Any:
        duration_ms = int((time.perf_counter() - start) * 1000)

        if isinstance(outcome, Success):
            # structured-ish log without secrets
            self.log.debug(
                "redmine.request",
                extra={
                    "method": method,
                    "path": endpoint,
                    "status": outcome.response.status_code,
                    "duration_ms": duration_ms,
                },
            )
            return self._safe_json(outcome.response)

        error = translate(
            outcome, base_url=self.base_url, method=method, path=endpoint
        )
        self.log.debug(
            "redmine.request_failed",
            extra={
                "method": method,
                "path": endpoint,
                "status": getattr(outcome, "status_code", None),
                "duration_ms": duration_ms,
                "error_kind": error.kind.value if error else "unclassified",
            },
        )
        if error is None:
            raise outcome.error
        raise error from outcome.error

    def _safe_json(self, resp: httpx.Response) -> Any:
        # PUT/DELETE usually answer 204 or 200 with an empty body
        if not resp.content:
            return {}

        try:
            return resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise RedmineParseError(
                f"Expected JSON from {resp.request.method} "
                f"{resp.request.url}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.request("GET", path, {"params": params} if params else None)

    async def post(self, path: str, json: Optional[Any] = None) -> Any:
        return await self.request("POST", path, json)

    async def put(self, path: str, json: Optional[Any] = None) -> Any:
        return await self.request("PUT", path, json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def upload(self, content: bytes) -> Dict[str, Any]:
        return await self.request("POST", UPLOAD_PATH, content)

    async def request_model(
        self, model: Type[T], method: str, path: str, payload: Optional[Any] = None
    ) -> T:
        data = await self.request(method, path, payload)
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise RedmineModelValidationError(
                f"Response did not match model {model.__name__}: {exc}"
            ) from exc


def create_client_from_env(**kwargs) -> RedmineClient:
    """Create a RedmineClient from REDMINE_* environment variables."""
    return RedmineClient.from_env(**kwargs)


__all__ = ["RedmineClient", "create_client_from_env", "ALLOWED_METHODS"]
