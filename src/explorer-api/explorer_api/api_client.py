import logging
from typing import Any, Dict, Mapping, Optional

import requests

from .errors import DecodeError, ServiceError, TransportError

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "1"


class ApiClient:
    """
    Shared request/response contract for one explorer module.

    Builds the query params every call carries (``apikey``, ``module``,
    ``action``), sends them, and unwraps the ``{status, message, result}``
    envelope. No retries; the timeout is whatever the caller passes.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        module: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.module = module
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def params(self, action: str, **extra: Any) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "apikey": self.api_key,
            "module": self.module,
            "action": action,
        }
        for key, value in extra.items():
            if value is None:
                continue
            params[key] = str(value) if isinstance(value, int) else value
        return params

    def build_url(self, params: Mapping[str, Any]) -> str:
        prepared = requests.Request("GET", self.base_url, params=dict(params)).prepare()
        return prepared.url

    def get(self, params: Mapping[str, Any]) -> Any:
        merged = {**params, "apikey": self.api_key}
        self._log_dispatch("GET", merged)
        try:
            response = self.session.get(self.base_url, params=merged, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(str(exc)) from exc
        return self._unwrap(response, merged)

    def post(self, params: Mapping[str, Any], data: Mapping[str, Any]) -> Any:
        merged = {**params, "apikey": self.api_key}
        self._log_dispatch("POST", merged)
        try:
            response = self.session.post(
                self.base_url,
                params=merged,
                data=dict(data),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(str(exc)) from exc
        return self._unwrap(response, merged)

    def _unwrap(self, response: requests.Response, params: Mapping[str, Any]) -> Any:
        if not response.ok:
            # Body is never read on HTTP failure.
            raise TransportError(response.reason or "unknown error", status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError("Failed to parse response from explorer.") from exc

        if not isinstance(payload, dict):
            raise DecodeError("Unexpected response from explorer (non-object).")

        status = payload.get("status")
        if status != SUCCESS_STATUS:
            message = payload.get("message", "")
            result = payload.get("result")
            logger.warning(
                "Explorer rejected %s/%s: status=%r message=%r result=%r",
                params.get("module"),
                params.get("action"),
                status,
                message,
                result,
            )
            raise ServiceError(message, result=result, status=status)

        return payload.get("result")

    def _log_dispatch(self, method: str, params: Mapping[str, Any]) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        masked = {**params, "apikey": "***"}
        logger.debug("%s %s", method, self.build_url(masked))
