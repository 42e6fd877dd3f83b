from logging import getLogger
from typing import Any, Mapping, Optional, Union

import httpx
from httpx import Headers, Timeout

from ._config import ClientConfig
from ._utils import build_url, create_ssl_context, encode_form
from ._utils.constants import (
    CONNECT_TIMEOUT,
    CONTENT_TYPE_FORM,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    READ_TIMEOUT,
    SUPPORTED_VERBS,
    USER_AGENT,
    WRITE_TIMEOUT,
)
from .models import Response, UnsupportedVerbError


class Client:
    """Base class for JSON-over-HTTP API clients.

    Generic enough to talk to any HTTP service: it merges query parameters
    into request paths, form-encodes bodies and hands back a :class:`Response`
    whose JSON body is decoded on demand. API-specific clients subclass it and
    build their calls on top of :meth:`request` and the verb helpers.

    All requests of one client share a single persistent connection, opened
    on first use. The lazy initialisation is not locked; share a client
    between threads only with external synchronisation.

    Examples:
        ```python
        from redd import Client

        client = Client(endpoint="https://api.example.com")

        response = client.get("/v1/items", {"limit": "10"})
        response.code  # 200
        response.body  # {"items": [...]}
        ```
    """

    def __init__(self, endpoint: str, user_agent: str = USER_AGENT) -> None:
        """Create a new client.

        Args:
            endpoint (str): The base URL every request path is resolved against.
            user_agent (str): The User-Agent header sent with every request.
        """
        self._logger = getLogger("redd")
        self._config = ClientConfig(endpoint=endpoint, user_agent=user_agent)
        self._connection: Optional[httpx.Client] = None

    @classmethod
    def from_config(cls, config: ClientConfig) -> "Client":
        return cls(endpoint=config.endpoint, user_agent=config.user_agent)

    @classmethod
    def from_env(cls) -> "Client":
        """Create a client from the ``REDD_ENDPOINT`` and ``REDD_USER_AGENT`` variables."""
        return cls.from_config(ClientConfig.from_env())

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    @property
    def user_agent(self) -> str:
        return self._config.user_agent

    def request(
        self,
        verb: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        form: Optional[Mapping[str, Any]] = None,
        body: Optional[Union[bytes, str]] = None,
    ) -> Response:
        """Make an HTTP request.

        ``params`` always end up in the query string, whatever the body.
        ``body`` is sent untouched and takes precedence over ``form``.

        Args:
            verb (str): The HTTP verb: get, post, put, patch or delete.
            path (str): The path relative to the endpoint, possibly with a query string.
            params (Optional[Mapping[str, Any]]): Parameters appended to the query string.
            form (Optional[Mapping[str, Any]]): Parameters sent form-encoded in the body.
            body (Optional[Union[bytes, str]]): The direct body contents.

        Returns:
            Response: The status code, headers and raw body of the reply.

        Raises:
            UnsupportedVerbError: If ``verb`` is not one of the supported verbs.
            httpx.HTTPError: Transport failures (timeouts, refused connections,
                DNS errors) are raised as is.
        """
        method = verb.lower()
        if method not in SUPPORTED_VERBS:
            raise UnsupportedVerbError(verb)

        url = build_url(path, params)

        kwargs: dict[str, Any] = {
            "timeout": Timeout(
                None,
                connect=CONNECT_TIMEOUT,
                read=READ_TIMEOUT,
                write=WRITE_TIMEOUT,
            ),
        }
        if body is not None:
            kwargs["content"] = body
        elif form is not None:
            kwargs["content"] = encode_form(form)
            kwargs["headers"] = {HEADER_CONTENT_TYPE: CONTENT_TYPE_FORM}

        self._logger.debug(f"Request: {method.upper()} {url}")

        response = self.connection.request(method.upper(), url, **kwargs)

        self._logger.debug(f"Response: {response.status_code} {url}")

        return Response(
            code=response.status_code,
            headers=dict(response.headers),
            raw_body=response.content,
        )

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Response:
        """Make a GET request, sending ``params`` in the query string."""
        return self.request("get", path, params=params)

    def post(self, path: str, form: Optional[Mapping[str, Any]] = None) -> Response:
        """Make a POST request, sending ``form`` form-encoded in the body."""
        return self.request("post", path, form=form)

    def put(self, path: str, form: Optional[Mapping[str, Any]] = None) -> Response:
        """Make a PUT request, sending ``form`` form-encoded in the body."""
        return self.request("put", path, form=form)

    def patch(self, path: str, form: Optional[Mapping[str, Any]] = None) -> Response:
        """Make a PATCH request, sending ``form`` form-encoded in the body."""
        return self.request("patch", path, form=form)

    def delete(self, path: str, form: Optional[Mapping[str, Any]] = None) -> Response:
        """Make a DELETE request, sending ``form`` form-encoded in the body."""
        return self.request("delete", path, form=form)

    @property
    def connection(self) -> httpx.Client:
        """The persistent connection to the endpoint, opened on first access."""
        if self._connection is None:
            self._logger.debug(f"HEADERS: {self.default_headers}")

            self._connection = httpx.Client(
                base_url=self._config.endpoint,
                headers=Headers(self.default_headers),
                timeout=Timeout(None, connect=CONNECT_TIMEOUT),
                verify=create_ssl_context(),
            )
        return self._connection

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_USER_AGENT: self._config.user_agent,
            **self.custom_headers,
        }

    @property
    def custom_headers(self) -> dict[str, str]:
        return {}
