import json
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Mapping


@dataclass(frozen=True)
class Response:
    """A reply returned by :meth:`redd.Client.request`.

    Holds the status code, headers and raw body exactly as received. The body
    is only decoded as JSON when :attr:`body` is first read.
    """

    code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    raw_body: bytes = b""

    @cached_property
    def body(self) -> Any:
        """The raw body decoded as JSON, cached after the first access.

        Raises:
            json.JSONDecodeError: If the raw body is not valid JSON.
        """
        return json.loads(self.raw_body)
