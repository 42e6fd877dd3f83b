import os

from pydantic import BaseModel, ConfigDict, Field

from ._utils.constants import ENV_ENDPOINT, ENV_USER_AGENT, USER_AGENT
from .models.errors import EndpointMissingError


class ClientConfig(BaseModel):
    """Connection settings of a :class:`redd.Client`.

    Frozen once built: a client talks to one endpoint with one user agent for
    its whole lifetime.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(min_length=1)
    user_agent: str = USER_AGENT

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load the configuration from ``REDD_ENDPOINT`` and ``REDD_USER_AGENT``.

        Raises:
            EndpointMissingError: If ``REDD_ENDPOINT`` is unset or empty.
        """
        endpoint = os.getenv(ENV_ENDPOINT)
        if not endpoint:
            raise EndpointMissingError()

        return cls(
            endpoint=endpoint,
            user_agent=os.getenv(ENV_USER_AGENT) or USER_AGENT,
        )
