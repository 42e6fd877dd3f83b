from .._utils.constants import ENV_ENDPOINT, SUPPORTED_VERBS


class ReddError(Exception):
    """Base class for errors raised by redd itself.

    Transport failures and JSON decoding errors are not wrapped; they reach
    the caller as raised by httpx and the json module.
    """


class EndpointMissingError(ReddError):
    def __init__(
        self,
        message=f"No endpoint configured. Pass one explicitly or set the {ENV_ENDPOINT} environment variable.",
    ):
        self.message = message
        super().__init__(self.message)


class UnsupportedVerbError(ReddError, ValueError):
    def __init__(self, verb: str):
        self.verb = verb
        self.message = (
            f"Unsupported HTTP verb {verb!r}. "
            f"Expected one of: {', '.join(SUPPORTED_VERBS)}."
        )
        super().__init__(self.message)
