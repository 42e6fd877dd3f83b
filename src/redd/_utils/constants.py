from .._version import __version__

# Headers
HEADER_USER_AGENT = "User-Agent"
HEADER_CONTENT_TYPE = "Content-Type"

# Content types
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"

# Environment variables
ENV_ENDPOINT = "REDD_ENDPOINT"
ENV_USER_AGENT = "REDD_USER_AGENT"
ENV_SSL_CERT_FILE = "SSL_CERT_FILE"
ENV_SSL_CERT_DIR = "SSL_CERT_DIR"
ENV_REQUESTS_CA_BUNDLE = "REQUESTS_CA_BUNDLE"

# Timeouts (seconds)
CONNECT_TIMEOUT = 5.0
READ_TIMEOUT = 5.0
WRITE_TIMEOUT = 5.0

# Default User-Agent, in the "<platform>:<app>:v<version> (by <author>)" form
USER_AGENT = f"Python:Redd:v{__version__} (by unknown)"

SUPPORTED_VERBS = ("get", "post", "put", "patch", "delete")
