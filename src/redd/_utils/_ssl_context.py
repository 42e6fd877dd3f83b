import os
import ssl

import certifi

from .constants import ENV_SSL_CERT_DIR, ENV_SSL_CERT_FILE, ENV_REQUESTS_CA_BUNDLE


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    path = os.path.expandvars(path)
    path = os.path.expanduser(path)
    return path


def create_ssl_context() -> ssl.SSLContext:
    """Build the SSL context used to verify the endpoint's certificate.

    An explicit CA file from ``SSL_CERT_FILE`` or ``REQUESTS_CA_BUNDLE`` wins
    over the ``certifi`` bundle. ``SSL_CERT_DIR`` adds a directory of CA
    certificates on top of whichever file is chosen.
    """
    ssl_cert_file = expand_path(os.environ.get(ENV_SSL_CERT_FILE))
    requests_ca_bundle = expand_path(os.environ.get(ENV_REQUESTS_CA_BUNDLE))
    ssl_cert_dir = expand_path(os.environ.get(ENV_SSL_CERT_DIR))

    return ssl.create_default_context(
        cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
        capath=ssl_cert_dir or None,
    )
