import os
import ssl
from typing import Any

from .._config import ClientConfig


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    # Expand environment variables like $HOME
    path = os.path.expandvars(path)
    # Expand user home directory ~
    path = os.path.expanduser(path)
    return path


def create_ssl_context():
    # Try truststore first (system certificates)
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        # Fallback to manual certificate configuration
        import certifi

        ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
        requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
        ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )


def get_httpx_client_kwargs(config: ClientConfig) -> dict[str, Any]:
    """Keyword arguments for building an ``httpx.Client`` from a config."""
    kwargs: dict[str, Any] = {
        "verify": create_ssl_context() if config.verify else False,
        "timeout": config.timeout,
        "follow_redirects": config.follow_redirects,
        "headers": dict(config.headers),
    }
    if config.base_url:
        kwargs["base_url"] = config.base_url
    return kwargs
