"""
Client Factory
Creates PananamesClient instances from configuration
"""

from typing import Optional

import requests

from pananames.api.client import PananamesClient
from pananames.utils.config import Settings, get_settings
from pananames.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def get_client(
    token: Optional[str] = None,
    config: Optional[Settings] = None,
    session: Optional[requests.Session] = None
) -> PananamesClient:
    """
    Factory function to create a configured API client.

    Args:
        token: Optional API signature. If None, reads PANANAMES_TOKEN from config.
        config: Optional Settings instance. Uses default if None.
        session: Optional requests.Session to use as the transport

    Returns:
        PananamesClient instance

    Raises:
        ValueError: If no token is configured

    Example:
        # Use configured token
        client = get_client()

        # Explicit token, custom transport
        client = get_client("my-signature", session=my_session)
    """
    if config is None:
        config = get_settings()

    configure_logging(config.log_level, config.log_file or None)

    token = token or config.pananames_token
    if not token:
        raise ValueError(
            "Pananames API token is not set. "
            "Pass it explicitly or set PANANAMES_TOKEN in the environment or .env file."
        )

    logger.debug("Creating Pananames client from settings")

    return PananamesClient(
        token=token,
        base_url=config.pananames_base_url,
        session=session,
        user_agent=config.pananames_user_agent,
        timeout=config.pananames_timeout
    )
