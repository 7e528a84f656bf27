"""
Factory for PNC clients configured from the active bacon configuration.
"""

import logging
from typing import Generic, Type, TypeVar

from ..config import get_config
from ..exit_codes import FatalError
from .pnc_client import PncClient

logger = logging.getLogger(__name__)

C = TypeVar('C', bound=PncClient)


class ClientCreator(Generic[C]):
    """
    Builds clients of one type on demand.

    Clients are created per call so that the configuration location chosen
    by the running command (-p flag, environment, default) is honoured.

    Example:
        CREATOR = ClientCreator(ProjectClient)
        CREATOR.get_client().get_specific("8")
        CREATOR.get_client_authenticated().update("8", project)
    """

    def __init__(self, client_class: Type[C]):
        self.client_class = client_class

    def _pnc_config(self) -> dict:
        pnc = get_config().get('pnc') or {}
        if not pnc.get('url'):
            raise FatalError("PNC url is not configured (pnc.url in config.yaml or BACON_PNC_URL)")
        return pnc

    def get_client(self) -> C:
        """Anonymous client, sufficient for read-only calls."""
        pnc = self._pnc_config()
        return self.client_class(
            pnc['url'],
            page_size=pnc.get('page_size', 50),
            timeout=pnc.get('timeout', 30),
        )

    def get_client_authenticated(self) -> C:
        """Client sending the configured bearer token."""
        pnc = self._pnc_config()
        token = pnc.get('token')
        if token is None or token == '':
            raise FatalError("PNC token is not configured (pnc.token in config.yaml or BACON_PNC_TOKEN)")
        logger.debug(f"Creating authenticated {self.client_class.__name__}")
        return self.client_class(
            pnc['url'],
            token=str(token),
            page_size=pnc.get('page_size', 50),
            timeout=pnc.get('timeout', 30),
        )
