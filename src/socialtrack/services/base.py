"""BaseService — shared foundation for socialtrack services.

Every service receives the :class:`SocialNetwork` at construction time and
reads or mutates the graph only through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from socialtrack.infrastructure.network import SocialNetwork


class BaseService:
    """Base for service-layer classes.

    Usage::

        class NetworkService(BaseService):
            def stats(self) -> ServiceResult:
                store = self._network.store
                ...
    """

    def __init__(self, network: SocialNetwork) -> None:
        self._network = network
