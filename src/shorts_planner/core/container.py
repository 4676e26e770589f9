"""
Dependency Injection Container — wires ports to adapters.

A simple, explicit DI container that resolves domain ports to their
concrete infrastructure adapters based on application settings.
Whether the model path is taken is decided here, from the settings
object, and nowhere else.

Usage:
    settings = Settings()
    container = Container(settings)
    service = container.delivery_service()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shorts_planner.application.delivery import PlanDeliveryService
    from shorts_planner.core.config import Settings
    from shorts_planner.domain.ports import PlanGenerator

log = logging.getLogger(__name__)


class Container:
    """Dependency injection container.

    Lazily creates and caches adapter instances. Each adapter is created
    only when first requested and reused for subsequent calls.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings

    @lru_cache(maxsize=1)
    def plan_generator(self) -> PlanGenerator | None:
        """Resolve PlanGenerator → OpenAIPlanGenerator, or None without a key."""
        if not self._settings.openai.is_configured:
            log.info("Plan engine: templates (no OpenAI key)")
            return None

        from shorts_planner.infrastructure.adapters.openai_planner import OpenAIPlanGenerator

        log.info("Plan engine: OpenAI (%s)", self._settings.openai.model)
        return OpenAIPlanGenerator(self._settings)

    @lru_cache(maxsize=1)
    def delivery_service(self) -> PlanDeliveryService:
        """Resolve the PlanDeliveryService with the configured generator."""
        from shorts_planner.application.delivery import PlanDeliveryService

        return PlanDeliveryService(
            generator=self.plan_generator(),
            timeout_seconds=self._settings.openai.timeout_seconds,
        )
