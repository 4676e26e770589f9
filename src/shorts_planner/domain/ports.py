"""
Domain Ports — abstract interfaces for infrastructure dependencies.

Ports define the contracts that the domain layer requires from the outside world.
Infrastructure adapters implement these interfaces, so the delivery service
depends on abstractions rather than on a particular model vendor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shorts_planner.domain.entities import GenerationRequest, ProductionPlan


class PlanGenerator(ABC):
    """Port for producing a production plan with an external model.

    Implementations: OpenAIPlanGenerator
    """

    @abstractmethod
    async def generate(self, request: GenerationRequest) -> ProductionPlan:
        """Generate a plan for a normalized brief.

        Args:
            request: Normalized generation request.

        Returns:
            A schema-validated ProductionPlan.

        Raises:
            MalformedOutputError: If the model output is not a valid plan.
        """
