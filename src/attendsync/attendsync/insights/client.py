from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict


class InsightsClient(ABC):
    """Generative model used to write the attendance report."""

    @abstractmethod
    def generate_json(self, system_prompt: str, user_prompt: str) -> Dict[str, Any]:
        """Return the model's structured (JSON object) answer."""
        raise NotImplementedError
