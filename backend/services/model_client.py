"""Abstract base class for the LLM capability used by the analysis pipeline."""

from abc import ABC, abstractmethod


class ModelClient(ABC):
    """Submit a prompt, receive the model's accumulated text.

    Implementations are built once at startup and shared by every request,
    so they must not keep per-request state.

    Subclasses must implement:
        - model_name: identifier reported in logs
        - invoke(prompt, timeout): run one prompt and return the reply text
    """

    model_name: str = ""

    @abstractmethod
    async def invoke(self, prompt: str, timeout: float) -> str:
        """Return the full reply text. Raises ModelProviderError on failure."""
