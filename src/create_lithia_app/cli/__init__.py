"""CLI helpers exposed for other modules."""

from .ui import PromptCancelled, StepTracker, select_with_arrows

__all__ = ["PromptCancelled", "StepTracker", "select_with_arrows"]
