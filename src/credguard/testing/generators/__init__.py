"""Testing generators – property-based testing strategies."""
from credguard.testing.generators.strategies import secret_strategy

__all__ = ["secret_strategy"]
