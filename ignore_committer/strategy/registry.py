"""Registry for resolving build decision policies by id."""

from typing import Any, TypeVar

from ignore_committer.core.logging import get_logger
from ignore_committer.shared.exceptions import StrategyNotFoundError, StrategyRegistrationError
from ignore_committer.strategy.base import BuildDecisionPolicy

logger = get_logger(__name__)

PolicyT = TypeVar("PolicyT", bound=type[BuildDecisionPolicy])


class StrategyRegistry:
    """Process-wide mapping of strategy id to policy class."""

    _instance: "StrategyRegistry | None" = None

    def __init__(self) -> None:
        self._strategies: dict[str, type[BuildDecisionPolicy]] = {}

    @classmethod
    def get_global(cls) -> "StrategyRegistry":
        """Get or create the global registry instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register(self, policy_cls: type[BuildDecisionPolicy]) -> None:
        """Register a policy class under its strategy_id.

        Raises:
            StrategyRegistrationError: If the id is taken by a different class
        """
        strategy_id = policy_cls.strategy_id
        existing = self._strategies.get(strategy_id)
        if existing is not None and existing is not policy_cls:
            raise StrategyRegistrationError(
                f"Strategy id {strategy_id!r} already registered by {existing.__name__}"
            )
        self._strategies[strategy_id] = policy_cls
        logger.debug("strategy.registry.registered", strategy_id=strategy_id)

    def resolve(self, strategy_id: str) -> type[BuildDecisionPolicy]:
        """Look up a policy class.

        Raises:
            StrategyNotFoundError: If nothing is registered under strategy_id
        """
        try:
            return self._strategies[strategy_id]
        except KeyError:
            raise StrategyNotFoundError(f"Unknown strategy: {strategy_id}") from None

    def create(self, strategy_id: str, **config: Any) -> BuildDecisionPolicy:
        """Instantiate a registered policy with its configuration values.

        Example:
            >>> registry.create(
            ...     "ignore-committer",
            ...     ignored_authors="bot@ci",
            ...     allow_build_if_not_excluded_author=False,
            ... )
        """
        return self.resolve(strategy_id)(**config)

    def available(self) -> dict[str, str]:
        """Get registered strategies.

        Returns:
            Mapping of strategy id to display name
        """
        return {
            strategy_id: policy_cls.display_name
            for strategy_id, policy_cls in sorted(self._strategies.items())
        }


def register_strategy(policy_cls: PolicyT) -> PolicyT:
    """Class decorator registering a policy with the global registry."""
    StrategyRegistry.get_global().register(policy_cls)
    return policy_cls
