"""Custom exception hierarchy for the ignore committer strategy."""


class IgnoreCommitterError(Exception):
    """Base exception for all strategy errors."""

    pass


class ConfigError(IgnoreCommitterError):
    """Raised when configuration validation fails."""

    pass


class ChangesetError(IgnoreCommitterError):
    """Raised when a changeset cannot be produced for a revision range."""

    pass


class ChangesetParseError(ChangesetError):
    """Raised when raw changelog output cannot be parsed."""

    pass


class RevisionError(ChangesetError):
    """Raised when a revision identifier cannot be normalized."""

    pass


class StrategyError(IgnoreCommitterError):
    """Base exception for strategy registry errors."""

    pass


class StrategyNotFoundError(StrategyError):
    """Raised when no strategy is registered under the requested id."""

    pass


class StrategyRegistrationError(StrategyError):
    """Raised when a strategy id is registered twice."""

    pass
