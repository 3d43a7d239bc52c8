"""Data models for the ignore committer strategy."""

from collections.abc import Iterable
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def normalize_author(author: str | None) -> str | None:
    """Normalize an author identity for comparison.

    Args:
        author: Raw author identity (e-mail for git, user id for svn)

    Returns:
        Trimmed, lower-cased identity, or None if nothing is left

    Example:
        >>> normalize_author("  Alice@X.com ")
        'alice@x.com'
        >>> normalize_author("   ") is None
        True
    """
    if author is None:
        return None
    normalized = author.strip().lower()
    return normalized or None


def parse_author_list(authors: str | None) -> frozenset[str]:
    """Parse a comma-separated author string into a normalized set.

    Args:
        authors: Comma-separated identities (e.g., "bot@ci, Release@X.com")

    Returns:
        Set of normalized identities with empty entries dropped
    """
    if not authors:
        return frozenset()
    parsed = (normalize_author(author) for author in authors.split(","))
    return frozenset(author for author in parsed if author)


class Commit(BaseModel):
    """Single entry of a changeset as supplied by an SCM adapter.

    Attributes:
        commit_id: Commit SHA (git) or revision number (svn)
        author: Author identity compared against ignored authors
        author_name: Human-readable author name, if the SCM provides one
        message: Commit message
        timestamp: Commit timestamp
    """

    model_config = ConfigDict(frozen=True)

    commit_id: str = Field(..., description="Commit SHA or revision number")
    author: str | None = Field(None, description="Author identity (e-mail or user id)")
    author_name: str | None = Field(None, description="Author display name")
    message: str = Field(default="", description="Commit message")
    timestamp: datetime | None = Field(None, description="Commit timestamp")

    @field_validator("timestamp")
    @classmethod
    def ensure_timezone_aware(cls, v: datetime | None) -> datetime | None:
        """Ensure timestamp is timezone-aware, adding UTC if naive."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @property
    def normalized_author(self) -> str | None:
        """Get the author identity in comparison form."""
        return normalize_author(self.author)


class AuthorPolicy(BaseModel):
    """Immutable authorship policy evaluated against a changeset.

    Two modes are supported:
        - allow_build_if_not_excluded_author=False: build unless any commit
          is by an ignored author (veto)
        - allow_build_if_not_excluded_author=True: build only if at least
          one commit is by an author that is not ignored (inclusion)

    Attributes:
        ignored_authors: Normalized identities excluded from triggering builds
        allow_build_if_not_excluded_author: Selects inclusion mode over veto mode
    """

    model_config = ConfigDict(frozen=True)

    ignored_authors: frozenset[str] = Field(
        default_factory=frozenset, description="Normalized ignored author identities"
    )
    allow_build_if_not_excluded_author: bool = Field(
        default=False, description="Build if at least one author is not ignored"
    )

    @field_validator("ignored_authors", mode="before")
    @classmethod
    def normalize_ignored_authors(cls, v: str | Iterable[str] | None) -> frozenset[str]:
        """Normalize ignored authors from a comma-separated string or iterable."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            return parse_author_list(v)
        normalized = (normalize_author(author) for author in v)
        return frozenset(author for author in normalized if author)

    @field_validator("allow_build_if_not_excluded_author", mode="before")
    @classmethod
    def default_unset_flag(cls, v: bool | None) -> bool:
        """Treat an unset flag as veto mode."""
        return False if v is None else v

    @classmethod
    def from_config(
        cls, ignored_authors: str | None, allow_build_if_not_excluded_author: bool | None
    ) -> "AuthorPolicy":
        """Build a policy from the user-supplied configuration values.

        Args:
            ignored_authors: Comma-separated author identities
            allow_build_if_not_excluded_author: Inclusion mode flag (None means False)

        Returns:
            AuthorPolicy with normalized authors

        Example:
            >>> policy = AuthorPolicy.from_config(" Bot@CI ,dev@x", None)
            >>> sorted(policy.ignored_authors)
            ['bot@ci', 'dev@x']
        """
        return cls(
            ignored_authors=parse_author_list(ignored_authors),
            allow_build_if_not_excluded_author=bool(allow_build_if_not_excluded_author),
        )

    def is_ignored(self, author: str | None) -> bool:
        """Check whether an author identity is ignored.

        Args:
            author: Raw or normalized author identity

        Returns:
            True if the normalized identity is in ignored_authors
        """
        normalized = normalize_author(author)
        return normalized is not None and normalized in self.ignored_authors
