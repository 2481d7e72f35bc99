"""Allowlist resolution feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class AllowlistSettings(FeatureSettings):
    """Allowlist resolution configuration.

    Environment Variables:
        ALLOWLIST_PAGE_SIZE: Members requested per users.list page (default: 200)
        ALLOWLIST_LOOKUP_WORKERS: Threads used for per-entry users.info /
            users.lookupByEmail calls in the targeted strategy (default: 4)

    Example:
        ```python
        from infrastructure.configuration import settings

        page_size = settings.allowlist.page_size
        ```
    """

    page_size: int = Field(
        default=200,
        ge=1,
        le=1000,
        alias="ALLOWLIST_PAGE_SIZE",
        description="Members requested per users.list page",
    )
    lookup_workers: int = Field(
        default=4,
        ge=1,
        alias="ALLOWLIST_LOOKUP_WORKERS",
        description="Concurrent per-entry lookups in the targeted strategy",
    )