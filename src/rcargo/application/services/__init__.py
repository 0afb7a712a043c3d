"""Application service exports."""

from rcargo.application.services.cache_service import (
    CacheEntry,
    CacheOverview,
    ProjectCacheStatus,
    PurgePlan,
    PurgeScope,
    TargetCacheService,
)

__all__ = [
    "CacheEntry",
    "CacheOverview",
    "ProjectCacheStatus",
    "PurgePlan",
    "PurgeScope",
    "TargetCacheService",
]
