"""On-disk cache for the daily reference document."""

from eurofxref.cache.document_cache import DocumentCache, cache_path_for_url, is_stale

__all__ = ["DocumentCache", "cache_path_for_url", "is_stale"]
