"""Services layer - Application orchestration."""

from .path_finder import PathFinderService

__all__ = ["PathFinderService"]
