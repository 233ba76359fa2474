# domains/tracking/adapters/__init__.py
from .seventeen_track import SeventeenTrackAdapter, UpstreamResponse

__all__ = ["SeventeenTrackAdapter", "UpstreamResponse"]
