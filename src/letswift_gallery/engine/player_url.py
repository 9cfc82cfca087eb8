from letswift_gallery.config import settings
from letswift_gallery.domain.models import VideoRecord


def make_watch_url(video_id: str) -> str:
    return settings.watch_url_template.format(video_id=video_id)


def make_embed_url(video_id: str) -> str:
    return settings.embed_url_template.format(video_id=video_id)


def make_player_url(video: VideoRecord) -> str:
    """
    Returns the URL handed to the embedded web player for a record.
    """
    return make_watch_url(video.video_id)
