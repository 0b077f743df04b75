"""StoryNode packaging core - trailer format and project manifest."""
from .footer import decode_trailer, encode_trailer, locate_archive, read_embedded_archive, read_footer
from .manifest import GameSettings, ManifestError, ProjectMeta, load_manifest, read_game_settings

__all__ = [
    "decode_trailer",
    "encode_trailer",
    "locate_archive",
    "read_embedded_archive",
    "read_footer",
    "GameSettings",
    "ManifestError",
    "ProjectMeta",
    "load_manifest",
    "read_game_settings",
]
