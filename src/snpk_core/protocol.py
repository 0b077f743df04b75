"""StoryNode player packaging constants.

Single source of truth for the embedded-archive trailer layout and the
runtime defaults. Keep this file stable. The packager and the player must
remain synchronized.
"""

# Trailer magic, last 4 bytes of a packaged player
MAGIC = b"SNPK"

# Trailer: [ArchiveSize(8, u64 LE) | Magic(4)] = 12 bytes at end of file
TRAILER_FMT = "<Q4s"
TRAILER_LEN = 12

# Extraction layout
WORKDIR_NAME = "storynode_game"
MANIFEST_NAME = "project.json"

# Window defaults when the manifest says nothing
PRODUCT_NAME = "StoryNode Player"
DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 720
DEFAULT_RESIZABLE = True
DEFAULT_FULLSCREEN = False

# Largest value a u32 window dimension may take
MAX_DIMENSION = 0xFFFFFFFF
