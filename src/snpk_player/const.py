ERRORS = {
  "E_NO_GAME_DATA": "No game data found",
  "E_ARCHIVE_FORMAT": "Embedded archive is not a readable zip",
  "E_ARCHIVE_ENTRY": "Failed to extract archive entry",
  "E_UNSAFE_ENTRY": "Archive entry escapes the working directory",
  "E_WORKDIR": "Working directory could not be reset",
  "E_NO_TRAILER": "No embedded archive trailer",
}
