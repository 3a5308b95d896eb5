"""Root pytest configuration; makes ``src.playlistexport`` importable."""
