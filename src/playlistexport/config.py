"""Configuration and environment settings."""

import os
from dotenv import load_dotenv

load_dotenv()

# Directory Settings
DATA_DIR = os.getenv("DATA_DIR", "data")
CREDENTIALS_DIR = os.getenv("CREDENTIALS_DIR", os.path.join(DATA_DIR, "credentials"))

# YouTube API Settings
YOUTUBE_SCOPES = ["https://www.googleapis.com/auth/youtube.readonly"]
CLIENT_SECRETS_FILE = os.getenv(
    "GOOGLE_CLIENT_SECRETS_FILE", "../client_secret_console_developers_google_com.json"
)
TOKEN_FILE = os.getenv("TOKEN_FILE", os.path.join(CREDENTIALS_DIR, "token.pickle"))

# Maximum number of items returned per listing call
MAX_RESULTS = 40

# Output Settings
DEFAULT_PLAYLISTS_OUTPUT = "youtube-output"
DEFAULT_WATCH_LATER_OUTPUT = "youtube-output-wl"
FORMAT_EXTENSIONS = {"json": ".json", "text": ".txt"}
