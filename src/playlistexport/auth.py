"""YouTube API authentication handling."""

import os
import pickle
from typing import Optional
from google_auth_oauthlib.flow import InstalledAppFlow
from google.auth.transport.requests import Request
from googleapiclient.discovery import build

from . import config
from .logging_config import get_logger

logger = get_logger(__name__)


def get_youtube_service(secrets_file: Optional[str] = None) -> Optional[object]:
    """
    Get an authenticated YouTube service object.
    Returns None if authentication fails.

    Args:
        secrets_file: OAuth client secrets JSON, defaults to config.CLIENT_SECRETS_FILE
    """
    secrets_file = secrets_file or config.CLIENT_SECRETS_FILE
    creds = None

    # Load existing credentials if available
    if os.path.exists(config.TOKEN_FILE):
        with open(config.TOKEN_FILE, "rb") as token:
            creds = pickle.load(token)

    # If there are no (valid) credentials available, let the user log in
    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            creds.refresh(Request())
        else:
            if not os.path.exists(secrets_file):
                logger.error("Secrets file not found: %s", secrets_file)
                return None
            try:
                flow = InstalledAppFlow.from_client_secrets_file(
                    secrets_file, config.YOUTUBE_SCOPES
                )
                creds = flow.run_local_server(port=0)
            except Exception as e:
                logger.error("Authentication failed: %s", str(e))
                return None

        # Save the credentials for the next run
        os.makedirs(os.path.dirname(config.TOKEN_FILE) or ".", exist_ok=True)
        with open(config.TOKEN_FILE, "wb") as token:
            pickle.dump(creds, token)

    try:
        return build("youtube", "v3", credentials=creds)
    except Exception as e:
        logger.error("Failed to build YouTube service: %s", str(e))
        return None
