"""
Configuration module for the GitHub file transfer client.

Values are read from the environment (optionally via a .env file) with
defaults suitable for the public GitHub REST API.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# GitHub REST API
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
GITHUB_API_VERSION = os.getenv("GITHUB_API_VERSION", "2022-11-28")
GITHUB_ACCEPT_HEADER = os.getenv("GITHUB_ACCEPT_HEADER", "application/vnd.github+json")

# Request timeouts (seconds)
GITHUB_REQUEST_TIMEOUT = float(os.getenv("GITHUB_REQUEST_TIMEOUT", "150"))
GITHUB_CONNECT_TIMEOUT = float(os.getenv("GITHUB_CONNECT_TIMEOUT", "60"))

# Identity stamped on every commit made by an upload
GH_COMMITTER_NAME = os.getenv("GH_COMMITTER_NAME", "File Transfer Helper")
GH_COMMITTER_EMAIL = os.getenv("GH_COMMITTER_EMAIL", "file-transfer-helper@users.noreply.github.com")

# Only consulted by the command-line entry point
GITHUB_TOKEN = os.getenv("GITHUB_TOKEN")
