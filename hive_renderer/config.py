"""
Configuration module for the Hive content renderer.
Centralizes the environment-driven defaults used by RendererOptions and logging.
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Renderer defaults
BASE_URL = os.getenv("RENDERER_BASE_URL", "https://hive.blog/")
BREAKS = os.getenv("RENDERER_BREAKS", "true").lower() == "true"
IPFS_PREFIX = os.getenv("RENDERER_IPFS_PREFIX") or None
ASSETS_WIDTH = int(os.getenv("RENDERER_ASSETS_WIDTH", "640"))
ASSETS_HEIGHT = int(os.getenv("RENDERER_ASSETS_HEIGHT", "480"))

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None
LOG_RETENTION = os.getenv("LOG_RETENTION", "7 days")

# Image placeholder used when an img src cannot be trusted
BROKEN_IMAGE_SRC = "brokenimg.jpg"
