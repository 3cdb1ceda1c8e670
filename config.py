"""
Product Scraper Config Module
-----------------------------
Central configuration for the product scraper.

Contains:
- path management
- environment variables
- scraper settings
- remote scraping service settings
- logging configuration
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# -----------------------------
# Load .env if available
# -----------------------------
load_dotenv()

# -----------------------------
# Base paths
# -----------------------------
# output/ and logs/ live under the working directory, created on first write
WORK_DIR = Path(os.getenv("SCRAPER_HOME", Path.cwd()))

# -----------------------------
# Scraper configuration
# -----------------------------
SCRAPER = {
    "BASE_URL": "https://www.amazon.com",
    "TIMEOUT": 60000,
    "RESULTS_TIMEOUT": 15000,
    "HEADLESS": True,
}

# -----------------------------
# Output configuration
# -----------------------------
OUTPUT = {
    "PATH": os.getenv("SCRAPER_OUTPUT", str(WORK_DIR / "output" / "products.json")),
    "INDENT": 2,
}

# -----------------------------
# Remote scraping service
# -----------------------------
REMOTE_API = {
    "BASE_URL": os.getenv("SCRAPER_API_URL", "https://api.scrape-it.cloud"),
    "PATH": "/scrape",
    "TOKEN": os.getenv("SCRAPER_API_TOKEN"),
    "ACTOR": "scraper.amazon",
    "TIMEOUT": 60,
}

# -----------------------------
# Logging configuration
# -----------------------------
LOGGING = {
    "LOG_FILE": os.getenv("SCRAPER_LOG_FILE", str(WORK_DIR / "logs" / "product_scraper.log")),
    "LEVEL": os.getenv("LOG_LEVEL", "INFO"),
}

# -----------------------------
# Config classes
# -----------------------------
class Config:
    SCRAPER = SCRAPER
    OUTPUT = OUTPUT
    REMOTE_API = REMOTE_API
    LOGGING = LOGGING


class DevConfig(Config):
    SCRAPER = {**SCRAPER, "HEADLESS": False}
    LOGGING = {**LOGGING, "LEVEL": "DEBUG"}


class ProdConfig(Config):
    SCRAPER = {**SCRAPER, "HEADLESS": True}
    LOGGING = {**LOGGING, "LEVEL": "INFO"}


# active config
ACTIVE_CONFIG = DevConfig() if os.getenv("ENV") == "dev" else ProdConfig()
