"""
Runtime configuration.

Every value can be overridden through the environment (or a .env file,
which main.py loads before importing this module):
  ANALYTICS_DATA_FILE=/var/lib/workshop/analytics-data.json
  PORT=3002
  CORS_ORIGINS=http://localhost:5173,https://workshop.example.com
"""

import os
from pathlib import Path

BACKEND_ROOT = Path(__file__).resolve().parent

DATA_FILE = Path(os.environ.get("ANALYTICS_DATA_FILE", BACKEND_ROOT / "analytics-data.json"))

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3002"))

# "*" allows any origin; workshop apps call /api/track from their own domains
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
