# config.py
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from the project root
load_dotenv(Path(__file__).resolve().parent / ".env")

APP_TITLE = os.getenv("HEALTHPREDICT_TITLE", "HealthPredict")
APP_ICON = os.getenv("HEALTHPREDICT_ICON", "🩺")
LOG_LEVEL = os.getenv("HEALTHPREDICT_LOG_LEVEL", "INFO").upper()
DEMO_MODE = os.getenv("HEALTHPREDICT_DEMO_MODE", "False") == "True"
