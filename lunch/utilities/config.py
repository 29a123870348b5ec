"""Configuration management for the lunch menu skill."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Menu feed
FEED_URL: Final[str] = os.getenv(
    'LUNCH_FEED_URL',
    'http://www.sagedining.com/intranet/apps/mb/pubasynchhandler.php?unitId=S0073&mbMenuCardinality=1'
)
FEED_TIMEOUT_SECONDS: Final[float] = float(os.getenv('LUNCH_FEED_TIMEOUT_SECONDS', '10'))

# Spoken names
SKILL_NAME: Final[str] = os.getenv('LUNCH_SKILL_NAME', 'Stone Ridge Lunch')
SCHOOL_NAME: Final[str] = os.getenv('LUNCH_SCHOOL_NAME', 'Stone Ridge')
PROVIDER_NAME: Final[str] = os.getenv('LUNCH_PROVIDER_NAME', 'Sage Dining')

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
