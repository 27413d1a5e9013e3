"""
Sports banter commentary pipeline.

Turns a free-text sports message into a witty reply using recent match
results from TheSportsDB and Google Gemini for generation.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from project root
# Navigate up from backend/src/sport_banter/ to project root
project_root = Path(__file__).parent.parent.parent.parent
env_path = project_root / '.env'
load_dotenv(dotenv_path=env_path)

# Get API keys from environment
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_GENERATIVE_AI_API_KEY")
SPORTSDB_API_KEY = os.getenv("SPORTSDB_API_KEY", "1")
