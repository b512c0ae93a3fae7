"""
Configuration constants.

Everything can be overridden through environment variables (or a .env file in the working directory).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# --- Persistence ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tictactoe.db")
DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() == "true"

# --- Server ---
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Game ---
# The side played by the built-in opponent
AUTOMATED_PLAYER = os.getenv("AUTOMATED_PLAYER", "O").upper()

# Limits on the game history endpoint
HISTORY_DEFAULT_LIMIT = 10
HISTORY_MAX_LIMIT = 50
