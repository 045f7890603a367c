import os
from dotenv import load_dotenv

load_dotenv()

# ------------------------------------------------------------------------------
# STORAGE
# ------------------------------------------------------------------------------
DATA_DIR = os.getenv("DATA_DIR", os.path.join(os.getcwd(), "data"))
DATABASE_FILE = os.getenv("DATABASE_FILE", os.path.join(DATA_DIR, "strings.json"))

# ------------------------------------------------------------------------------
# SERVER
# ------------------------------------------------------------------------------
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DEBUG_ROUTES = os.getenv("DEBUG_ROUTES") == "1"
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
