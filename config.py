# config.py
import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]

# Local persistence
STUDENT_STORAGE_PATH = os.getenv("STUDENT_STORAGE_PATH", "student_storage.json")
STUDENT_STORAGE_KEY = os.getenv("STUDENT_STORAGE_KEY", "students")
PERSIST_STUDENTS = os.getenv("PERSIST_STUDENTS", "true").lower() in ("1", "true", "yes")

# Simulated latency, in seconds
FETCH_DELAY_MIN = float(os.getenv("FETCH_DELAY_MIN", "1.0"))
FETCH_DELAY_MAX = float(os.getenv("FETCH_DELAY_MAX", "2.0"))
SAVE_DELAY_MIN = float(os.getenv("SAVE_DELAY_MIN", "0.3"))
SAVE_DELAY_MAX = float(os.getenv("SAVE_DELAY_MAX", "0.5"))
UPDATE_DELAY_MIN = float(os.getenv("UPDATE_DELAY_MIN", "0.2"))
UPDATE_DELAY_MAX = float(os.getenv("UPDATE_DELAY_MAX", "0.3"))

# Simulated failure probabilities
FETCH_FAILURE_RATE = float(os.getenv("FETCH_FAILURE_RATE", "0.1"))
SAVE_FAILURE_RATE = float(os.getenv("SAVE_FAILURE_RATE", "0.05"))
