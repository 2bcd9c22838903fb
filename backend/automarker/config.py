# config variables
import os
import secrets

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
PUBLIC_DIR = os.environ.get("PUBLIC_DIR", os.path.join(BASE_DIR, "public"))

# access code gate
ACCESS_CODE = os.environ.get("ACCESS_CODE", "FETHINK-PRIORITY-01")

# session token settings
SECRET_KEY = os.environ.get("SECRET_KEY") or secrets.token_hex(32)
ALGORITHM = "HS256"
SESSION_MINUTES = int(os.environ.get("SESSION_MINUTES", "120"))
COOKIE_NAME = "fethink_comms_session"  # keep stable across clones
COOKIE_SECURE = os.environ.get("COOKIE_SECURE", "true").lower() in ("1", "true", "yes")

# navigation links shown by the front-end
COURSE_BACK_URL = os.environ.get("COURSE_BACK_URL", "")
NEXT_LESSON_URL = os.environ.get("NEXT_LESSON_URL", "")

MAX_ANSWER_CHARS = int(os.environ.get("MAX_ANSWER_CHARS", "6000"))
CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
PORT = int(os.environ.get("PORT", "3000"))
