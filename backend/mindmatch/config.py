import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev")

    # CORS
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Reverse proxy / IP headers
    TRUST_PROXY_HEADERS = os.environ.get("TRUST_PROXY_HEADERS", "1") == "1"

    # Socket.IO (empty = pick per platform)
    SOCKETIO_ASYNC_MODE = os.environ.get("SOCKETIO_ASYNC_MODE", "").strip()

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Rooms
    ROOM_CODE_LENGTH = int(os.environ.get("ROOM_CODE_LENGTH", "4"))
    MAX_PLAYERS = int(os.environ.get("MAX_PLAYERS", "6"))
    MAX_PLAYERS_LIMIT = int(os.environ.get("MAX_PLAYERS_LIMIT", "12"))
    NAME_MAX_LEN = int(os.environ.get("NAME_MAX_LEN", "24"))
    DEFAULT_THEME = os.environ.get("DEFAULT_THEME", "default")

    # Game
    QUESTIONS_PER_ROUND = int(os.environ.get("QUESTIONS_PER_ROUND", "10"))
    ANSWER_MAX_LEN = int(os.environ.get("ANSWER_MAX_LEN", "80"))
