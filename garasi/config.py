import os


TOTAL_ROOMS = 30
DUE_SOON_DAYS = 7
RECENT_EXPENSES_LIMIT = 10
GARAGE_NAME = "Garasi Sumber Jaya"


class Config:
    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("SECRET_KEY")
        self.REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
        self.REDIS_PORT = int(os.getenv("REDIS_PORT", 6379))
        self.REDIS_DB = int(os.getenv("REDIS_DB", 0))
        self.TOTAL_ROOMS = int(os.getenv("TOTAL_ROOMS", TOTAL_ROOMS))
        self.DUE_SOON_DAYS = int(os.getenv("DUE_SOON_DAYS", DUE_SOON_DAYS))
        self.RECENT_EXPENSES_LIMIT = int(os.getenv("RECENT_EXPENSES_LIMIT", RECENT_EXPENSES_LIMIT))
        self.GARAGE_NAME = os.getenv("GARAGE_NAME", GARAGE_NAME)
        self.PHOTO_MAX_WIDTH = int(os.getenv("PHOTO_MAX_WIDTH", 800))
        self.FLASK_HOST = os.getenv("FLASK_HOST", "0.0.0.0")
        self.FLASK_PORT = int(os.getenv("FLASK_PORT", 5000))
        self.FLASK_DEBUG = os.getenv("FLASK_DEBUG", "False").lower() in ("true", "1")
