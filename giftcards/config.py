import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    DATA_DIR = Path(os.getenv("GIFTS_DATA_DIR", BASE_DIR / "data"))
    GIFTS_FILE = Path(os.getenv("GIFTS_FILE", DATA_DIR / "gifts.json"))


class DevConfig(Config):
    DEBUG = True


class ProdConfig(Config):
    DEBUG = False
