# giftcards/extensions.py
from flask_cors import CORS

from .config import Config
from .storage.json_store import JsonStore

# CORS is a real Flask extension (keeps init_app)
cors = CORS()

# One JSON file holds the whole catalog
store = JsonStore(Config.GIFTS_FILE)
