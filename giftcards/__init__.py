from flask import Flask
from .config import Config
from .errors import register_error_handlers
from .extensions import cors
from .filters import register_filters

def create_app(config_class: type[Config] = Config):
    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config.from_object(config_class)
    app.json.sort_keys = False

    # Extensions
    cors.init_app(app)

    # Filters
    register_filters(app)

    # Error boundary
    register_error_handlers(app)

    # Blueprints
    from .routes.pages import bp as pages_bp
    from .routes.gifts_api import bp as gifts_api

    app.register_blueprint(pages_bp)
    app.register_blueprint(gifts_api, url_prefix="/api")

    return app
