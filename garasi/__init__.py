import logging
from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv

from .config import Config
from .errors import register_error_handlers
from .extensions import init_extensions


logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")


def create_app(config=None, redis_client=None) -> Flask:
    load_dotenv()

    app = Flask(__name__)
    app.config.from_object(config or Config())

    CORS(app)

    init_extensions(app, redis_client)
    register_error_handlers(app)

    from .routes.customers import bp as customers_bp
    from .routes.dashboard import bp as dashboard_bp
    from .routes.expenses import bp as expenses_bp
    from .routes.photos import bp as photos_bp
    from .routes.rooms import bp as rooms_bp

    app.register_blueprint(customers_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(expenses_bp)
    app.register_blueprint(photos_bp)
    app.register_blueprint(rooms_bp)

    return app
