from flask import Flask

from .config import get_config
from .extensions import init_extensions
from .routes.core import bp as core_bp
from .routes.pages import bp as pages_bp


def create_app(config_name: str | None = None) -> Flask:
    app = Flask(__name__, template_folder="templates")
    app.config.from_object(get_config(config_name))
    app.logger.setLevel(app.config["LOG_LEVEL"])

    init_extensions(app)

    app.register_blueprint(core_bp)
    # Catch-all page routes go last
    app.register_blueprint(pages_bp)

    return app
