import logging
import secrets

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import Config
from errors import ExpenseTrackerError
from routes.expenses import expenses_bp
from routes.spending_limits import spending_limits_bp

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    if not app.config.get("SECRET_KEY"):
        app.config["SECRET_KEY"] = secrets.token_hex(32)

    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=app.config.get('LOG_LEVEL', 'INFO'),
    )

    config_class.init_stores(app)

    app.register_blueprint(expenses_bp)
    app.register_blueprint(spending_limits_bp)

    register_error_handlers(app)

    @app.route('/health')
    def health():
        return {"status": "ok"}

    return app


def register_error_handlers(app):

    @app.errorhandler(ExpenseTrackerError)
    def handle_tracker_error(error):
        logger.info("Rejected request: %s", error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        logger.info("HTTP %s: %s", error.code, error.description)
        return jsonify({"error": error.description}), error.code


app = create_app()
