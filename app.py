import logging
import os

import click
from flask import Flask, jsonify
from flask_cors import CORS

import api
import inquiries
from auth import issue_client_token
from config import Config, validate_environment
from db import db, init_db
from emails import nl2br
from models import BlogPost, ClientInquiry, EmailSubscription
from store import SQLAlchemyStore

FUNCTION_CORS = {
    "origins": "*",
    "send_wildcard": True,
    "methods": ["POST", "OPTIONS"],
    "allow_headers": ["Content-Type", "Authorization", "X-Client-Info", "Apikey"],
}


def configure_logging(app):
    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)

    if test_config is None:
        # Validate required environment variables
        validate_environment()
    else:
        app.config.update(test_config)

    configure_logging(app)

    CORS(app, resources={
        r"/process-contact-form": FUNCTION_CORS,
        r"/submit-application": FUNCTION_CORS,
        r"/submit-hire-inquiry": FUNCTION_CORS,
        r"/api/*": {"origins": "*", "send_wildcard": True},
    })

    init_db(app)
    app.extensions["store"] = SQLAlchemyStore(db, [ClientInquiry, EmailSubscription, BlogPost])
    app.add_template_filter(nl2br)

    app.register_blueprint(inquiries.bp)
    app.register_blueprint(api.bp)

    register_error_handlers(app)
    register_commands(app)

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({"message": "ShiftORL Backend API is running."})

    return app


def register_error_handlers(app):
    @app.errorhandler(400)
    @app.errorhandler(401)
    @app.errorhandler(403)
    @app.errorhandler(404)
    @app.errorhandler(405)
    @app.errorhandler(413)
    @app.errorhandler(500)
    def handle_error(e):
        message = e.description
        if e.code == 405:
            message = "Method not allowed"
        if e.code == 500:
            original = getattr(e, "original_exception", None)
            app.logger.error("Server error occurred", exc_info=original or e)
        return jsonify({"success": False, "error": message}), e.code


def register_commands(app):
    @app.cli.command("init-db")
    def init_db_command():
        """Create the database tables."""
        db.create_all()
        click.echo("Initialized the database.")

    @app.cli.command("issue-client-token")
    @click.option("--role", default="anon", show_default=True)
    @click.option("--days", default=3650, show_default=True)
    def issue_client_token_command(role, days):
        """Print a bearer token for the website's submission client."""
        click.echo(issue_client_token(app.config["CLIENT_JWT_SECRET"], role=role, days=days))


if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        db.create_all()
    app.run(debug=os.getenv("FLASK_DEBUG", "False").lower() == "true")
