from flask import Flask
from config import Config
from dotenv import load_dotenv
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
import logging

# Load environment variables from .env file
load_dotenv()

# Initialize db globally
db = SQLAlchemy()

# Initialize migrate
migrate = Migrate()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    config_class.init_app(app)

    if not app.debug and not app.testing:
        app.logger.setLevel(logging.INFO)

    # The database is optional when items live in Supabase
    if app.config['SQLALCHEMY_DATABASE_URI']:
        db.init_app(app)
        migrate.init_app(app, db)

    from campus_finder.auth.models import User
    from campus_finder.lost_and_found.models import Category, Item

    from campus_finder.notifications import notifications as notifications_blueprint
    # Register blueprints
    app.register_blueprint(notifications_blueprint)

    from campus_finder.commands import register_commands
    register_commands(app)

    # Return the configured app
    return app
