import os
from pathlib import Path

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent

class Config:
    # Secret key - will be validated later
    SECRET_KEY = os.getenv('SECRET_KEY')

    # Item store backend: 'sql' (our own database) or 'supabase'
    ITEM_STORE = os.getenv('ITEM_STORE', 'sql')

    # Database
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL')

    # Supabase
    SUPABASE_URL = os.getenv('SUPABASE_URL')
    SUPABASE_SERVICE_ROLE_KEY = os.getenv('SUPABASE_SERVICE_ROLE_KEY')

    # Email provider (optional, notifications are reported but not sent without it)
    RESEND_API_KEY = os.getenv('RESEND_API_KEY')
    RESEND_API_URL = os.getenv('RESEND_API_URL', 'https://api.resend.com/emails')
    FROM_EMAIL = os.getenv('FROM_EMAIL') or os.getenv('RESEND_FROM') or 'notifications@no-reply.local'

    # Parallel deliveries per request
    NOTIFY_MAX_WORKERS = int(os.getenv('NOTIFY_MAX_WORKERS', '4'))

    # SQLAlchemy
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Flask settings
    DEBUG = os.getenv('FLASK_ENV') == 'development'
    TESTING = False

    @classmethod
    def init_app(cls, app):
        """Initialize configuration with the app instance"""
        if not app.config['SECRET_KEY']:
            if app.config['DEBUG'] or app.config['TESTING']:
                # Use a default for development
                app.config['SECRET_KEY'] = 'dev-secret-key-for-development-only'
                app.logger.warning('Using default SECRET_KEY for development')
            else:
                raise ValueError('SECRET_KEY must be set in production')

        if not app.config['SQLALCHEMY_DATABASE_URI'] and app.config['ITEM_STORE'] == 'sql':
            if app.config['DEBUG']:
                # Default SQLite for development
                app.config['SQLALCHEMY_DATABASE_URI'] = 'sqlite:///' + os.path.join(BASE_DIR, 'database.db')
                app.logger.warning('Using SQLite database for development')
            else:
                # Reported per request as a configuration error
                app.logger.error('DATABASE_URL is not set, match notifications will fail')


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    ITEM_STORE = 'sql'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SUPABASE_URL = None
    SUPABASE_SERVICE_ROLE_KEY = None
    RESEND_API_KEY = None
    FROM_EMAIL = 'Campus Finder <no-reply@campus-finder.test>'
