import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Provide a safe development fallback so the app still boots without a .env file.
    SECRET_KEY = os.getenv('SECRET_KEY') or 'dev-secret-key-change-me'
    DATABASE_URL = os.getenv('DATABASE_URL')
    SQLALCHEMY_DATABASE_URI = DATABASE_URL or 'sqlite:///tuskers.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Bearer tokens for the admin dashboard
    AUTH_TOKEN_SECRET = os.getenv('AUTH_TOKEN_SECRET') or SECRET_KEY
    AUTH_TOKEN_MAX_AGE = int(os.getenv('AUTH_TOKEN_MAX_AGE', 24 * 60 * 60))

    # Request bodies above this size are rejected with 413
    MAX_REQUEST_BYTES = int(os.getenv('MAX_REQUEST_BYTES', 1024 * 1024))
    # Werkzeug enforces this one while reading, so chunked bodies are capped too
    MAX_CONTENT_LENGTH = MAX_REQUEST_BYTES

    # Development convenience: create missing tables on startup instead of running migrations
    AUTO_CREATE_TABLES = os.getenv('AUTO_CREATE_TABLES', 'false').lower() in ('1', 'true', 'yes')
