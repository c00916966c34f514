import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from the package directory or the backend directory
env_path = Path(__file__).parent / '.env'
if not env_path.exists():
    env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)


class Config:
    MONGO_URI = os.getenv('MONGO_URI') or 'mongodb://localhost:27017'
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'eventodb')
    MONGO_SERVER_SELECTION_TIMEOUT_MS = int(os.getenv('MONGO_SERVER_SELECTION_TIMEOUT_MS', '5000'))

    EVENTS_COLLECTION = os.getenv('EVENTS_COLLECTION', 'eventos')
    PARTICIPANTS_COLLECTION = os.getenv('PARTICIPANTS_COLLECTION', 'participantes')

    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', '8080'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Cross-origin policy
    CORS_ORIGINS = '*'
    CORS_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
    CORS_ALLOW_HEADERS = ['Content-Type', 'Authorization']
    CORS_EXPOSE_HEADERS = ['Content-Length']
    CORS_SUPPORTS_CREDENTIALS = True
    CORS_MAX_AGE = 300


class TestConfig(Config):
    TESTING = True
    MONGO_DB_NAME = 'eventodb_test'
