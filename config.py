import os
from dotenv import load_dotenv

load_dotenv() # Load variables from the .env file


def _database_uri(host, user, password, name):
    # Build MySQL connection string (using PyMySQL driver)
    return (
        f"mysql+pymysql://{user}@{host}/{name}"
        if not password else
        f"mysql+pymysql://{user}:{password}@{host}/{name}"
    )


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'kunci-rahasia-default-yang-aman')
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', SECRET_KEY)

    DB_HOST = os.getenv('DB_HOST', 'localhost')
    DB_USER = os.getenv('DB_USER', 'root')
    DB_PASSWORD = os.getenv('DB_PASSWORD')
    DB_NAME = os.getenv('DB_NAME', 'cvstudio')

    # DATABASE_URL wins over the DB_* parts (PostgreSQL, SQLite, ...)
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL') or _database_uri(
        DB_HOST, DB_USER, DB_PASSWORD, DB_NAME
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False  # disables overhead warning

    CORS_ORIGINS = os.getenv('CORS_ORIGINS', 'http://localhost:3000')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Page setup handed to the print stylesheet
    CV_PAGE_SIZE = os.getenv('CV_PAGE_SIZE', 'A4')
    CV_PAGE_MARGIN = os.getenv('CV_PAGE_MARGIN', '2cm')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    JWT_SECRET_KEY = 'test-jwt-secret-key-with-enough-length'
    LOG_LEVEL = 'WARNING'
