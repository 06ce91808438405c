import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))

class Config:
    # App settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-key-change-in-production')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Database
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URI', 'sqlite:///healthlog.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Seed user created at startup; the unique username keeps it from being added twice
    SEED_DEFAULT_USER = True
    SEED_USER = {
        'firstname': 'John',
        'lastname': 'Doe',
        'username': 'myusername',
        'password': 'mypassword',
        'email': 'myemail@gmail.com',
    }

    # Client
    CLIENT_BUILD_DIR = os.getenv('CLIENT_BUILD_DIR', os.path.join(BASE_DIR, 'client', 'build'))
    API_BASE_URL = os.getenv('API_BASE_URL', 'http://localhost:3001')

class DevelopmentConfig(Config):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv('DEV_DATABASE_URI', 'sqlite:///dev.db')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')

class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SEED_DEFAULT_USER = False

class ProductionConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URI')

# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
