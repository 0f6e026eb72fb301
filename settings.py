import os


class Settings:
    HOST = os.getenv('GAMES_API_HOST', '127.0.0.1')
    PORT = int(os.getenv('GAMES_API_PORT', '8000'))
    LOG_LEVEL = os.getenv('GAMES_API_LOG_LEVEL', 'INFO')
    ENVIRONMENT = os.getenv('ENVIRONMENT', 'development')


settings = Settings()
