import os


class BaseConfig:
    SERVICE_NAME = "placetory-backoffice"
    ROOT_VIEW = "index"
    NOT_FOUND_VIEW = "pages-404"
    VIEW_SUFFIX = ".html"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class DevConfig(BaseConfig):
    DEBUG = True


class ProdConfig(BaseConfig):
    DEBUG = False


class TestConfig(BaseConfig):
    TESTING = True
    DEBUG = False


def get_config(name: str | None):
    env = name or os.getenv("FLASK_ENV") or os.getenv("ENV") or "dev"
    env = env.lower()
    if env.startswith("prod"):
        return ProdConfig
    if env.startswith("test"):
        return TestConfig
    return DevConfig
