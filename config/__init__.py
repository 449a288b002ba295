import importlib
import os
from types import ModuleType

_MODULE_BY_ENV = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    # APP_ENV picks the module; anything unrecognised runs as development
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _MODULE_BY_ENV.get(env, "config.development")


def load_settings() -> ModuleType:
    return importlib.import_module(get_settings_module())
