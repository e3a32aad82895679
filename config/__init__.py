import os

# APP_ENV values -> settings module. "mock" / "demo" run on the bundled mock data
# (development settings, backend off unless USE_BACKEND=1).
_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
    "ci": "config.testing",
    "dev": "config.development",
    "development": "config.development",
    "mock": "config.development",
    "demo": "config.development",
}


def get_settings_module() -> str:
    """Settings module for APP_ENV; SETTINGS_MODULE wins when set."""
    explicit = os.getenv("SETTINGS_MODULE", "").strip()
    if explicit:
        return explicit

    env = os.getenv("APP_ENV", "development").strip().lower()
    return _ENV_MODULES.get(env, "config.development")
