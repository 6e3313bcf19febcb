import os

# In a real deployment, load these from the environment or a secrets manager
SECRET_KEY: str = os.getenv("SECRET_KEY", "relief-admin-dev-secret-!ChangeMe!")
ALGORITHM: str = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))

DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite://./relief_admin.sqlite3")

HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "8000"))

# Spreadsheet exports are written here and removed once streamed to the client
REPORTS_DIR: str = os.getenv("REPORTS_DIR", os.path.join(os.getcwd(), "reports"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
# Comma separated logger prefixes, e.g. "relief_admin.features,relief_admin.main"
LOG_NAMESPACES: list[str] = [
    ns.strip() for ns in os.getenv("LOG_NAMESPACES", "").split(",") if ns.strip()
]

MODEL_MODULES: list[str] = [
    "relief_admin.features.auth.models",
    "relief_admin.features.volunteers.models",
    "relief_admin.features.crises.models",
    "relief_admin.features.finance.models",
]


def tortoise_config(db_url: str = DATABASE_URL) -> dict:
    """Builds the Tortoise ORM config shared by the API, the CLI and aerich."""
    return {
        "connections": {"default": db_url},
        "apps": {
            "models": {
                "models": [*MODEL_MODULES, "aerich.models"],
                "default_connection": "default",
            }
        },
        "use_tz": True,
        "timezone": "UTC",
    }


TORTOISE_ORM = tortoise_config()
