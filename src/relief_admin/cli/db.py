from tortoise import Tortoise

from ..core import config


class DBConnection:
    """Async context manager that opens the Tortoise connection for one CLI command."""

    async def __aenter__(self):
        await Tortoise.init(config=config.TORTOISE_ORM)
        await Tortoise.generate_schemas(safe=True)  # Generate schema if it doesn't exist
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await Tortoise.close_connections()
