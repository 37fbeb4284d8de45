"""
Scaffold Consumer Application Entry Point

Consumer application calling the provider service through remote clients.
Set APP_NAME (e.g. scaffold-consumer) and PORT to run it next to the provider.
"""

from scaffold.api.consumer import router as consumer_router
from scaffold.bootstrap import create_app
from scaffold.config import get_settings
from scaffold.logging_config import setup_logging

# Initialize logging configuration
setup_logging()

settings = get_settings()

app = create_app(
    title=settings.APP_NAME,
    description="Consumer of the scaffold CRUD service",
    routers=[consumer_router],
    init_database=False,
)


def run():
    import uvicorn

    uvicorn.run(
        "scaffold.consumer:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
