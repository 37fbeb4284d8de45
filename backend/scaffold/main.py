"""
Scaffold API Application Entry Point

Provider application serving the CRUD endpoints of every entity module.
"""

from scaffold.api import categories_router
from scaffold.bootstrap import create_app
from scaffold.config import get_settings
from scaffold.logging_config import setup_logging

# Initialize logging configuration
setup_logging()

settings = get_settings()

app = create_app(
    title=settings.APP_NAME,
    description="Generic CRUD service with conditional pagination",
    routers=[categories_router],
    init_database=True,
)


def run():
    import uvicorn

    uvicorn.run(
        "scaffold.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
