"""Entrypoint: run the Search Quality Engine server."""

import uvicorn

from search_quality.api.app import create_app
from search_quality.config.settings import Settings


def main() -> None:
    settings = Settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
