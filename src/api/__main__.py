"""
Serve the phonebook API.
Run: python -m api (from repo root, with .env or env vars set).
"""
import logging

import uvicorn

from api.main import app

logger = logging.getLogger(__name__)


def main() -> None:
    port = app.state.settings.port
    logger.info("Server running on port %s", port)
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
