"""Run the API with uvicorn: ``python -m storefront``."""

import logging

import uvicorn

from .config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(
        f"Server running on http://localhost:{settings.port} (health: {settings.api_prefix}/health)"
    )
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        proxy_headers=True,
        forwarded_allow_ips="*",
    )


if __name__ == "__main__":
    main()
