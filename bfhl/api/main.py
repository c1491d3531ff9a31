"""
Process entrypoint for the BFHL HTTP service.

Interface responsibilities:
- Load `Settings` from the environment (and `.env`) once.
- Configure root logging at `LOG_LEVEL`.
- Serve `bfhl.api.http_api.create_app(settings)` with uvicorn.

Command line flags override `HOST` / `PORT` from the environment.
"""

import argparse
import logging

import uvicorn

from bfhl.api.http_api import create_app
from bfhl.llm.provider_config import Settings


def main(argv=None):
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Run the BFHL HTTP service.")
    parser.add_argument("--host", default=settings.host, help="Bind address.")
    parser.add_argument("--port", type=int, default=settings.port, help="Listening port.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger(__name__)

    configured = [
        name
        for name, key in (("gemini", settings.gemini_api_key), ("openai", settings.openai_api_key))
        if key
    ]
    logger.info(
        "AI provider preference=%s configured=%s",
        settings.ai_provider,
        ",".join(configured) or "none",
    )

    app = create_app(settings)
    logger.info("Server listening on %s:%s", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
