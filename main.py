import argparse
import logging

import uvicorn

from codeshift.diagnostics import DOCS_URL, check_startup_requirements
from codeshift.providers import ProviderConfig, build_registry
from codeshift.web import create_app

logger = logging.getLogger("codeshift")

APP_FACTORY = "codeshift.web.server:create_app"


def main(argv: list[str] | None = None) -> int:
    """Check the model server, then serve the translation API."""
    parser = argparse.ArgumentParser(description="codeshift translation server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args(argv)

    registry = build_registry(ProviderConfig.from_env())

    # Reported only: LM Studio may be started after the API.
    issues = check_startup_requirements(registry)
    for issue in issues:
        log = logger.warning if issue.severity == "warning" else logger.error
        log("%s: %s", issue.title, issue.details)
    if issues:
        logger.info("See %s", DOCS_URL)

    # uvicorn can only reload an app it imports itself; the reloaded process
    # builds its own registry from the environment.
    app = APP_FACTORY if args.reload else create_app(registry)
    uvicorn.run(
        app,
        factory=bool(args.reload),
        host=str(args.host),
        port=int(args.port),
        reload=bool(args.reload),
        log_level="info",
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    raise SystemExit(main())
