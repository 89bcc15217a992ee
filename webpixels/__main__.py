"""
WebPixels catalog API entry point.

Usage:
    python -m webpixels serve          # start web server on :8000
    python -m webpixels serve --port 3000
"""

import argparse
import logging

from .config import get_settings


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    p = argparse.ArgumentParser(prog="webpixels", description="Serve the component catalog API")
    sub = p.add_subparsers(dest="cmd")

    sv = sub.add_parser("serve", help="Start the HTTP server")
    sv.add_argument("--host", default=settings.host, help="Host to bind")
    sv.add_argument("--port", type=int, default=settings.port, help="Port to bind")
    return p


def main() -> int:
    args = build_parser().parse_args()
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.cmd in (None, "serve"):
        import uvicorn
        uvicorn.run(
            "webpixels.main:app",
            host=getattr(args, "host", settings.host),
            port=getattr(args, "port", settings.port),
            reload=False,
        )
        return 0
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
