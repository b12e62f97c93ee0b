import argparse
import logging
import os
import threading
import time
import webbrowser
from pathlib import Path

import uvicorn

from cyclo.config import DEBUG_FILE_NAME, DEFAULT_OUTPUT_DIR
from cyclo.errors import ConsistencyViolationError
from cyclo.main import create_app
from cyclo.services.analysis import run_analysis


def _open_browser_later(url: str, delay: float = 1.0) -> None:
    """
    Open the default web browser after a short delay.

    This lets the server start first so the page is reachable.
    """

    def _worker() -> None:
        time.sleep(delay)
        try:
            webbrowser.open(url)
        except webbrowser.Error:
            # Don't crash the CLI if opening the browser fails (e.g. headless env)
            pass

    thread = threading.Thread(target=_worker, daemon=True)
    thread.start()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cyclo",
        description=(
            "Estimate per-file complexity for C, C++, Python and JavaScript "
            "sources and render it as a treemap."
        ),
    )
    parser.add_argument(
        "-p",
        "--path",
        default=".",
        help="Path to the directory to analyze (default: current directory).",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help=f"Also write a plain-text listing of every node to {DEBUG_FILE_NAME}.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Directory for index.html and scripts/cyclo.js (default: {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Serve the output directory after analysis.",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host interface to bind the server to (default: 127.0.0.1).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to run the server on (default: 8000).",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open a browser when serving.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every analyzed file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """
    Entry point for the CLI.

    - Analyzes the given path (or the current working directory).
    - Writes the treemap script, the viewer page and optionally the debug listing.
    - Optionally serves the result and opens the browser.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    target_path = os.path.abspath(args.path)
    if not os.path.exists(target_path):
        raise SystemExit(f"Path does not exist: {target_path}")

    output_dir = Path(args.output_dir)

    try:
        run_analysis(Path(target_path), output_dir, debug=args.debug)
    except ConsistencyViolationError as e:
        raise SystemExit(f"❌ Analysis aborted: {e}")

    if not args.serve:
        return

    url = f"http://{args.host}:{args.port}"
    print(f"🚀 Starting server at {url}")
    print("   Press Ctrl+C to stop.")

    if not args.no_browser:
        _open_browser_later(url)

    uvicorn.run(
        create_app(static_dir=output_dir, root_path=Path(target_path)),
        host=args.host,
        port=args.port,
    )


if __name__ == "__main__":
    main()
