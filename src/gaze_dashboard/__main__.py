import argparse
import asyncio
import sys
import logging
from pathlib import Path

from gaze_dashboard.configs.app import AppSettings, IngestionSettings
from gaze_dashboard.core import IngestionController
from gaze_dashboard.factories import create_source
from gaze_dashboard.ui import ConsoleView

def main(argv=None) -> int:
    # 1. Command line
    parser = argparse.ArgumentParser(description="Load an eye tracking export and summarize it.")
    parser.add_argument("path", nargs="?", type=Path, help="Gaze export (.csv) to load.")
    parser.add_argument(
        "--dummy",
        action="store_true",
        help="Load a synthetic export instead of a file."
    )
    parser.add_argument("--chunk-size", type=int, help="Rows processed per increment.")
    args = parser.parse_args(argv)

    if args.path is None and not args.dummy:
        parser.error("a path is required unless --dummy is given")

    # 2. Load Configuration
    try:
        settings = AppSettings()
        if args.chunk_size is not None:
            settings.ingestion = IngestionSettings.model_validate(
                {**settings.ingestion.model_dump(), "chunk_size": args.chunk_size}
            )
    except Exception as e:
        print(f"Configuration Error: {e}")
        return 1

    # 3. Setup Logging
    logging.basicConfig(
        level=settings.logging.level,
        format=settings.logging.format,
        stream=sys.stdout
    )
    logger = logging.getLogger("main")
    logger.info(f"Starting Gaze Dashboard v{settings.__version__}")

    # 4. Run
    try:
        source = create_source(settings, args.path, dummy=args.dummy)
        view = ConsoleView(step=settings.logging.progress_step)
        controller = IngestionController(settings, view=view)
        ok = asyncio.run(controller.load(source))
    except Exception:
        logger.exception("Fatal Application Error")
        return 1

    return 0 if ok else 1

if __name__ == "__main__":
    sys.exit(main())
