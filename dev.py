"""Hot-reload runner: restarts the HTTP server whenever project code changes.

    python dev.py            # watch ai/, terminal/ and the top-level modules
    python dev.py --port 9000
"""
import argparse
import logging
import os
from pathlib import Path

from watchfiles import PythonFilter, run_process

ROOT = Path(__file__).resolve().parent
WATCHED = [ROOT / "ai", ROOT / "terminal", ROOT / "config.py", ROOT / "main.py", ROOT / "portfolio.py"]


def _serve(port: int | None) -> None:
    if port:
        os.environ["SERVER_PORT"] = str(port)
    from main import main
    main()


def _on_change(changes) -> None:
    changed = sorted({Path(path).name for _, path in changes})
    logging.getLogger("dev").info("Reloading after change in %s", ", ".join(changed))


if __name__ == "__main__":
    logging.basicConfig(format="[dev] %(message)s", level=logging.INFO)
    parser = argparse.ArgumentParser(description="Run the portfolio server with auto-reload.")
    parser.add_argument("--port", type=int, default=None)
    opts = parser.parse_args()

    run_process(
        *WATCHED,
        target=_serve,
        args=(opts.port,),
        watch_filter=PythonFilter(),
        callback=_on_change,
    )
