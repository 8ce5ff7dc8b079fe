"""
GaussSolver — Entry point.

Run the interactive linear system solver in the console.
"""

import logging
import sys

from cli import LinearSystemCLI
from cli.settings import get_settings
from logging_config import setup_logging
from solver.elimination import SolverError


def main() -> int:
    settings = get_settings()
    setup_logging(getattr(logging, str(settings["log_level"]).upper()),
                  settings["log_file"])

    app = LinearSystemCLI(settings)
    try:
        app.run()
    except SolverError as exc:
        print(LinearSystemCLI._friendly_error(exc))
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted. Goodbye!")
        return 130
    except EOFError:
        print("\nNo more input. Goodbye!")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
