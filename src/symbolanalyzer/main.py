from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Installs a global exception hook so that unexpected crashes are logged
with their full traceback, then delegates to the CLI controller.
"""

import logging
import os
import sys
import traceback
from typing import Any

# Allow running this file directly from a source checkout
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception and terminate with exit code 1.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    logging.getLogger("symbolanalyzer.supervisor").critical(
        f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}"
    )

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (SYMBOLANALYZER)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(1)


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Run the command line interface under the global supervisor.

    Returns:
        int: Process exit code.
    """
    sys.excepthook = global_exception_handler

    from symbolanalyzer.interface.cli.app import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
