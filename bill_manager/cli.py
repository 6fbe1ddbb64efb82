"""
Command-line entry point.

    $ bill-manager
    $ python -m bill_manager

Exit codes: 0 when the user leaves the menu, 1 if stdin can't be read,
130 on Ctrl-C. End of input counts as unreadable, so piped input must end
with an empty line to quit cleanly.
"""

import sys

import structlog

from bill_manager.audit import configure_logging
from bill_manager.config import get_settings
from bill_manager.console import InputStreamError
from bill_manager.orchestrator import create_app_components


EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_INTERRUPTED = 130


def main() -> int:
    settings = get_settings()
    configure_logging(
        level=settings.log_level_number,
        json_output=settings.log_json,
    )
    logger = structlog.get_logger(__name__)

    controller, bills, audit_logger = create_app_components(settings)
    audit_logger.log_session_started()

    try:
        controller.run(bills)
    except InputStreamError as e:
        audit_logger.log_input_stream_failed(str(e))
        print(f"\nError: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except KeyboardInterrupt:
        logger.info("session_interrupted")
        print(file=sys.stderr)
        return EXIT_INTERRUPTED

    audit_logger.log_session_ended(bill_count=len(bills))
    return EXIT_OK
