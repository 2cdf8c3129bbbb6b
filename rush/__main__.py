#!/usr/bin/env python3
# rush/__main__.py
from __future__ import annotations

"""
Entry point: `rush [script]` or `python -m rush [script]`.

Exit codes:
    0    clean end of input
    1    any fatal error (no usable source, open failure, read failure)
    130  interrupted
"""

import sys
from typing import Optional, Sequence

from rush.boot import boot_sequence
from rush.errors import RushError
from rush.interface import Driver, create_session, report_error
from rush.interface.driver import EXIT_FAILURE

EXIT_INTERRUPTED = 130


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = sys.argv if argv is None else argv
    try:
        state = boot_sequence(argv)
        with create_session(state.config) as session:
            result = Driver(session).run()
    except RushError as exc:
        report_error(str(exc))
        return EXIT_FAILURE
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED

    if result.error is not None:
        report_error(str(result.error))
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
