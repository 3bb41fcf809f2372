"""Check that the prompt store database and the news ticker source are reachable.

Exits non-zero when any check fails, so it can gate a deploy.
"""

from __future__ import annotations

import asyncio
import sys

from veo_builder.integrations import format_report, run_all_checks
from veo_builder.monitoring.logging import configure_logging


def main() -> int:
    configure_logging()
    results = asyncio.run(run_all_checks())
    print(format_report(results))
    return 0 if all(result.success for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
