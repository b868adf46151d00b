# connects the environment to the service and prints the result in the required format.

from __future__ import annotations
import logging
import sys
from datetime import date
from .client import CityTemperatureClient, CityTemperatureError
from .config import ConfigError, Settings
from .service import average_temperature, report_line

logger = logging.getLogger(__name__)


def main() -> None:
    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        print(f"Invalid configuration.\nError: {exc}", file=sys.stderr)
        sys.exit(1)

    # diagnostics share stdout with the summary line, no structured format
    logging.basicConfig(stream=sys.stdout, level=settings.log_level, format="%(message)s")

    with CityTemperatureClient(settings=settings) as client:
        try:
            result = average_temperature(client, date.today())
        except CityTemperatureError as exc:
            print(f"Failed to compute the average temperature.\nError: {exc}", file=sys.stderr)
            sys.exit(1)

    logger.debug("%d of %d cities reported a temperature", result.readings, result.cities)
    print(report_line(result.cities, result.average_temp))


if __name__ == "__main__":
    main()
