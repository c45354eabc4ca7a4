"""Main entry point for koyomi."""

import sys

from koyomi.app import KoyomiApp
from koyomi.config import Config
from koyomi.errors import ConfigError
from koyomi.models import YearMonth


def main() -> None:
    """Main entry point."""
    start = None
    if len(sys.argv) > 1:
        try:
            start = YearMonth.parse(sys.argv[1])
        except ValueError as e:
            sys.stderr.write(f"koyomi: invalid month {sys.argv[1]!r} ({e}); expected YYYY-MM\n")
            sys.exit(2)

    try:
        config = Config.from_env() or Config.load() or Config()
    except ConfigError as e:
        sys.stderr.write(f"koyomi: {e}\n")
        sys.exit(2)

    app = KoyomiApp(config, start)
    app.run()


if __name__ == "__main__":
    main()
