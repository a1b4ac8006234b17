"""FoodDelights database management CLI.

Creates and drops the SQL schemas of each domain when it is configured with
a SQL provider (``PROTEAN_ENV=production`` selects PostgreSQL).

Usage:
    python src/manage.py setup-db                      # Create all tables
    python src/manage.py drop-db --domain catalogue    # Drop one domain's tables
"""

import argparse
import sys

from shared.logging import configure_logging, get_logger

logger = get_logger(__name__)

DOMAIN_NAMES = ["ordering", "catalogue"]


def _domains(names=None):
    from catalogue.domain import catalogue
    from ordering.domain import ordering

    all_domains = {"ordering": ordering, "catalogue": catalogue}
    return {name: all_domains[name] for name in (names or DOMAIN_NAMES)}


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    from shared.db import setup_db

    for name, domain in _domains(domains).items():
        domain.init()
        providers = setup_db(domain)
        if providers:
            logger.info("Schema created", domain=name, providers=providers)
        else:
            logger.warning("No SQL provider configured, nothing to create", domain=name)


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    from shared.db import drop_db

    for name, domain in _domains(domains).items():
        domain.init()
        providers = drop_db(domain)
        logger.info("Schema dropped", domain=name, providers=providers)


def main():
    parser = argparse.ArgumentParser(description="FoodDelights database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    args = parser.parse_args()
    configure_logging()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
