"""Composition root for the weddingbook address book.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Store instantiation
- Core service initialization
- Interactive command loop
"""

import asyncio
import json
import logging
import sys

from weddingbook.adapters.cli.commands import CLICommandHandler, dispatch
from weddingbook.adapters.store.json_file import JsonAddressBookStore
from weddingbook.adapters.store.sqlite import SQLiteAddressBookStore
from weddingbook.config import Settings, load_settings
from weddingbook.core.address_book_service import AddressBookService
from weddingbook.core.ports import AddressBookStorePort


async def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for address book commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    loop = asyncio.get_running_loop()

    while True:
        try:
            # Read command from stdin in a thread to avoid blocking
            command_line = await loop.run_in_executor(None, input, "weddingbook> ")

            command_line = command_line.strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            if not isinstance(args, dict):
                logger.error("Command arguments must be a JSON object.")
                continue

            try:
                result = await dispatch(cli_handler, command, args)
                print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  add
    Add a person.
    Required: name, phone, email, address
    Optional: tags

    Example: add {"name": "John Doe", "phone": "98765432", "email": "johnd@example.com", "address": "311, Clementi Ave 2, #02-25", "tags": ["friends"]}

  delete
    Delete a person by name.
    Required: name

    Example: delete {"name": "John Doe"}

  list
    List all persons.
    Optional: format (json, text)

    Example: list {"format": "text"}

  find
    Find persons whose names contain any of the keywords.
    Required: keywords

    Example: find {"keywords": ["alex", "david"]}

  wedding
    Add a wedding. Participants must already be in the address book.
    Required: wedding_name, venue, datetime (YYYY-MM-DD HH:MM)
    Optional: participants

    Example: wedding {"wedding_name": "Alice & Bob", "venue": "Garden", "datetime": "2024-12-25 18:00", "participants": ["Alex Yeoh"]}

  unwedding
    Delete a wedding by name.
    Required: wedding_name

    Example: unwedding {"wedding_name": "Alice & Bob"}

  weddings
    List all weddings.
    Optional: format (json, text)

  clear
    Remove every person and wedding.

  tag
    Not implemented yet.

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_store(settings: Settings) -> AddressBookStorePort:
    """Instantiate the store selected by ``settings.store_backend``."""
    if settings.store_backend == "sqlite":
        return SQLiteAddressBookStore(db_path=settings.store_sqlite_path)
    return JsonAddressBookStore(file_path=settings.address_book_file_path)


async def bootstrap(settings: Settings | None = None) -> None:
    """Load configuration, wire adapters, and start the interactive CLI.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate the store
    4. Initialize and load the address book service
    5. Run the command loop
    """
    if settings is None:
        settings = load_settings()

    configure_logging("DEBUG" if settings.debug else settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading weddingbook...")

    store = build_store(settings)
    logger.info(f"Address book store: {settings.store_backend}")

    service = AddressBookService(store=store, load_sample_data=settings.load_sample_data)

    try:
        await service.load()
        await _run_cli_interactive(CLICommandHandler(service))
    finally:
        await store.close()


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
