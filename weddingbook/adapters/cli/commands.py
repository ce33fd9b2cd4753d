"""CLI command implementations for weddingbook management.

Provides user-initiated actions through the command-line interface.

This adapter maps CLI commands (add, delete, list, find, wedding, unwedding,
weddings, clear, tag) to ManagementPort operations. It handles CLI-specific
formatting and error reporting.
"""

import logging
from collections.abc import Sequence
from typing import Any

from weddingbook.core.models import Address, Email, Name, Person, Phone, Tag, Wedding
from weddingbook.core.ports import ManagementPort

logger = logging.getLogger(__name__)

MESSAGE_NOT_IMPLEMENTED_YET = "This command is not implemented yet"


def person_to_dict(person: Person) -> dict[str, Any]:
    """Render a person as plain JSON-compatible values."""
    return {
        "name": str(person.name),
        "phone": str(person.phone),
        "email": str(person.email),
        "address": str(person.address),
        "tags": sorted(str(tag) for tag in person.tags),
    }


def wedding_to_dict(wedding: Wedding) -> dict[str, Any]:
    """Render a wedding as plain JSON-compatible values."""
    return {
        "wedding_name": str(wedding.wedding_name),
        "venue": str(wedding.venue),
        "datetime": str(wedding.datetime),
        "participants": sorted(str(person.name) for person in wedding.participants),
    }


class CLICommandHandler:
    """Handles CLI commands by delegating to ManagementPort.

    Every command returns a result dictionary with a ``status`` of
    ``success`` or ``error``; validation failures never escape as
    exceptions.
    """

    def __init__(self, management: ManagementPort):
        """Initialize the CLI command handler.

        Args:
            management: ManagementPort implementation to execute commands.
        """
        self.management = management

    async def add_person(
        self,
        name: str,
        phone: str,
        email: str,
        address: str,
        tags: Sequence[str] = (),
        verbose: bool = False,
    ) -> dict[str, Any]:
        """Add a person via CLI.

        Args:
            name: Person's name.
            phone: Phone number.
            email: Email address.
            address: Postal address.
            tags: Optional tag names.
            verbose: If True, log additional information.

        Returns:
            Dictionary with status and message.
        """
        try:
            person = Person(
                name=Name(name),
                phone=Phone(phone),
                email=Email(email),
                address=Address(address),
                tags=frozenset(Tag(tag) for tag in tags),
            )
            await self.management.add_person(person)

            if verbose:
                logger.info(f"Added person {name}", extra={"verbose": True})

            return {
                "status": "success",
                "operation": "add",
                "message": f"New person added: {name}",
                "data": person_to_dict(person),
            }

        except ValueError as e:
            logger.error(f"Failed to add person: {e}")
            return {
                "status": "error",
                "operation": "add",
                "message": str(e),
            }

    async def delete_person(self, name: str, verbose: bool = False) -> dict[str, Any]:
        """Delete a person by name via CLI."""
        try:
            person = await self.management.delete_person(name)

            if verbose:
                logger.info(f"Deleted person {name}", extra={"verbose": True})

            return {
                "status": "success",
                "operation": "delete",
                "message": f"Deleted Person: {name}",
                "data": person_to_dict(person),
            }

        except ValueError as e:
            logger.error(f"Failed to delete person: {e}")
            return {
                "status": "error",
                "operation": "delete",
                "message": str(e),
            }

    async def list_persons(self, format: str = "json") -> dict[str, Any]:
        """List all persons via CLI.

        Args:
            format: Output format ('json', 'text'). Default 'json'.

        Returns:
            Dictionary with the persons or status/message on error.
        """
        persons = await self.management.list_persons()

        if format == "json":
            data: Any = [person_to_dict(person) for person in persons]
        elif format == "text":
            data = "\n".join(
                self._format_person_as_text(index, person)
                for index, person in enumerate(persons, start=1)
            )
        else:
            return {
                "status": "error",
                "operation": "list",
                "message": f"Unsupported format: {format}",
            }

        return {
            "status": "success",
            "operation": "list",
            "message": "Listed all persons",
            "data": data,
        }

    async def find_persons(self, keywords: Sequence[str]) -> dict[str, Any]:
        """Find persons whose names contain any of the keywords."""
        persons = await self.management.find_persons(keywords)
        return {
            "status": "success",
            "operation": "find",
            "message": f"{len(persons)} persons listed!",
            "data": [person_to_dict(person) for person in persons],
        }

    async def add_wedding(
        self,
        wedding_name: str,
        venue: str,
        datetime: str,
        participants: Sequence[str] = (),
        verbose: bool = False,
    ) -> dict[str, Any]:
        """Create a wedding via CLI.

        Args:
            wedding_name: Name of the wedding.
            venue: Venue of the wedding.
            datetime: Date and time as ``YYYY-MM-DD HH:MM``.
            participants: Names of existing persons taking part.
            verbose: If True, log additional information.

        Returns:
            Dictionary with status and message.
        """
        try:
            wedding = await self.management.add_wedding(
                wedding_name, venue, datetime, participants
            )

            if verbose:
                logger.info(
                    f"Added wedding {wedding_name}",
                    extra={"participants": list(participants), "verbose": True},
                )

            return {
                "status": "success",
                "operation": "wedding",
                "message": f"New wedding added: {wedding_name}",
                "data": wedding_to_dict(wedding),
            }

        except ValueError as e:
            logger.error(f"Failed to add wedding: {e}")
            return {
                "status": "error",
                "operation": "wedding",
                "message": str(e),
            }

    async def delete_wedding(self, wedding_name: str) -> dict[str, Any]:
        """Delete a wedding by name via CLI."""
        try:
            wedding = await self.management.delete_wedding(wedding_name)
            return {
                "status": "success",
                "operation": "unwedding",
                "message": f"Deleted Wedding: {wedding_name}",
                "data": wedding_to_dict(wedding),
            }

        except ValueError as e:
            logger.error(f"Failed to delete wedding: {e}")
            return {
                "status": "error",
                "operation": "unwedding",
                "message": str(e),
            }

    async def list_weddings(self, format: str = "json") -> dict[str, Any]:
        """List all weddings via CLI."""
        weddings = await self.management.list_weddings()

        if format == "json":
            data: Any = [wedding_to_dict(wedding) for wedding in weddings]
        elif format == "text":
            data = "\n".join(
                self._format_wedding_as_text(index, wedding)
                for index, wedding in enumerate(weddings, start=1)
            )
        else:
            return {
                "status": "error",
                "operation": "weddings",
                "message": f"Unsupported format: {format}",
            }

        return {
            "status": "success",
            "operation": "weddings",
            "message": "Listed all weddings",
            "data": data,
        }

    async def clear(self) -> dict[str, Any]:
        """Remove every person and wedding."""
        await self.management.clear()
        return {
            "status": "success",
            "operation": "clear",
            "message": "Address book has been cleared!",
        }

    async def tag(self, **args: Any) -> dict[str, Any]:
        """Tag command placeholder; always fails."""
        logger.warning("Tag command invoked but is not implemented")
        return {
            "status": "error",
            "operation": "tag",
            "message": MESSAGE_NOT_IMPLEMENTED_YET,
        }

    def _format_person_as_text(self, index: int, person: Person) -> str:
        tags = "".join(f"[{tag}]" for tag in sorted(str(tag) for tag in person.tags))
        return (
            f"{index}. {person.name}; Phone: {person.phone}; Email: {person.email}; "
            f"Address: {person.address}; Tags: {tags}"
        )

    def _format_wedding_as_text(self, index: int, wedding: Wedding) -> str:
        lines = [
            f"{index}. {wedding.wedding_name}",
            f"   Venue: {wedding.venue}",
            f"   Date/Time: {wedding.datetime}",
        ]
        names = sorted(str(person.name) for person in wedding.participants)
        if names:
            lines.append(f"   Participants: {', '.join(names)}")
        return "\n".join(lines)


async def run_command(
    management: ManagementPort,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        management: ManagementPort implementation.
        command: Command name.
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized or a required argument is missing.
    """
    handler = CLICommandHandler(management)
    return await dispatch(handler, command, args)


async def dispatch(
    handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Route a command name and its arguments to ``handler``.

    Raises:
        ValueError: If command is not recognized or a required argument is missing.
    """

    def require(*names: str) -> None:
        for name in names:
            if name not in args:
                raise ValueError(f"Missing required parameter: {name}")

    def require_list(*names: str) -> None:
        for name in names:
            if name in args and not isinstance(args[name], list):
                raise ValueError(f"Parameter {name} must be a list")

    if command == "add":
        require("name", "phone", "email", "address")
        require_list("tags")
        return await handler.add_person(
            name=args["name"],
            phone=args["phone"],
            email=args["email"],
            address=args["address"],
            tags=args.get("tags", []),
            verbose=args.get("verbose", False),
        )

    elif command == "delete":
        require("name")
        return await handler.delete_person(args["name"], args.get("verbose", False))

    elif command == "list":
        return await handler.list_persons(args.get("format", "json"))

    elif command == "find":
        require("keywords")
        require_list("keywords")
        return await handler.find_persons(args["keywords"])

    elif command == "wedding":
        require("wedding_name", "venue", "datetime")
        require_list("participants")
        return await handler.add_wedding(
            wedding_name=args["wedding_name"],
            venue=args["venue"],
            datetime=args["datetime"],
            participants=args.get("participants", []),
            verbose=args.get("verbose", False),
        )

    elif command == "unwedding":
        require("wedding_name")
        return await handler.delete_wedding(args["wedding_name"])

    elif command == "weddings":
        return await handler.list_weddings(args.get("format", "json"))

    elif command == "clear":
        return await handler.clear()

    elif command == "tag":
        return await handler.tag(**args)

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")
