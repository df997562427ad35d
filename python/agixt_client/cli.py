"""
agixt - command-line access to an AGiXT server.

Wraps a handful of read and chat operations of AGiXTClient so a server can be
inspected from a shell. Connection settings default to AGIXT_URI and
AGIXT_API_KEY.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, List, Optional

from agixt_client.client import AGiXTClient
from agixt_client.config import ClientConfig
from agixt_client.exceptions import AGiXTClientError


def print_error(message: str) -> None:
    """Print an error message with CLI prefix."""
    print(f"[agixt] ERROR: {message}", file=sys.stderr)


def print_info(message: str) -> None:
    """Print an info message with CLI prefix."""
    print(f"[agixt] {message}")


def print_json(value: Any) -> None:
    print(json.dumps(value, indent=2, default=str))


async def cmd_providers(client: AGiXTClient, args: argparse.Namespace) -> Any:
    return await client.get_providers()


async def cmd_agents(client: AGiXTClient, args: argparse.Namespace) -> Any:
    return await client.get_agents()


async def cmd_conversations(client: AGiXTClient, args: argparse.Namespace) -> Any:
    return await client.get_conversations_with_ids()


async def cmd_chains(client: AGiXTClient, args: argparse.Namespace) -> Any:
    return await client.get_chains()


async def cmd_chat(client: AGiXTClient, args: argparse.Namespace) -> Any:
    """Chat with an agent given by name, reusing or creating the conversation."""
    agent_id = await client.get_agent_id_by_name(args.agent)
    if agent_id is None:
        raise AGiXTClientError(f"Agent '{args.agent}' not found")

    conversation_id = await client.get_conversation_id_by_name(args.conversation)
    if conversation_id is None:
        created = await client.new_conversation(agent_id, args.conversation)
        conversation_id = created.get("id") if isinstance(created, dict) else None
        if not conversation_id:
            raise AGiXTClientError(f"Could not create conversation '{args.conversation}'")

    return await client.chat(agent_id, args.message, conversation_id)


COMMANDS = {
    "providers": cmd_providers,
    "agents": cmd_agents,
    "conversations": cmd_conversations,
    "chains": cmd_chains,
    "chat": cmd_chat,
}


async def run_command(config: ClientConfig, args: argparse.Namespace) -> Any:
    async with AGiXTClient.from_config(config) as client:
        return await COMMANDS[args.command](client, args)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agixt",
        description="Command-line client for an AGiXT server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  agixt providers                          List available providers
  agixt agents                             List agents with their IDs
  agixt chat XT "Hello" --conversation dev Chat with the agent named XT

Environment:
  AGIXT_URI, AGIXT_API_KEY, AGIXT_VERBOSE
""",
    )

    parser.add_argument("--base-url", help="AGiXT server URL (default: $AGIXT_URI)")
    parser.add_argument("--api-key", help="API key or JWT (default: $AGIXT_API_KEY)")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log requests and full responses"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="Available commands",
        metavar="COMMAND",
        help="Command to execute"
    )
    subparsers.add_parser("providers", help="List providers")
    subparsers.add_parser("agents", help="List agents")
    subparsers.add_parser("conversations", help="List conversations with IDs")
    subparsers.add_parser("chains", help="List chains")

    chat_parser = subparsers.add_parser("chat", help="Send a chat message to an agent")
    chat_parser.add_argument("agent", help="Agent name")
    chat_parser.add_argument("message", help="Message to send")
    chat_parser.add_argument(
        "--conversation",
        default="-",
        help="Conversation name (created if missing, default: '-')"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse calls sys.exit on error, convert to return code
        return e.code if e.code is not None else 2

    if args.command is None:
        parser.print_help()
        return 1

    config = ClientConfig.from_env()
    updates = {}
    if args.base_url:
        updates["base_url"] = args.base_url
    if args.api_key:
        updates["api_key"] = args.api_key
    if args.verbose:
        updates["verbose"] = True
    config = config.model_copy(update=updates)

    if config.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        result = asyncio.run(run_command(config, args))
    except AGiXTClientError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print_info("Operation cancelled by user.")
        return 130

    if isinstance(result, str):
        print(result)
    else:
        print_json(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
