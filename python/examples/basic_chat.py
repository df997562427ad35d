"""
Basic chat example.

This example demonstrates how to use the Python client to find an agent,
open a conversation and read back its history.
"""

import asyncio
import sys

from agixt_client import AGiXTClient, AGiXTClientError, ClientConfig


async def main():
    """Run the chat example."""
    config = ClientConfig.from_env()

    async with AGiXTClient.from_config(config) as client:
        print(f"✅ Connected to {config.base_url}")

        # List available agents
        agents = await client.get_agents()
        print(f"\n📋 Available agents ({len(agents)}):")
        for agent in agents:
            print(f"  - {agent.get('name')} ({agent.get('id')})")

        agent_id = await client.get_agent_id_by_name("XT")
        if agent_id is None:
            print("❌ No agent named XT", file=sys.stderr)
            return

        # Reuse or create the conversation
        conversation_id = await client.get_conversation_id_by_name("example")
        if conversation_id is None:
            created = await client.new_conversation(agent_id, "example")
            conversation_id = created["id"]
            print(f"✅ Conversation created: {conversation_id}")

        print("\n💬 Chatting...")
        reply = await client.chat(agent_id, "What can you help me with?", conversation_id)
        print(f"  XT: {reply}")

        print("\n📜 History:")
        for message in await client.get_conversation(conversation_id, limit=10):
            print(f"  [{message.role}] {message.content}")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\n⚠️  Interrupted by user")
        sys.exit(0)
    except AGiXTClientError as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
