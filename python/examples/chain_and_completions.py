"""
Chain and chat completions example.

This example demonstrates:
- Building a chain with one prompt step and running it
- Calling the OpenAI-compatible completions endpoint
- Error handling
"""

import asyncio
import sys

from agixt_client import (
    AGiXTClient,
    AGiXTClientError,
    ChatCompletions,
    ClientConfig,
    Message,
    NotFoundError,
)


async def example_chain(client: AGiXTClient, agent_id: str):
    print("\n" + "=" * 60)
    print("Example: Building and running a chain")
    print("=" * 60)

    chain = await client.add_chain("Example Chain")
    chain_id = chain["id"]
    await client.add_step(
        chain_id,
        1,
        agent_id,
        "Prompt",
        {"prompt_name": "Think About It", "user_input": "{user_input}"},
    )
    print(f"✅ Chain created: {chain_id}")

    result = await client.run_chain(chain_id, "Plan a small vegetable garden")
    print(f"  Result: {result}")

    await client.delete_chain(chain_id)
    print("🗑️  Chain deleted")


async def example_completions(client: AGiXTClient):
    print("\n" + "=" * 60)
    print("Example: Chat completions")
    print("=" * 60)

    request = ChatCompletions(
        model="XT",
        user="example",
        messages=[Message(role="user", content="Say hello in French.")],
    )
    response = await client.chat_completions(request)
    print(f"  {response.text}")
    print(f"  Tokens used: {response.usage.total_tokens}")


async def example_error_handling(client: AGiXTClient):
    print("\n" + "=" * 60)
    print("Example: Error handling")
    print("=" * 60)

    try:
        await client.get_chain("does-not-exist")
    except NotFoundError as e:
        print(f"✅ Caught expected error: {e}")


async def main():
    async with AGiXTClient.from_config(ClientConfig.from_env()) as client:
        agent_id = await client.get_agent_id_by_name("XT")
        if agent_id is None:
            print("❌ No agent named XT", file=sys.stderr)
            return

        await example_chain(client, agent_id)
        await example_completions(client)
        await example_error_handling(client)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\n⚠️  Interrupted by user")
        sys.exit(0)
    except AGiXTClientError as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
