"""
Unit tests for the chain and prompt endpoints.
"""

import pytest

from agixt_client.exceptions import ResponseDecodeError


class TestChains:
    async def test_get_chains(self, client, respond, reply):
        mock = respond(reply(200, [{"id": "ch-1", "name": "Smart Instruct"}]))

        assert await client.get_chains() == [{"id": "ch-1", "name": "Smart Instruct"}]
        assert mock.last.url == "http://localhost:7437/v1/chains"

    async def test_get_chains_non_list(self, client, respond, reply):
        respond(reply(200, {"chains": [{"id": "ch-1"}]}))
        assert await client.get_chains() == []

    async def test_get_chain_id_by_name(self, client, respond, reply):
        respond(reply(200, [{"id": "ch-1", "name": "Smart Instruct"}, {"id": "ch-2", "name": "Smart Chat"}]))

        assert await client.get_chain_id_by_name("Smart Chat") == "ch-2"
        assert await client.get_chain_id_by_name("Missing") is None

    async def test_get_chain_unwraps_single_key(self, client, respond, reply):
        mock = respond(reply(200, {"Smart Instruct": {"id": "ch-1", "steps": []}}))

        assert await client.get_chain("ch-1") == {"id": "ch-1", "steps": []}
        assert mock.last.url == "http://localhost:7437/v1/chain/ch-1"

    async def test_get_chain_multi_key_returned_as_is(self, client, respond, reply):
        respond(reply(200, {"id": "ch-1", "chain_name": "Smart Instruct"}))
        assert await client.get_chain("ch-1") == {"id": "ch-1", "chain_name": "Smart Instruct"}

    async def test_get_chain_responses(self, client, respond, reply):
        mock = respond(reply(200, {"chain": {"1": "first"}}))

        assert await client.get_chain_responses("ch-1") == {"1": "first"}
        assert mock.last.url == "http://localhost:7437/v1/chain/ch-1/responses"

    async def test_get_chain_args(self, client, respond, reply):
        respond(reply(200, ["user_input", "language"]))
        assert await client.get_chain_args("ch-1") == ["user_input", "language"]

    async def test_get_chain_args_wrong_shape(self, client, respond, reply):
        respond(reply(200, {"chain_args": ["user_input"]}))

        with pytest.raises(ResponseDecodeError):
            await client.get_chain_args("ch-1")

    async def test_run_chain_defaults(self, client, respond, reply):
        mock = respond(reply(200, "Final answer"))

        result = await client.run_chain("ch-1", "Build a website")

        assert result == "Final answer"
        assert mock.last.method == "POST"
        assert mock.last.url == "http://localhost:7437/v1/chain/ch-1/run"
        assert mock.last.json == {
            "prompt": "Build a website",
            "agent_override": "",
            "all_responses": False,
            "from_step": 1,
            "chain_args": {},
        }

    async def test_run_chain_step(self, client, respond, reply):
        mock = respond(reply(200, "Step output"))

        await client.run_chain_step("ch-1", 2, "Continue", agent_id="a-1", chain_args={"x": 1})

        assert mock.last.url == "http://localhost:7437/v1/chain/ch-1/run/step/2"
        assert mock.last.json == {"prompt": "Continue", "agent_override": "a-1", "chain_args": {"x": 1}}

    async def test_run_chain_step_without_agent(self, client, respond, reply):
        mock = respond(reply(200, "Step output"))

        await client.run_chain_step("ch-1", 1, "Go")

        assert mock.last.json["agent_override"] is None

    async def test_add_chain(self, client, respond, reply):
        mock = respond(reply(200, {"id": "ch-3", "name": "New Chain"}))

        assert (await client.add_chain("New Chain"))["id"] == "ch-3"
        assert mock.last.json == {"chain_name": "New Chain"}

    async def test_import_chain(self, client, respond, reply):
        mock = respond(reply(200, {"message": "Chain imported"}))
        steps = [{"step": 1, "agent_name": "XT", "prompt_type": "Prompt", "prompt": {}}]

        assert await client.import_chain("Imported", steps) == "Chain imported"
        assert mock.last.url == "http://localhost:7437/v1/chain/import"
        assert mock.last.json == {"chain_name": "Imported", "steps": steps}

    async def test_rename_and_delete_chain(self, client, respond, reply):
        mock = respond(reply(200, {"message": "ok"}))

        await client.rename_chain("ch-1", "Renamed")
        assert mock.last.method == "PUT"
        assert mock.last.json == {"new_name": "Renamed"}

        await client.delete_chain("ch-1")
        assert mock.last.method == "DELETE"
        assert mock.last.url == "http://localhost:7437/v1/chain/ch-1"


class TestChainSteps:
    async def test_add_step(self, client, respond, reply):
        mock = respond(reply(200, {"message": "Step added"}))
        prompt = {"prompt_name": "Think About It", "user_input": "{user_input}"}

        assert await client.add_step("ch-1", 1, "a-1", "Prompt", prompt) == "Step added"
        assert mock.last.url == "http://localhost:7437/v1/chain/ch-1/step"
        assert mock.last.json == {
            "step_number": 1,
            "agent_id": "a-1",
            "prompt_type": "Prompt",
            "prompt": prompt,
        }

    async def test_update_step(self, client, respond, reply):
        mock = respond(reply(200, {"message": "Step updated"}))

        await client.update_step("ch-1", 3, "a-1", "Command", {"command_name": "Web Search"})

        assert mock.last.method == "PUT"
        assert mock.last.url == "http://localhost:7437/v1/chain/ch-1/step/3"
        assert mock.last.json["step_number"] == 3

    async def test_move_step(self, client, respond, reply):
        mock = respond(reply(200, {"message": "Step moved"}))

        await client.move_step("ch-1", 1, 3)

        assert mock.last.method == "PATCH"
        assert mock.last.url == "http://localhost:7437/v1/chain/ch-1/step/move"
        assert mock.last.json == {"old_step_number": 1, "new_step_number": 3}

    async def test_delete_step(self, client, respond, reply):
        mock = respond(reply(200, {"message": "Step deleted"}))

        await client.delete_step("ch-1", 2)

        assert mock.last.method == "DELETE"
        assert mock.last.url == "http://localhost:7437/v1/chain/ch-1/step/2"


class TestPrompts:
    async def test_add_prompt(self, client, respond, reply):
        mock = respond(reply(200, {"id": "p-1"}))

        await client.add_prompt("Greeting", "Say hello to {name}")

        assert mock.last.url == "http://localhost:7437/v1/prompt"
        assert mock.last.json == {
            "prompt_name": "Greeting",
            "prompt": "Say hello to {name}",
            "prompt_category": "Default",
        }

    async def test_get_prompt(self, client, respond, reply):
        mock = respond(reply(200, {"id": "p-1", "prompt": "Say hello"}))

        assert (await client.get_prompt("p-1"))["prompt"] == "Say hello"
        assert mock.last.url == "http://localhost:7437/v1/prompt/p-1"

    async def test_get_prompts(self, client, respond, reply):
        mock = respond(reply(200, {"prompts": [{"id": "p-1", "name": "Chat"}]}))

        prompts = await client.get_prompts("Custom")

        assert prompts == [{"id": "p-1", "name": "Chat"}]
        assert mock.last.url == "http://localhost:7437/v1/prompts"
        assert mock.last.params == {"prompt_category": "Custom"}

    async def test_get_prompt_id_by_name(self, client, respond, reply):
        mock = respond(reply(200, {"prompts": [{"id": "p-1", "name": "Chat"}]}))

        assert await client.get_prompt_id_by_name("Chat") == "p-1"
        assert await client.get_prompt_id_by_name("Missing") is None
        assert mock.last.params == {"prompt_category": "Default"}

    async def test_get_all_prompts(self, client, respond, reply):
        mock = respond(reply(200, {"prompts": []}))

        assert await client.get_all_prompts() == {"prompts": []}
        assert mock.last.url == "http://localhost:7437/v1/prompt/all"

    async def test_prompt_categories(self, client, respond, reply):
        respond(reply(200, {"categories": [{"id": "cat-1", "name": "Default"}]}))
        assert await client.get_prompt_categories() == [{"id": "cat-1", "name": "Default"}]

        mock = respond(reply(200, {"prompts": [{"id": "p-1"}]}))
        assert await client.get_prompts_by_category_id("cat-1") == [{"id": "p-1"}]
        assert mock.last.url == "http://localhost:7437/v1/prompt/category/cat-1"

    async def test_get_prompt_args(self, client, respond, reply):
        respond(reply(200, {"prompt_args": ["name"]}))
        assert await client.get_prompt_args("p-1") == ["name"]

    async def test_update_rename_delete_prompt(self, client, respond, reply):
        mock = respond(reply(200, {"message": "ok"}))

        await client.update_prompt("p-1", "New text")
        assert mock.last.method == "PUT"
        assert mock.last.json == {"prompt": "New text"}

        await client.rename_prompt("p-1", "Renamed")
        assert mock.last.method == "PATCH"
        assert mock.last.json == {"prompt_name": "Renamed"}

        assert await client.delete_prompt("p-1") == "ok"
        assert mock.last.method == "DELETE"
        assert mock.last.url == "http://localhost:7437/v1/prompt/p-1"
