"""Tests for the tool-call dispatch loop."""

import pytest

from conftest import reply, tool_request
from toolbridge.bridge.dispatcher import (
    MalformedResponseError,
    ToolArgumentsError,
    parse_arguments,
)
from toolbridge.conversation.models import (
    AssistantMessage,
    ChatCompletion,
    Choice,
    FinishReason,
    FunctionMessage,
    ToolCallIntent,
    UserMessage,
)


class TestParseArguments:
    def test_flat_mapping(self):
        call = ToolCallIntent(name="getWeather", arguments='{"city": "Rome"}')
        assert parse_arguments(call) == {"city": "Rome"}

    def test_invalid_json(self):
        with pytest.raises(ToolArgumentsError):
            parse_arguments(ToolCallIntent(name="getWeather", arguments="{city: Rome"))

    def test_not_an_object(self):
        with pytest.raises(ToolArgumentsError):
            parse_arguments(ToolCallIntent(name="getWeather", arguments='["Rome"]'))

    def test_non_string_value(self):
        with pytest.raises(ToolArgumentsError):
            parse_arguments(ToolCallIntent(name="getWeather", arguments='{"city": 42}'))


class TestToolDispatcher:
    @pytest.mark.asyncio
    async def test_no_tool_call_still_runs_second_round(
        self, dispatcher, complete, state, tool_handlers
    ):
        """The second round's content is returned; the first is discarded."""
        complete.side_effect = [reply("first answer"), reply("second answer")]

        result = await dispatcher.run("hello", state)

        assert result == "second answer"
        assert complete.await_count == 2
        for handler in tool_handlers.values():
            handler.assert_not_called()

    @pytest.mark.asyncio
    async def test_tools_only_offered_on_first_round(self, dispatcher, complete, state):
        complete.side_effect = [reply("a"), reply("b")]

        await dispatcher.run("hello", state)

        first, second = complete.await_args_list
        assert [t["function"]["name"] for t in first.kwargs["tools"]] == [
            "getWeather",
            "scraper",
            "getTimeOfDay",
        ]
        assert "tools" not in second.kwargs
        assert first.kwargs["max_tokens"] == second.kwargs["max_tokens"] == 512
        assert first.kwargs["model"] == "test-model"

    @pytest.mark.asyncio
    async def test_user_message_appended_first(self, dispatcher, complete, state):
        complete.side_effect = [reply("a"), reply("b")]

        await dispatcher.run("hello", state)

        payload = complete.await_args_list[0].args[0]
        assert payload[-1] == {"role": "user", "content": "hello"}
        assert isinstance(state.messages[1], UserMessage)

    @pytest.mark.asyncio
    async def test_tool_call_dispatched_and_fed_back(
        self, dispatcher, complete, state, flag, tool_handlers
    ):
        flag.activate()
        complete.side_effect = [tool_request(("getWeather", {"city": "Rome"})), reply("It is clear.")]

        result = await dispatcher.run("weather in Rome?", state)

        assert result == "It is clear."
        tool_handlers["getWeather"].assert_called_once_with(city="Rome")
        assert not flag.is_active

        function_turns = [m for m in state.messages if isinstance(m, FunctionMessage)]
        assert function_turns == [FunctionMessage(name="getWeather", content="\nToday in Rome\nClear")]

        second_payload = complete.await_args_list[1].args[0]
        assert {"role": "tool", "tool_name": "getWeather", "content": "\nToday in Rome\nClear"} in second_payload

    @pytest.mark.asyncio
    async def test_flag_cleared_even_on_fallback_result(
        self, dispatcher, complete, state, flag, tool_handlers
    ):
        flag.activate()
        tool_handlers["getWeather"].return_value = "No city or incorrect spelling"
        complete.side_effect = [tool_request(("getWeather", {"city": "Atlantis"})), reply("Sorry.")]

        await dispatcher.run("weather in Atlantis?", state)

        assert not flag.is_active
        assert state.messages[-2] == FunctionMessage(
            name="getWeather", content="No city or incorrect spelling"
        )

    @pytest.mark.asyncio
    async def test_multiple_calls_in_model_order(
        self, dispatcher, complete, state, tool_handlers
    ):
        complete.side_effect = [
            tool_request(("getTimeOfDay", {}), ("scraper", {"url": "https://example.com"})),
            reply("done"),
        ]

        await dispatcher.run("time and page", state)

        names = [m.name for m in state.messages if isinstance(m, FunctionMessage)]
        assert names == ["getTimeOfDay", "scraper"]
        tool_handlers["scraper"].assert_awaited_once_with(url="https://example.com")

    @pytest.mark.asyncio
    async def test_assistant_tool_turn_precedes_results(self, dispatcher, complete, state):
        complete.side_effect = [tool_request(("getTimeOfDay", {})), reply("noon")]

        await dispatcher.run("time?", state)

        roles = [m.role for m in state.messages]
        assert roles == ["system", "user", "assistant", "function", "assistant"]
        assert state.messages[2].tool_calls[0].name == "getTimeOfDay"
        assert state.messages[-1] == AssistantMessage(content="noon")

    @pytest.mark.asyncio
    async def test_unknown_tool_yields_empty_content(
        self, dispatcher, complete, state, flag, tool_handlers
    ):
        """Unrecognized names are not dispatched and leave the session alone."""
        flag.activate()
        complete.side_effect = [tool_request(("launchRocket", {})), reply("can't")]

        result = await dispatcher.run("launch", state)

        assert result == "can't"
        assert flag.is_active
        assert FunctionMessage(name="launchRocket", content="") in state.messages

    @pytest.mark.asyncio
    async def test_only_one_batch_of_tool_calls(self, dispatcher, complete, state, tool_handlers):
        """Tool calls in the second round are not serviced."""
        final = tool_request(("getWeather", {"city": "Rome"}))
        final.choices[0].message.content = "final text"
        complete.side_effect = [tool_request(("getTimeOfDay", {})), final]

        result = await dispatcher.run("time?", state)

        assert result == "final text"
        tool_handlers["getWeather"].assert_not_called()
        assert complete.await_count == 2

    @pytest.mark.asyncio
    async def test_missing_required_argument(self, dispatcher, complete, state, tool_handlers):
        complete.side_effect = [tool_request(("getWeather", {"town": "Rome"})), reply("x")]

        with pytest.raises(ToolArgumentsError):
            await dispatcher.run("weather?", state)

        tool_handlers["getWeather"].assert_not_called()
        assert complete.await_count == 1

    @pytest.mark.asyncio
    async def test_malformed_arguments(self, dispatcher, complete, state):
        complete.side_effect = [tool_request(("scraper", "not json")), reply("x")]

        with pytest.raises(ToolArgumentsError):
            await dispatcher.run("fetch", state)

    @pytest.mark.asyncio
    async def test_empty_final_content_returns_none(self, dispatcher, complete, state):
        complete.side_effect = [reply("a"), reply(None)]

        assert await dispatcher.run("hello", state) is None

    @pytest.mark.asyncio
    async def test_empty_string_final_content_returns_none(self, dispatcher, complete, state):
        complete.side_effect = [reply("a"), reply("")]

        assert await dispatcher.run("hello", state) is None

    @pytest.mark.asyncio
    async def test_no_choices_is_malformed(self, dispatcher, complete, state):
        complete.side_effect = [ChatCompletion(choices=[])]

        with pytest.raises(MalformedResponseError):
            await dispatcher.run("hello", state)

    @pytest.mark.asyncio
    async def test_tool_finish_without_calls_is_malformed(self, dispatcher, complete, state):
        complete.side_effect = [
            ChatCompletion(
                choices=[Choice(finish_reason=FinishReason.TOOL_CALLS, message=AssistantMessage())]
            )
        ]

        with pytest.raises(MalformedResponseError):
            await dispatcher.run("hello", state)
