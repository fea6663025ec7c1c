"""Inbound message handling: gate, dispatch, reply."""

import logging

from toolbridge.bridge.dispatcher import DispatchError, ToolDispatcher
from toolbridge.bridge.gate import apply_gate
from toolbridge.channels.base import Channel, ChannelError
from toolbridge.conversation.state import ConversationState
from toolbridge.llm.client import LLMError
from toolbridge.session.flag import SessionFlag

logger = logging.getLogger(__name__)


class Bridge:
    """Coordinates one conversation between a chat channel and the model."""

    def __init__(
        self,
        state: ConversationState,
        flag: SessionFlag,
        dispatcher: ToolDispatcher,
        channel: Channel,
        trigger_word: str,
    ):
        self.state = state
        self.flag = flag
        self.dispatcher = dispatcher
        self.channel = channel
        self.trigger_word = trigger_word

    async def handle_message(self, text: str) -> str | None:
        """Process one inbound message; returns the reply that was sent.

        Failures are logged and swallowed here so that a bad turn never
        reaches the channel. They also return the session to IDLE.
        """
        utterance = apply_gate(text, self.trigger_word, self.flag)
        if utterance is None:
            return None

        try:
            async with self.state.exclusive():
                reply = await self.dispatcher.run(utterance, self.state)

            if reply is None:
                logger.info("Model returned no content, ending session")
                self.flag.deactivate()
                return None

            await self.channel.send(reply)
            return reply

        except (DispatchError, LLMError) as e:
            logger.exception(f"Dispatch failed: {e}")
        except ChannelError as e:
            logger.error(f"Failed to deliver reply: {e}")
        except Exception as e:
            logger.exception(f"Unexpected error handling message: {e}")

        self.flag.deactivate()
        return None
