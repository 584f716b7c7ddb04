"""Interactive conversation loop.

State machine:
    INIT -> FIRST_ANALYSIS -> IDLE -> AWAITING_REPLY -> IDLE ... -> TERMINATED

The first analysis must succeed, so its errors propagate. Later turns
report API errors and go back to IDLE; the unanswered user message stays in
the conversation, so the next request carries two consecutive user turns.
"""

import logging
from collections.abc import Callable

from ..errors import ApiError
from ..llm.base import ChatClient
from ..llm.models import Role
from .models import Conversation, LoopState

logger = logging.getLogger(__name__)

QUIT_SENTINEL = "quit"


class ConversationLoop:
    """Drive a multi-turn conversation with a chat client.

    Example:
        loop = ConversationLoop(client, Conversation.seed(system, food_log),
                                read_input=prompt_user, render=show_reply,
                                report_error=show_error)
        await loop.run()
    """

    def __init__(
        self,
        client: ChatClient,
        conversation: Conversation,
        read_input: Callable[[], str],
        render: Callable[[str], None],
        report_error: Callable[[ApiError], None],
        model: str | None = None,
        sentinel: str = QUIT_SENTINEL,
    ):
        """Initialize the loop.

        Args:
            client: Chat client used for every turn
            conversation: Seeded conversation, owned by the loop from now on
            read_input: Blocking read of one line of user input
            render: Display an assistant reply
            report_error: Display a failed turn
            model: Model override (None uses the client's default)
            sentinel: Input that ends the loop
        """
        self._client = client
        self._conversation = conversation
        self._read_input = read_input
        self._render = render
        self._report_error = report_error
        self._model = model
        self._sentinel = sentinel
        self._state = LoopState.INIT

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def conversation(self) -> Conversation:
        return self._conversation

    async def run_first_analysis(self) -> str:
        """Request the initial food log analysis.

        Returns:
            The assistant reply

        Raises:
            ApiError: If the call fails; the loop is then terminated
            RuntimeError: If called after the first analysis
        """
        if self._state is not LoopState.INIT:
            raise RuntimeError(f"First analysis already done (state: {self._state.value})")

        self._state = LoopState.FIRST_ANALYSIS
        try:
            reply = await self._complete()
        except ApiError:
            self._state = LoopState.TERMINATED
            raise

        self._state = LoopState.IDLE
        return reply

    async def step(self, line: str) -> LoopState:
        """Handle one line of user input.

        Args:
            line: Raw input line

        Returns:
            The state after handling the line (IDLE or TERMINATED)
        """
        if self._state is not LoopState.IDLE:
            raise RuntimeError(f"Cannot accept input in state {self._state.value}")

        text = line.strip()
        if text == self._sentinel:
            self._state = LoopState.TERMINATED
            return self._state

        self._conversation.append(Role.USER, text)
        self._state = LoopState.AWAITING_REPLY
        try:
            await self._complete()
        except ApiError as e:
            logger.warning("Turn failed, keeping unanswered message: %s", e)
            self._report_error(e)
        self._state = LoopState.IDLE
        return self._state

    async def run(self) -> None:
        """Run the first analysis, then chat until the sentinel is entered.

        End of input and Ctrl-C while waiting for input also end the loop.
        """
        if self._state is LoopState.INIT:
            await self.run_first_analysis()

        while self._state is not LoopState.TERMINATED:
            try:
                line = self._read_input()
            except (EOFError, KeyboardInterrupt):
                self._state = LoopState.TERMINATED
                break
            await self.step(line)

    async def _complete(self) -> str:
        response = await self._client.chat_completion(
            self._conversation.messages,
            model=self._model,
        )
        self._conversation.append(Role.ASSISTANT, response.content)
        self._render(response.content)
        return response.content
