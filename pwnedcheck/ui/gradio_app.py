# pwnedcheck/ui/gradio_app.py
"""
Gradio interface for single-password breach lookups.
Separated from the lookup engine so the engine stays UI-free.
"""

import gradio as gr
import time

from ..core.exceptions import (
    InvalidInputError,
    MalformedResponseError,
    TooShortError,
    TransportError,
)
from ..core.interfaces import PwnedClient
from ..utils.logger import get_logger
from ..utils.config import get_config

logger = get_logger(__name__)


class GradioLookupApp:
    """
    Connects the Gradio widgets to a PwnedClient.

    Every error kind gets its own message; a failed lookup is never shown
    as "not found".
    """

    def __init__(self, checker: PwnedClient):
        self.checker = checker
        logger.info("GradioLookupApp initialized")

    def lookup_password(self, password: str, is_hashed: bool = False) -> str:
        """
        Run a breach-count lookup and format it as markdown.

        Args:
            password: Plain-text password, or SHA-1 hash when is_hashed is set
            is_hashed: Whether the input is already hashed

        Returns:
            str: Markdown result for the output panel
        """
        if not password:
            return "**Enter a password to check.**"

        start_time = time.time()

        try:
            count = self.checker.get_breach_count(password, is_hashed=is_hashed)
        except TooShortError as e:
            return f"**Input too short:** a hash needs at least {e.min_length} characters."
        except InvalidInputError as e:
            return f"**Invalid input:** {e}"
        except TransportError as e:
            logger.error(f"Lookup failed, service unreachable: {e}")
            return "**Service unavailable:** the Pwned Passwords API could not be reached. Try again later."
        except MalformedResponseError as e:
            logger.error(f"Lookup failed, unreadable response: {e}")
            return "**Unexpected response:** the Pwned Passwords API returned data that could not be read."

        duration_ms = (time.time() - start_time) * 1000
        logger.debug(f"Web lookup finished in {duration_ms:.1f}ms")

        return self.format_result(count)

    @staticmethod
    def format_result(count: int) -> str:
        if count > 0:
            return (
                f"**BREACHED!** This password has been seen **{count:,}** times in data breaches. "
                "Do not use it."
            )
        return "**Not found.** This password does not appear in known breaches."


def create_lookup_interface(checker: PwnedClient) -> gr.Blocks:
    """
    Create the Gradio interface for breach lookups.

    The caller owns checker and closes it once the server stops.

    Returns:
        gr.Blocks: Configured Gradio interface
    """
    app = GradioLookupApp(checker)
    config = get_config()

    with gr.Blocks(title=config.app_title) as interface:
        gr.Markdown(f"# {config.app_title}")
        gr.Markdown(
            "Only the first 5 characters of your password's SHA-1 hash are sent "
            "to the Pwned Passwords API. The match happens here."
        )

        with gr.Row():
            with gr.Column(scale=4):
                password_input = gr.Textbox(
                    label="Password",
                    type="password",
                    placeholder="Enter a password (it is never stored)",
                    lines=1,
                    max_lines=1,
                )
                hashed_input = gr.Checkbox(label="Input is a SHA-1 hash", value=False)

            with gr.Column(scale=1):
                check_button = gr.Button("Check", variant="primary")

        result_output = gr.Markdown()

        check_button.click(
            fn=app.lookup_password,
            inputs=[password_input, hashed_input],
            outputs=[result_output],
            api_name="lookup_password"
        )

        password_input.submit(
            fn=app.lookup_password,
            inputs=[password_input, hashed_input],
            outputs=[result_output]
        )

    logger.info("Gradio interface created successfully")
    return interface
