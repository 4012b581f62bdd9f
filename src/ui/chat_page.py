"""NiceGUI chat interface for an n8n Chat Trigger webhook."""

import html
import re

from nicegui import ui

from src.client.config import get_client_config
from src.client.conversation import ConversationState
from src.client.engine import ChatEngine
from src.models.schemas import Message, Sender

URL_PATTERN = re.compile(
    r"(\b(?:https?|ftp|file)://[-A-Z0-9+&@#/%?=~_|!:,.;]*[-A-Z0-9+&@#/%=~_|])",
    re.IGNORECASE,
)


def linkify(text: str) -> str:
    """Escape text for HTML and turn URLs into links."""
    parts = URL_PATTERN.split(text)
    rendered = []
    for index, part in enumerate(parts):
        # re.split puts captured URLs at odd indices
        if index % 2:
            url = html.escape(part, quote=True)
            rendered.append(
                f'<a href="{url}" target="_blank" rel="noopener noreferrer" '
                f'class="text-blue-600 underline">{url}</a>'
            )
        else:
            rendered.append(html.escape(part))
    return "".join(rendered).replace("\n", "<br>")


CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<link href="https://fonts.googleapis.com/icon?family=Material+Icons" rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #1f2937; min-height: 100vh; }

    .app-container {
        background: #111827;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.3);
        overflow: hidden;
    }

    .message-user {
        background: #374151;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-bot {
        background: #030712;
        color: #e5e7eb;
        border-radius: 18px 18px 18px 4px;
    }
    .message-error { color: #f87171; }

    .avatar-user { background: #4b5563; }
    .avatar-bot { background: #3b82f6; }

    .cursor {
        display: inline-block;
        width: 4px; height: 16px;
        margin-left: 4px;
        background: #9ca3af;
        animation: pulse 1s infinite;
    }
    @keyframes pulse {
        0%, 100% { opacity: 1; }
        50% { opacity: 0.3; }
    }

    .message-bot a { color: #60a5fa; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    config = get_client_config()

    messages_container: ui.column
    url_input: ui.input
    input_field: ui.input
    send_btn: ui.button
    banner: ui.label
    open_label: ui.html | None = None
    rendered_shape: tuple[int, bool] | None = None

    def render_avatar(is_user: bool) -> None:
        css = "avatar-user" if is_user else "avatar-bot"
        icon = "person" if is_user else "smart_toy"
        avatar_classes = f"w-8 h-8 rounded-full flex items-center justify-center {css}"
        with ui.element("div").classes(avatar_classes):
            ui.icon(icon).classes("text-white text-lg")

    def render_content(msg: Message, show_cursor: bool) -> str:
        content = linkify(msg.text)
        if show_cursor:
            content += '<span class="cursor"></span>'
        return content

    def render_message(msg: Message, show_cursor: bool) -> ui.html:
        is_user = msg.sender == Sender.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-bot"
        if msg.is_error:
            bubble += " message-error"

        with ui.row().classes(f"w-full {align} gap-2 items-end"):
            if not is_user:
                render_avatar(False)
            with ui.element("div").classes(f"px-4 py-2 max-w-[70%] {bubble}"):
                label = ui.html(render_content(msg, show_cursor), sanitize=False).classes(
                    "text-sm leading-relaxed"
                )
            if is_user:
                render_avatar(True)
        return label

    def refresh_messages(state: ConversationState) -> None:
        nonlocal open_label, rendered_shape
        open_message = state.open_message
        shape = (len(state.messages), open_message is not None)

        # While streaming only the open bubble changes.
        if shape == rendered_shape and open_message is not None and open_label is not None:
            open_label.set_content(render_content(open_message, state.pending))
        else:
            messages_container.clear()
            open_label = None
            with messages_container:
                last = len(state.messages) - 1
                for index, msg in enumerate(state.messages):
                    is_open = index == last and msg.sender == Sender.BOT and state.pending
                    label = render_message(msg, show_cursor=is_open)
                    if msg is open_message:
                        open_label = label
            rendered_shape = shape

        banner.set_text(state.error or "")
        banner.set_visibility(bool(state.error))
        update_controls()

    def update_controls() -> None:
        pending = engine.state.pending
        has_url = bool((url_input.value or "").strip())
        has_text = bool((input_field.value or "").strip())
        input_field.set_enabled(not pending and has_url)
        send_btn.set_enabled(not pending and has_text)

    engine = ChatEngine(config=config, on_change=refresh_messages)

    async def send_message() -> None:
        text = input_field.value or ""
        if engine.state.pending or not text.strip():
            return
        input_field.value = ""
        await engine.send(text, webhook_url=url_input.value)

    def new_chat() -> None:
        engine.new_chat()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-2xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.column().classes("w-full px-5 py-4 bg-gray-900 gap-2"):
            ui.label("n8n AI Chatbot").classes(
                "w-full text-center text-xl font-bold text-gray-200"
            )
            url_input = (
                ui.input(
                    label="n8n Chat Trigger Webhook URL",
                    placeholder="https://your-n8n-instance.com/webhook/...",
                    value=config.webhook_url,
                    on_change=lambda _: update_controls(),
                )
                .props("dark outlined dense")
                .classes("w-full")
            )

        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full"),
            ui.column().classes("w-full p-4"),
        ):
            messages_container = ui.column().classes("w-full gap-4")

        # Input
        with ui.column().classes("w-full p-4 bg-gray-900 gap-2"):
            banner = ui.label().classes(
                "w-full text-center text-sm text-red-400 whitespace-pre-wrap"
            )
            with ui.row().classes("w-full gap-2 items-center no-wrap"):
                ui.button(icon="add", on_click=new_chat).props("round flat color=white").tooltip(
                    "Start New Chat"
                )
                input_field = (
                    ui.input(
                        placeholder="Type your message...",
                        on_change=lambda _: update_controls(),
                    )
                    .props("dark outlined rounded dense")
                    .classes("flex-grow")
                    .on("keydown.enter", send_message)
                )
                send_btn = ui.button(icon="send", on_click=send_message).props(
                    "round unelevated color=primary"
                )

    refresh_messages(engine.state)
