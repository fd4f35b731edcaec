"""Heritage chat widget using Streamlit."""

import streamlit as st

from ethioheritage import ChatHistoryStore, ConversationManager, Role, get_profile
from ethioheritage.config import config
from ethioheritage.context import PLATFORM_CONTEXTS
from ethioheritage.profiles import FALLBACK_MESSAGES

SOURCE_LABELS = {
    "knowledge_base": "Heritage knowledge base",
    "openai_enhanced": "AI assistant",
    "pattern_based": "Offline guide",
}

config.setup_logging()
logger = config.get_logger(__name__)


class SessionState:
    """Centralized session state management."""

    @staticmethod
    def initialize() -> None:
        """Initialize all session state variables."""
        defaults = {
            "conversation_manager": None,
            "transcript": [],
            "pending_message": None,
        }

        for key, default_value in defaults.items():
            if key not in st.session_state:
                st.session_state[key] = default_value

    @staticmethod
    def reset_conversation() -> None:
        """Forget the on-screen transcript and the manager's history."""
        st.session_state.transcript = []
        st.session_state.pending_message = None
        if st.session_state.conversation_manager:
            st.session_state.conversation_manager.clear_history()

    @staticmethod
    def is_system_ready() -> bool:
        """Check if the conversation manager exists.

        Returns:
            bool: True if the conversation manager is initialized.
        """
        return st.session_state.get("conversation_manager") is not None


def initialize_system() -> bool:
    """Create the conversation manager and the chat archive.

    Returns:
        bool: True if initialization succeeds, False otherwise.
    """
    try:
        config.validate()
        st.session_state.conversation_manager = ConversationManager(
            history_store=ChatHistoryStore()
        )
    except (ValueError, OSError) as e:
        logger.exception("Failed to initialize chat assistant")
        st.error(f"Failed to initialize chat assistant: {e}")
        return False
    else:
        logger.info("Chat assistant initialized")
        return True


def render_sidebar() -> tuple[Role, str, str | None]:
    """Render role, page and user selectors.

    Returns:
        Selected role, page path and optional user id.
    """
    with st.sidebar:
        st.header("Chat Settings")

        role = st.selectbox(
            "Role",
            options=list(Role),
            format_func=lambda r: r.value,
        )
        path = st.selectbox(
            "Current page",
            options=["/", *PLATFORM_CONTEXTS],
            help="The page the visitor is browsing; used to tailor suggestions.",
        )
        user_id = st.text_input(
            "User ID (optional)",
            help="Signed-in users get their questions archived.",
        ).strip()

        st.divider()
        st.subheader("Assistant Status")
        remote = "Enabled" if config.remote_chat_available() else "Offline guide only"
        st.write(f"**Remote model:** {remote}")

        if SessionState.is_system_ready():
            render_summary(st.session_state.conversation_manager.conversation_summary())

        if st.button("Clear Conversation", use_container_width=True):
            SessionState.reset_conversation()
            st.success("Conversation cleared!")
            st.rerun()

        if user_id and SessionState.is_system_ready():
            render_archive(user_id)

    return role, path, user_id or None


def render_summary(summary: dict | None) -> None:
    """Show message count and recent topics of the current conversation."""
    if summary is None:
        st.caption("No messages yet.")
        return

    st.write(f"**Messages:** {summary['message_count']}")
    if summary["recent_topics"]:
        st.write(f"**Recent topics:** {', '.join(summary['recent_topics'])}")


def render_archive(user_id: str) -> None:
    """Show the signed-in user's archived questions."""
    store = st.session_state.conversation_manager.history_store
    if store is None:
        return

    st.divider()
    st.subheader(f"Saved Questions ({store.count(user_id)})")
    for interaction in store.recent(user_id, limit=10):
        with st.expander(interaction.question[:50], expanded=False):
            st.write(interaction.answer)
            st.caption(f"{interaction.created_at} - {interaction.source}")

    if st.button("Delete Saved Questions", use_container_width=True):
        removed = store.clear(user_id)
        st.success(f"Removed {removed} saved questions.")
        st.rerun()


def render_welcome(role: Role) -> None:
    """Render the role's welcome message and quick actions."""
    profile = get_profile(role)
    with st.chat_message("assistant"):
        st.write(profile.welcome_message)

    columns = st.columns(len(profile.quick_actions))
    for column, action in zip(columns, profile.quick_actions, strict=True):
        if column.button(action, key=f"quick-{action}", use_container_width=True):
            st.session_state.pending_message = action


def render_transcript() -> None:
    """Render previous messages with their suggestions and references."""
    for index, entry in enumerate(st.session_state.transcript):
        with st.chat_message("user"):
            st.write(entry["question"])

        with st.chat_message("assistant"):
            reply = entry["reply"]
            st.write(reply["text"])
            st.caption(SOURCE_LABELS.get(entry["source"], entry["source"]))

            for reference in reply["references"]:
                if isinstance(reference, str):
                    st.markdown(f"- {reference}")
                else:
                    title = reference.get("title") or reference.get("url", "")
                    st.markdown(f"- [{title}]({reference.get('url', '')})")

            if index == len(st.session_state.transcript) - 1:
                for suggestion in reply["suggestions"]:
                    if st.button(suggestion, key=f"suggestion-{index}-{suggestion}"):
                        st.session_state.pending_message = suggestion


def handle_message(message: str, role: Role, path: str, user_id: str | None) -> None:
    """Send a message to the assistant and append the answer to the transcript."""
    manager = st.session_state.conversation_manager
    try:
        result = manager.answer(message, role=role, path=path, user_id=user_id)
    except ValueError as e:
        st.warning(str(e))
        return
    except OSError:
        logger.exception("Chat request failed")
        st.error(FALLBACK_MESSAGES["technical_issue"])
        return

    st.session_state.transcript.append({
        "question": message,
        "reply": result.reply.to_dict(),
        "source": result.source,
    })


def main() -> None:
    """Main entry point for the Streamlit chat widget."""
    st.set_page_config(page_title="EthioHeritage360 Assistant", layout="centered")

    SessionState.initialize()

    st.title("EthioHeritage360 Heritage Guide")

    if not SessionState.is_system_ready() and not initialize_system():
        return

    role, path, user_id = render_sidebar()

    render_welcome(role)
    render_transcript()

    typed = st.chat_input(
        "Ask about heritage sites, tours, or culture...",
        max_chars=config.MESSAGE_MAX_LENGTH,
    )
    message = typed or st.session_state.pending_message
    if message:
        st.session_state.pending_message = None
        handle_message(message, role, path, user_id)
        st.rerun()


if __name__ == "__main__":
    main()
