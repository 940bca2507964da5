"""Fixed prompts used to turn a transcription into a chat completion request."""

from domain.models import ChatCompletionRequest, ChatMessage

SYSTEM_PROMPT = (
    "You are a helpful assistant that summarizes transcribed audio. "
    "Provide a clear, concise summary of the main points."
)
USER_PROMPT_PREFIX = "Please summarize the following transcription:\n\n"


def build_summary_request(
    text: str, model: str, temperature: float = 0.7
) -> ChatCompletionRequest:
    """Wraps transcribed text in a two-message chat completion request."""
    return ChatCompletionRequest(
        model=model,
        messages=[
            ChatMessage(role="system", content=SYSTEM_PROMPT),
            ChatMessage(role="user", content=f"{USER_PROMPT_PREFIX}{text}"),
        ],
        temperature=temperature,
    )
