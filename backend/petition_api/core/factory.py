from functools import lru_cache
from langchain_openai import ChatOpenAI

@lru_cache()
def get_llm(api_key: str, model: str, temperature: float, max_tokens: int) -> ChatOpenAI:
    """
    Factory to return a chat model for the given credential and parameters.

    Cached per argument tuple so warm instances reuse the HTTP client.
    Retries are disabled: a failed call is reported to the caller as-is.
    """
    return ChatOpenAI(
        api_key=api_key,
        model=model,
        temperature=temperature,
        max_tokens=max_tokens,
        max_retries=0,
    )
