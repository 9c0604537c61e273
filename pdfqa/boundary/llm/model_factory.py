"""
Model client factory for selecting between Google Gemini and OpenAI.

Depends on the LLM_PROVIDER setting. Provides the LangChain Embeddings and
chat model interfaces regardless of the underlying provider.

Dependencies: langchain_google_genai, langchain_openai, pdfqa.configs
System role: Embedding and chat model instantiation
"""

import logging

from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel

from pdfqa.configs.llm import LLMSettings
from pdfqa.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _require_key(settings: LLMSettings) -> str:
    """Return the API key for the configured provider or raise."""
    if settings.provider == "google":
        key, env_name = settings.google_api_key, "GOOGLE_API_KEY"
    elif settings.provider == "openai":
        key, env_name = settings.openai_api_key, "OPENAI_API_KEY"
    else:
        raise ConfigurationError(
            f"Invalid LLM_PROVIDER: {settings.provider}. Must be 'google' or 'openai'.",
            setting="LLM_PROVIDER",
        )

    if key is None or not key.get_secret_value():
        raise ConfigurationError(
            f"Required env var {env_name} is not set or is empty",
            setting=env_name,
        )
    return key.get_secret_value()


def get_embeddings(settings: LLMSettings) -> Embeddings:
    """
    Factory function to get the embedding client for the configured provider.

    Args:
        settings: LLM settings

    Returns:
        Embeddings: GoogleGenerativeAIEmbeddings or OpenAIEmbeddings

    Raises:
        ConfigurationError: If the provider is invalid or its API key is missing
    """
    api_key = _require_key(settings)

    if settings.provider == "google":
        from langchain_google_genai import GoogleGenerativeAIEmbeddings

        logger.info(
            f"{__name__}:get_embeddings - Creating Gemini embeddings (model={settings.embedding_model})"
        )
        # Gemini embeddings take per-call options; the SDK default retry stays on
        return GoogleGenerativeAIEmbeddings(
            model=settings.embedding_model,
            google_api_key=api_key,
            request_options={"timeout": settings.request_timeout},
        )

    from langchain_openai import OpenAIEmbeddings

    logger.info(
        f"{__name__}:get_embeddings - Creating OpenAI embeddings (model={settings.embedding_model})"
    )
    return OpenAIEmbeddings(
        model=settings.embedding_model,
        api_key=api_key,
        timeout=settings.request_timeout,
        max_retries=0,
    )


def get_chat_model(settings: LLMSettings) -> BaseChatModel:
    """
    Factory function to get the chat model for the configured provider.

    Retries are disabled so that service failures surface immediately.

    Args:
        settings: LLM settings

    Returns:
        BaseChatModel: ChatGoogleGenerativeAI or ChatOpenAI

    Raises:
        ConfigurationError: If the provider is invalid or its API key is missing
    """
    api_key = _require_key(settings)

    if settings.provider == "google":
        from langchain_google_genai import ChatGoogleGenerativeAI

        logger.info(
            f"{__name__}:get_chat_model - Creating Gemini chat model (model={settings.chat_model})"
        )
        return ChatGoogleGenerativeAI(
            model=settings.chat_model,
            temperature=settings.temperature,
            google_api_key=api_key,
            timeout=settings.request_timeout,
            max_retries=0,
        )

    from langchain_openai import ChatOpenAI

    logger.info(
        f"{__name__}:get_chat_model - Creating OpenAI chat model (model={settings.chat_model})"
    )
    return ChatOpenAI(
        model=settings.chat_model,
        temperature=settings.temperature,
        api_key=api_key,
        timeout=settings.request_timeout,
        max_retries=0,
    )
