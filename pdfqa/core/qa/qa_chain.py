"""
Retrieval QA chain.

Answers a question by retrieving the most relevant chunks from the index,
filling the QA prompt and sending it to the chat model.

Dependencies: langchain_core, pdfqa.boundary.vdb
System role: QA orchestration (stateless, one question at a time)
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import BasePromptTemplate

from pdfqa.boundary.vdb.faiss_store import FAISSIndex
from pdfqa.core.exceptions import GenerationServiceError
from pdfqa.core.qa.qa_prompt import NO_CONTEXT_ANSWER, QA_PROMPT, format_context
from pdfqa.core.qa.qa_schema import QAResponse

logger = logging.getLogger(__name__)


class QAChain:
    """
    Retrieval-augmented question answering over a built index.

    No state is kept between calls; every question is answered on its own.
    """

    def __init__(
        self,
        index: FAISSIndex,
        llm: BaseChatModel,
        k: int = 4,
        prompt: BasePromptTemplate = QA_PROMPT,
        model_name: str | None = None,
    ) -> None:
        """
        Initialize QA chain.

        Args:
            index: Index to retrieve context from
            llm: Chat model used for answer generation
            k: Number of chunks to retrieve per question
            prompt: Template with {context} and {question} placeholders
            model_name: Model identifier, reported in errors

        Raises:
            ValueError: When k < 1
        """
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        self._index = index
        self._llm = llm
        self._k = k
        self._prompt = prompt
        self._model_name = model_name
        self._parser = StrOutputParser()

    def answer(self, question: str) -> QAResponse:
        """
        Answer a question using the indexed document.

        Args:
            question: User's question

        Returns:
            QAResponse: Answer text with the retrieved source chunks

        Raises:
            EmbeddingServiceError: When embedding the question fails
            GenerationServiceError: When the LLM call fails
        """
        sources = self._index.retrieve(question, self._k)
        logger.info(f"{__name__}:answer - Retrieved {len(sources)} chunks (k={self._k})")

        if not sources:
            logger.warning(f"{__name__}:answer - Empty index, returning no-context answer")
            return QAResponse(question=question, answer=NO_CONTEXT_ANSWER, sources=[])

        prompt_value = self._prompt.invoke({
            "context": format_context([source.content for source in sources]),
            "question": question,
        })

        try:
            message = self._llm.invoke(prompt_value)
        except Exception as e:
            raise GenerationServiceError(
                f"Failed to generate answer: {e}",
                model=self._model_name,
            ) from e

        answer = self._parser.invoke(message).strip()
        logger.info(f"{__name__}:answer - Generated answer_len={len(answer)}")
        return QAResponse(question=question, answer=answer, sources=sources)
