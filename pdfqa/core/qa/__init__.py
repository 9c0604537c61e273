"""
Retrieval-augmented question answering.

Exports: QAChain, QAResponse, QA_PROMPT, NO_CONTEXT_ANSWER
"""

from pdfqa.core.qa.qa_chain import QAChain
from pdfqa.core.qa.qa_prompt import NO_CONTEXT_ANSWER, QA_PROMPT
from pdfqa.core.qa.qa_schema import QAResponse

__all__ = ["QAChain", "QAResponse", "QA_PROMPT", "NO_CONTEXT_ANSWER"]
