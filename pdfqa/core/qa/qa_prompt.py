"""
QA prompt template.

Defines the fixed template filled with retrieved context and the user's
question, plus the answer used when nothing could be retrieved.

Dependencies: langchain_core.prompts
System role: Prompt template for answer generation
"""

from langchain_core.prompts import PromptTemplate

QA_TEMPLATE = """Use the following pieces of context to answer the question at the end.
If you don't know the answer, just say that you don't know, don't try to make up an answer.
Use three sentences maximum and keep the answer as concise as possible.
{context}
Question: {question}
Helpful Answer:"""

QA_PROMPT = PromptTemplate.from_template(QA_TEMPLATE)

NO_CONTEXT_ANSWER = "I don't know. No context is available from the document to answer this question."

CONTEXT_SEPARATOR = "\n\n"


def format_context(contents: list[str]) -> str:
    """
    Join retrieved chunk texts into one context block, keeping their order.

    Args:
        contents: Chunk texts in retrieval order

    Returns:
        str: Context block
    """
    return CONTEXT_SEPARATOR.join(contents)
