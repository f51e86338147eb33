"""Prompts for document summaries and document Q&A."""

SUMMARIZE_SYSTEM_PROMPT = "Summarize clearly and concisely."

DOCUMENT_QA_SYSTEM_PROMPT = "Answer only using the provided document context."

# Placeholders: {document}, {question}
DOCUMENT_QA_PROMPT = "Document:\n{document}\n\nQuestion: {question}"
