"""Document Q&A mode: upload, summarize, ask, select and delete documents.

Summaries and answers are computed from a flat prefix of the document
(``document_context_chars``, 12,000 by default). The cut is by characters, not
tokens, so it can fall mid-word.

The latest answer is derived view state: it belongs to one document and is
cleared when that document stops being selected or is deleted.
"""

import logging

from config import Settings, get_settings
from errors import RecordNotFoundError, ValidationError
from llm import BaseCompletionClient
from llm.prompts import (
    DOCUMENT_QA_PROMPT,
    DOCUMENT_QA_SYSTEM_PROMPT,
    SUMMARIZE_SYSTEM_PROMPT,
)
from services.collection_store import CollectionStore, ConfirmGate
from services.document import DocumentParser
from storage import Document

logger = logging.getLogger(__name__)


class DocumentQAService:
    """Manages uploaded documents and the questions asked about them."""

    def __init__(
        self,
        documents: CollectionStore[Document],
        completion_client: BaseCompletionClient,
        parser: DocumentParser,
        settings: Settings | None = None,
    ) -> None:
        self.documents = documents
        self.completion_client = completion_client
        self.parser = parser
        self.settings = settings or get_settings()
        self._answer: tuple[str, str] | None = None
        self.documents.on_deselect(self._clear_answer)

    @property
    def answer(self) -> str:
        """Latest answer for the selected document, or empty."""
        if self._answer is None:
            return ""
        document_id, text = self._answer
        if document_id != self.documents.selected_id:
            return ""
        return text

    async def upload(
        self,
        filename: str,
        data: bytes,
        content_type: str | None = None,
    ) -> Document:
        """Parse an upload, store it as a new document and select it.

        Raises:
            EmptyDocumentError: If no readable text was found.
            FileTooLargeError: If the upload exceeds the size limit.
            DocumentParseError: If the file could not be decoded.
        """
        parsed = await self.parser.parse_bytes(data, filename, content_type)
        document = Document(filename=parsed.filename, content=parsed.text)

        self.documents.insert(document)
        self.select(document.id)
        logger.info(
            "Stored document %s (%s, %d chars, %s pages)",
            document.id,
            parsed.document_type,
            len(document.content),
            parsed.page_count if parsed.page_count is not None else "n/a",
        )
        return document

    def select(self, document_id: str | None) -> Document | None:
        """Select a document. Switching documents clears the answer."""
        if document_id != self.documents.selected_id:
            self._answer = None
        return self.documents.select(document_id)

    def delete(self, document_id: str, confirm: ConfirmGate) -> bool:
        return self.documents.remove(document_id, confirm)

    async def summarize(self, document_id: str) -> Document:
        """Generate a summary and store it on the document, replacing any previous one.

        Raises:
            RecordNotFoundError: If the document does not exist.
            ValidationError: If no API key is saved.
            CompletionError: If the provider request fails.
        """
        document = self._require(document_id)
        self.completion_client.require_api_key()

        summary = await self.completion_client.complete(
            [
                {"role": "system", "content": SUMMARIZE_SYSTEM_PROMPT},
                {"role": "user", "content": self._context(document)},
            ]
        )
        return self.documents.update(
            document_id, lambda d: d.model_copy(update={"summary": summary})
        )

    async def ask(self, document_id: str, question: str) -> str:
        """Answer a question from the document's content.

        Raises:
            ValidationError: If the question is blank or no API key is saved.
            RecordNotFoundError: If the document does not exist.
            CompletionError: If the provider request fails.
        """
        question = question.strip()
        if not question:
            raise ValidationError("Question cannot be empty")
        document = self._require(document_id)
        self.completion_client.require_api_key()

        prompt = DOCUMENT_QA_PROMPT.format(
            document=self._context(document), question=question
        )
        answer = await self.completion_client.complete(
            [
                {"role": "system", "content": DOCUMENT_QA_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ]
        )
        self._answer = (document_id, answer)
        return answer

    def _require(self, document_id: str) -> Document:
        document = self.documents.get(document_id)
        if document is None:
            raise RecordNotFoundError(f"Document '{document_id}' not found")
        return document

    def _context(self, document: Document) -> str:
        return document.content[: self.settings.document_context_chars]

    def _clear_answer(self, document_id: str) -> None:
        if self._answer is not None and self._answer[0] == document_id:
            self._answer = None
