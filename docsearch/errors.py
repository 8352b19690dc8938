"""Exception taxonomy for the search engine."""


class SearchError(Exception):
    """Base class for all search engine errors"""


class DuplicateDocumentIdError(SearchError, ValueError):
    """Document id was already indexed (fatal during the build phase)"""

    def __init__(self, document_id: int):
        self.document_id = document_id
        super().__init__(f"Document id {document_id} is already indexed")


class InvalidDocumentIdError(SearchError, ValueError):
    """Document id is negative"""

    def __init__(self, document_id: int):
        self.document_id = document_id
        super().__init__(f"Document id must be non-negative, got {document_id}")


class IndexSealedError(SearchError, RuntimeError):
    """Index no longer accepts documents because queries have started"""

    def __init__(self, document_id: int):
        self.document_id = document_id
        super().__init__(
            f"Cannot add document {document_id}: index is sealed after the first query"
        )


class InputFormatError(SearchError, ValueError):
    """Console input does not follow the expected line protocol"""
