"""In-memory inverted index: keyword -> occurrences sorted by descending frequency."""

from collections.abc import Iterable, Mapping

import polars as pl

from littlesearch.data_models.doc import Doc
from littlesearch.data_models.occurrence import Occurrence
from littlesearch.indexing.document_indexer import index_document
from littlesearch.indexing.occurrence_list import insert_last
from littlesearch.keywords import NoiseWords

_SCHEMA = {
    "keyword": pl.String,
    "rank": pl.Int64,
    "doc_id": pl.String,
    "frequency": pl.Int64,
}


class KeywordIndex:
    """Keyword -> frequency-descending Occurrence list for a whole corpus.

    Documents are merged one at a time by a single writer; once built, the
    index is only read. Queries never mutate it.
    """

    def __init__(self, noise_words: NoiseWords | None = None) -> None:
        self.noise_words = noise_words if noise_words is not None else NoiseWords()
        self._lists: dict[str, list[Occurrence]] = {}
        self._documents: list[str] = []
        self._merged: set[str] = set()

    @classmethod
    def build(cls, docs: Iterable[Doc], noise_words: NoiseWords) -> "KeywordIndex":
        """Index docs in sequence order; earlier docs win frequency ties."""
        index = cls(noise_words)
        for doc in docs:
            index.add_document(doc.doc_id, doc.tokens)
        return index

    def add_document(self, doc_id: str, raw_tokens: Iterable[str]) -> dict[str, Occurrence]:
        """Scan one document and merge its keywords. Returns the per-document map."""
        if doc_id in self._merged:
            raise ValueError(f"Document already indexed: {doc_id!r}")
        kws = index_document(doc_id, raw_tokens, self.noise_words)
        self.merge(kws)
        if doc_id not in self._merged:
            self._record(doc_id)  # keyword-less docs still count as merged
        return kws

    def _record(self, doc_id: str) -> None:
        self._merged.add(doc_id)
        self._documents.append(doc_id)

    def merge(self, kws: Mapping[str, Occurrence]) -> None:
        """Merge one document's keyword -> Occurrence map into the index."""
        doc_ids = {occ.doc_id for occ in kws.values()}
        already = sorted(doc_ids & self._merged)
        if already:
            raise ValueError(f"Document already indexed: {already[0]!r}")

        for keyword, occ in kws.items():
            occs = self._lists.get(keyword)
            if occs is None:
                self._lists[keyword] = [occ]
            else:
                occs.append(occ)
                insert_last(occs)

        for doc_id in sorted(doc_ids):
            self._record(doc_id)

    def occurrences(self, keyword: str) -> tuple[Occurrence, ...] | None:
        """Occurrences of keyword in descending frequency, or None if unknown."""
        occs = self._lists.get(keyword.lower())
        if occs is None:
            return None
        return tuple(occs)

    def keywords(self) -> list[str]:
        return sorted(self._lists)

    @property
    def documents(self) -> list[str]:
        """Merged document ids, in merge order."""
        return list(self._documents)

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and keyword.lower() in self._lists

    def __len__(self) -> int:
        return len(self._lists)

    def to_polars(self) -> pl.DataFrame:
        """One row per occurrence: keyword, rank within its list, doc_id, frequency."""
        rows = [
            (keyword, rank, occ.doc_id, occ.frequency)
            for keyword in sorted(self._lists)
            for rank, occ in enumerate(self._lists[keyword])
        ]
        if not rows:
            return pl.DataFrame(schema=_SCHEMA)
        return pl.DataFrame(rows, schema=_SCHEMA, orient="row")
