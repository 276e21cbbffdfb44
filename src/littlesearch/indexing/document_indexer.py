"""Count keyword occurrences within a single document."""

from collections.abc import Iterable

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.keywords import NoiseWords, normalize


def index_document(
    doc_id: str, raw_tokens: Iterable[str], noise_words: NoiseWords
) -> dict[str, Occurrence]:
    """Return keyword -> Occurrence(doc_id, count) for one document.

    Keys appear in order of first appearance in the document.
    """
    occurrences: dict[str, Occurrence] = {}
    for raw in raw_tokens:
        keyword = normalize(raw, noise_words)
        if keyword is None:
            continue
        existing = occurrences.get(keyword)
        if existing is None:
            occurrences[keyword] = Occurrence(doc_id=doc_id, frequency=1)
        else:
            occurrences[keyword] = existing.model_copy(
                update={"frequency": existing.frequency + 1}
            )
    return occurrences
