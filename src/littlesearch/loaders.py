"""Read noise-word lists, document lists and documents from text files."""

from pathlib import Path

from littlesearch.data_models.doc import Doc
from littlesearch.indexing.keyword_index import KeywordIndex
from littlesearch.keywords import NoiseWords


class InputUnavailableError(FileNotFoundError):
    """An input file could not be read; no index was produced from it."""


def _read_words(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputUnavailableError(f"Cannot read {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise InputUnavailableError(f"Cannot read {path}: not valid UTF-8 ({e.reason})") from e
    return text.split()


def load_noise_words(path: Path) -> NoiseWords:
    return NoiseWords(_read_words(path))


def load_doc_list(path: Path) -> list[str]:
    """Document names listed in path, whitespace separated, in order."""
    return _read_words(path)


def load_document(path: Path, doc_id: str | None = None) -> Doc:
    return Doc(doc_id=doc_id if doc_id is not None else path.name, tokens=_read_words(path))


def make_index(docs_file: Path, noise_words_file: Path) -> KeywordIndex:
    """Load the noise words and every listed document, then build the index.

    Relative document names are resolved against the directory of docs_file;
    the name as listed is used as the document id. All inputs are read before
    any merge, so a missing file raises InputUnavailableError without a
    partially built index.
    """
    noise_words = load_noise_words(noise_words_file)
    docs = []
    for name in load_doc_list(docs_file):
        path = Path(name)
        if not path.is_absolute():
            path = docs_file.parent / path
        docs.append(load_document(path, doc_id=name))
    return KeywordIndex.build(docs, noise_words)
