from pathlib import Path

import pytest

from littlesearch.loaders import (
    InputUnavailableError,
    load_doc_list,
    load_document,
    load_noise_words,
    make_index,
)


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    (tmp_path / "noisewords.txt").write_text("the\nis\na\nAnd\n")
    (tmp_path / "AliceCh1.txt").write_text(
        "Alice was beginning to get very tired.\nAlice, Alice!\n"
    )
    (tmp_path / "WowCh1.txt").write_text("The world is a wide world; world.\n")
    (tmp_path / "docs.txt").write_text("AliceCh1.txt\nWowCh1.txt\n")
    return tmp_path


def test_load_noise_words(corpus: Path) -> None:
    noise = load_noise_words(corpus / "noisewords.txt")
    assert "The" in noise
    assert "and" in noise
    assert len(noise) == 4


def test_load_doc_list_keeps_order(corpus: Path) -> None:
    assert load_doc_list(corpus / "docs.txt") == ["AliceCh1.txt", "WowCh1.txt"]


def test_load_document_splits_on_whitespace(corpus: Path) -> None:
    doc = load_document(corpus / "WowCh1.txt")
    assert doc.doc_id == "WowCh1.txt"
    assert doc.tokens == ["The", "world", "is", "a", "wide", "world;", "world."]


def test_make_index(corpus: Path) -> None:
    index = make_index(corpus / "docs.txt", corpus / "noisewords.txt")

    alice = index.occurrences("alice")
    world = index.occurrences("world")
    assert alice is not None and world is not None
    assert [(o.doc_id, o.frequency) for o in alice] == [("AliceCh1.txt", 3)]
    assert [(o.doc_id, o.frequency) for o in world] == [("WowCh1.txt", 3)]
    assert "the" not in index
    assert index.documents == ["AliceCh1.txt", "WowCh1.txt"]


def test_missing_noise_words_file(corpus: Path) -> None:
    with pytest.raises(InputUnavailableError, match="missing.txt"):
        make_index(corpus / "docs.txt", corpus / "missing.txt")


def test_missing_document_raises_before_indexing(corpus: Path) -> None:
    (corpus / "docs.txt").write_text("AliceCh1.txt\nGone.txt\n")
    with pytest.raises(InputUnavailableError, match="Gone.txt"):
        make_index(corpus / "docs.txt", corpus / "noisewords.txt")


def test_input_unavailable_is_a_file_not_found_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_doc_list(tmp_path / "nope.txt")


def test_undecodable_document_is_unavailable(corpus: Path) -> None:
    (corpus / "Latin1.txt").write_bytes(b"caf\xe9 bar\n")
    (corpus / "docs.txt").write_text("AliceCh1.txt\nLatin1.txt\n")
    with pytest.raises(InputUnavailableError, match="Latin1.txt"):
        make_index(corpus / "docs.txt", corpus / "noisewords.txt")


def test_undecodable_noise_words_file_is_unavailable(corpus: Path) -> None:
    (corpus / "noisewords.txt").write_bytes(b"the \xff\xfe is\n")
    with pytest.raises(InputUnavailableError, match="noisewords.txt"):
        load_noise_words(corpus / "noisewords.txt")
