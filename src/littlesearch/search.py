"""Top-5 "kw1 OR kw2" search over a keyword index.

Usage:
    python -m littlesearch.search \\
        --docs docs.txt --noise-words noisewords.txt deep world [--show-index]
"""

import argparse
from collections.abc import Sequence
from pathlib import Path
import sys

import polars as pl

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.indexing.keyword_index import KeywordIndex
from littlesearch.loaders import make_index

MAX_RESULTS = 5


def _scan_single(occs: Sequence[Occurrence]) -> list[str]:
    results: list[str] = []
    for occ in occs:
        if len(results) >= MAX_RESULTS:
            break
        if occ.doc_id not in results:
            results.append(occ.doc_id)
    return results


def _scan_pairs(occs1: Sequence[Occurrence], occs2: Sequence[Occurrence]) -> list[str]:
    # every (kw1, kw2) pair in list order; ties favor kw1's document
    results: list[str] = []
    for occ1 in occs1:
        if len(results) >= MAX_RESULTS:
            break
        for occ2 in occs2:
            if len(results) >= MAX_RESULTS:
                break
            if occ2.frequency <= occ1.frequency:
                if occ1.doc_id not in results:
                    results.append(occ1.doc_id)
            elif occ2.doc_id not in results:
                results.append(occ2.doc_id)
    return results


def top_matches(index: KeywordIndex, kw1: str, kw2: str) -> list[str] | None:
    """Return up to MAX_RESULTS document names containing kw1 or kw2.

    Documents are ranked by descending frequency, each listed once, with ties
    broken in favor of kw1. Returns None when neither keyword matches anything.
    """
    occs1 = index.occurrences(kw1.lower())
    occs2 = index.occurrences(kw2.lower())

    if occs1 is not None and occs2 is not None:
        results = _scan_pairs(occs1, occs2)
    elif occs1 is not None:
        results = _scan_single(occs1)
    elif occs2 is not None:
        results = _scan_single(occs2)
    else:
        return None
    return results or None


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Search documents for kw1 OR kw2")
    parser.add_argument(
        "--docs", required=True, help="File listing document names, one per line"
    )
    parser.add_argument(
        "--noise-words", required=True, help="File listing noise words, one per line"
    )
    parser.add_argument("kw1", help="First keyword (wins frequency ties)")
    parser.add_argument("kw2", help="Second keyword")
    parser.add_argument(
        "--show-index", action="store_true", help="Print the full keyword index"
    )
    args = parser.parse_args(argv)

    print(f"Loading documents listed in {args.docs}...")
    index = make_index(Path(args.docs), Path(args.noise_words))
    print(f"Indexed {len(index.documents)} documents, {len(index)} keywords")

    if args.show_index:
        with pl.Config(tbl_rows=-1):
            print(index.to_polars())

    results = top_matches(index, args.kw1, args.kw2)
    if results is None:
        print("No matching documents")
        sys.exit(1)
    for doc_id in results:
        print(doc_id)


if __name__ == "__main__":
    main()
