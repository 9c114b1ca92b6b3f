#!/usr/bin/env python3

import sys
import time

import click

from .document import Document, Result, normalize
from .errors import LCSError, InputUnavailable, DelimiterCollision, EmptyDocumentWarning
from .stringalg import (
    DEFAULT_METHOD,
    METHODS,
    SENTINEL,
    longest_common_substring,
)
from .utils import truncate, elapsed_ms

__all__ = [
    "Document",
    "Result",
    "normalize",
    "longest_common_substring",
    "LCSError",
    "InputUnavailable",
    "DelimiterCollision",
    "EmptyDocumentWarning",
    "SENTINEL",
    "main",
]


@click.command()
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False))
@click.option("--sentinel", default=SENTINEL, show_default=True,
              help="Character put between the two documents.")
@click.option("--method", type=click.Choice(METHODS), default=DEFAULT_METHOD,
              show_default=True, help="How the suffixes are sorted.")
@click.option("--encoding", default="utf-8", show_default=True)
@click.option("--progress", is_flag=True, help="Show a progress bar on long inputs.")
@click.option("--truncate", "limit", type=click.IntRange(min=0), default=0,
              help="Print at most this many characters of the substring.")
@click.option("--quiet", is_flag=True, help="Only print the substring.")
def main(files, sentinel, method, encoding, progress, limit, quiet):
    """Find the longest substring common to two text files."""
    if len(files) != 2:
        print("The two files to be read must be passed as parameters.", file=sys.stderr)
        sys.exit(1)
    if len(sentinel) != 1:
        raise click.BadParameter("must be a single character", param_hint="--sentinel")

    try:
        documents = [
            Document.from_file(path, tag, encoding=encoding)
            for path, tag in zip(files, "AB")
        ]
    except InputUnavailable as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    a, b = documents

    try:
        start = time.perf_counter()
        result = longest_common_substring(
            a.text, b.text, sentinel=sentinel, method=method, progress=progress
        )
        end = time.perf_counter()
    except DelimiterCollision as e:
        source = next(doc.source for doc in documents if doc.tag == e.tag)
        print(f"{source}: {e}", file=sys.stderr)
        sys.exit(1)

    if quiet:
        print(truncate(result.text, limit))
        return
    print(
        f"The longest common substring is {result.length} characters: \n"
        f"'{truncate(result.text, limit)}'"
    )
    print(f"It took {elapsed_ms(start, end)} ms to find the answer.")


if __name__ == "__main__":
    # pylint: disable=no-value-for-parameter
    main()
