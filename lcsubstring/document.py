from dataclasses import dataclass
from typing import Optional

from .errors import InputUnavailable


def normalize(text: str) -> str:
    """
    Collapse every run of whitespace into a single space.
    The result has no leading or trailing whitespace.
    """
    return " ".join(text.split())


@dataclass(frozen=True)
class Document:
    tag: str
    text: str
    source: Optional[str] = None

    def __len__(self):
        return len(self.text)

    @staticmethod
    def from_file(path, tag, encoding="utf-8"):
        """Read and normalize a text file"""
        try:
            with open(path, encoding=encoding) as f:
                raw = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputUnavailable(path, e) from e
        return Document(tag=tag, text=normalize(raw), source=str(path))


@dataclass(frozen=True)
class Result:
    length: int
    text: str
    # index in the sorted suffix array that produced the match
    position: int = 0

    def __bool__(self):
        return self.length > 0


EMPTY_RESULT = Result(length=0, text="")
