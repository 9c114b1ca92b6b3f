"""
String algorithms.
The goal of the file is to compute longest_common_substring
with a suffix array and an lcp array restricted to pairs of suffixes
coming from different documents.
"""
from array import array
from dataclasses import dataclass
from functools import cmp_to_key
from itertools import zip_longest, islice
from typing import List, NamedTuple
import warnings

from tqdm import tqdm

from .document import Result, EMPTY_RESULT
from .errors import DelimiterCollision, EmptyDocumentWarning

# MODIFIER LETTER EXTRA-HIGH TONE BAR, almost never found in plain text
SENTINEL = "˦"
METHODS = ("compare", "doubling")
DEFAULT_METHOD = "compare"
# buffers shorter than that never display a progress bar
PROGRESS_THRESHOLD = 10_000


@dataclass(frozen=True)
class CombinedBuffer:
    text: str
    len_a: int
    len_b: int
    sentinel: str

    def __len__(self):
        return len(self.text)


class SuffixView(NamedTuple):
    start: int
    length: int


def combine(a: str, b: str, sentinel: str = SENTINEL) -> CombinedBuffer:
    """
    a, b: normalized texts
    returns: a ++ sentinel ++ b
    """
    if len(sentinel) != 1:
        raise ValueError(f"the sentinel must be a single character, got {sentinel!r}")
    for tag, doc in (("A", a), ("B", b)):
        if sentinel in doc:
            raise DelimiterCollision(tag, sentinel)
    return CombinedBuffer(
        text=a + sentinel + b, len_a=len(a), len_b=len(b), sentinel=sentinel
    )


class SuffixArray:
    """
    Start offsets of suffixes of a CombinedBuffer.
    The characters are never copied, every suffix borrows buffer.text.
    """

    def __init__(self, buffer: CombinedBuffer, starts: array):
        self.buffer = buffer
        self.starts = starts

    def __len__(self):
        return len(self.starts)

    def __getitem__(self, k) -> SuffixView:
        start = self.starts[k]
        return SuffixView(start, len(self.buffer) - start)

    def __iter__(self):
        n = len(self.buffer)
        return (SuffixView(start, n - start) for start in self.starts)

    def suffix(self, k) -> str:
        return self.buffer.text[self.starts[k] :]


def enumerate_suffixes(buffer: CombinedBuffer) -> SuffixArray:
    """All the suffixes of buffer, by increasing start offset"""
    return SuffixArray(buffer, array("l", range(len(buffer))))


def compare_suffixes(text: str, i: int, j: int) -> int:
    """
    Three-way comparison of text[i:] and text[j:]
    without building the slices.

    The first differing character decides. If one suffix is
    a prefix of the other, the shorter one comes first.
    returns: -1, 0 or 1
    """
    n = len(text)
    while i < n and j < n and text[i] == text[j]:
        i += 1
        j += 1
    if i == n:
        return 0 if j == n else -1
    if j == n:
        return 1
    return -1 if text[i] < text[j] else 1


def to_int_keys(l):
    """
    l: iterable of keys
    returns: a list with integer keys
    """
    seen = set()
    ls = []
    for e in l:
        if not e in seen:
            ls.append(e)
            seen.add(e)
    ls.sort()
    index = {v: i for i, v in enumerate(ls)}
    return [index[v] for v in l]


def rank_array(s):
    """
    rank of each suffix of s, by prefix doubling
    O(n * log(n)^2)
    """
    n = len(s)
    if not n:
        return []
    k = 1
    line = to_int_keys(s)
    while max(line) < n - 1:
        line = to_int_keys(
            [
                a * (n + 1) + b + 1
                for (a, b) in zip_longest(line, islice(line, k, None), fillvalue=-1)
            ]
        )
        k <<= 1
    return line


def inverse_array(l):
    n = len(l)
    ans = [0] * n
    for i in range(n):
        ans[l[i]] = i
    return ans


def sort_suffixes(suffixes: SuffixArray, method=DEFAULT_METHOD) -> SuffixArray:
    """
    Sort suffixes by content.
    Both methods give the same order.

    compare: comparison sort with compare_suffixes
    doubling: rank_array, faster on long repetitive inputs
    """
    buffer = suffixes.buffer
    text = buffer.text
    if method == "compare":
        key = cmp_to_key(lambda i, j: compare_suffixes(text, i, j))
        starts = sorted(suffixes.starts, key=key)
    elif method == "doubling":
        # ranks cover every suffix of the buffer
        if len(suffixes) != len(buffer):
            raise ValueError("doubling needs all the suffixes of the buffer")
        starts = inverse_array(rank_array(text))
    else:
        raise ValueError(f"unknown method {method!r}, expected one of {METHODS}")
    return SuffixArray(buffer, array("l", starts))


class LCPComputer:
    """
    Longest common prefixes of adjacent suffixes.

    A suffix of length <= len_b starts in document B,
    a suffix of length > len_b + 1 starts in document A,
    the one of length len_b + 1 starts at the sentinel.
    Pairs of suffixes from the same document get 0.
    """

    def __init__(self, len_b: int):
        self.len_b = len_b

    def is_b_only(self, length):
        return length <= self.len_b

    def is_a_only(self, length):
        return length > self.len_b + 1

    def is_candidate_pair(self, length1, length2):
        if self.is_a_only(length1) and self.is_a_only(length2):
            return False
        if self.is_b_only(length1) and self.is_b_only(length2):
            return False
        return True

    @staticmethod
    def common_prefix(text: str, i: int, j: int) -> int:
        n = len(text)
        k = 0
        while i + k < n and j + k < n and text[i + k] == text[j + k]:
            k += 1
        return k

    def compute(self, suffixes: SuffixArray, progress=False) -> List[int]:
        """
        returns: lcp with lcp[k] the common prefix of
            suffixes[k - 1] and suffixes[k], lcp[0] = 0
        """
        text = suffixes.buffer.text
        n = len(text)
        starts = suffixes.starts
        lcp = [0] * len(starts)
        for k in tqdm(
            range(1, len(starts)),
            desc="lcp",
            disable=not progress or n < PROGRESS_THRESHOLD,
        ):
            i, j = starts[k - 1], starts[k]
            if not self.is_candidate_pair(n - i, n - j):
                continue
            lcp[k] = self.common_prefix(text, i, j)
        return lcp


def select_max(suffixes: SuffixArray, lcp: List[int]) -> Result:
    """The first maximum of lcp wins"""
    best = 0
    for k in range(1, len(lcp)):
        if lcp[k] > lcp[best]:
            best = k
    length = lcp[best]
    if not length:
        return EMPTY_RESULT
    start = suffixes.starts[best]
    return Result(
        length=length, text=suffixes.buffer.text[start : start + length], position=best
    )


def longest_common_substring(
    a: str, b: str, *, sentinel=SENTINEL, method=DEFAULT_METHOD, progress=False
) -> Result:
    for tag, doc in (("A", a), ("B", b)):
        if not doc:
            warnings.warn(f"document {tag} is empty", EmptyDocumentWarning, stacklevel=2)
    buffer = combine(a, b, sentinel)
    suffixes = sort_suffixes(enumerate_suffixes(buffer), method)
    lcp = LCPComputer(buffer.len_b).compute(suffixes, progress=progress)
    return select_max(suffixes, lcp)
