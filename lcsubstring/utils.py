from typing import Optional


def truncate(text: str, limit: Optional[int]):
    """Shorten text to limit characters, 0 or None means no limit"""
    if not limit or len(text) <= limit:
        return text
    return text[:limit] + "..."


def elapsed_ms(start: float, end: float) -> int:
    """Duration between two time.perf_counter() values, in whole milliseconds"""
    return round((end - start) * 1000)
