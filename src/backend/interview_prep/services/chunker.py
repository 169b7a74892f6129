"""Word-count chunking of extracted document text."""

DEFAULT_MAX_WORDS = 500


def chunk_text(text: str, max_words: int = DEFAULT_MAX_WORDS) -> list[str]:
    """Split text into consecutive groups of at most ``max_words`` words.

    Words are whitespace-separated and re-joined with a single space, so
    ``" ".join(chunks)`` equals ``" ".join(text.split())``. Empty or
    whitespace-only text yields no chunks.
    """
    if max_words < 1:
        raise ValueError(f"max_words must be at least 1, got {max_words}")

    words = text.split()
    return [
        " ".join(words[i:i + max_words])
        for i in range(0, len(words), max_words)
    ]
