import logging
from pathlib import Path
from typing import Iterable

import httpx

logger = logging.getLogger("wordament")


class DictionarySourceError(RuntimeError):
    """The word list could not be read. A partial dictionary is never used."""


def is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def normalize_words(lines: Iterable[str], min_length: int = 1) -> list[str]:
    """Lowercase each line and keep plain a-z words of at least ``min_length`` letters."""
    words = []
    for line in lines:
        word = line.strip().lower()
        if len(word) >= min_length and word.isascii() and word.isalpha():
            words.append(word)
    return words


def _fetch(url: str, client: httpx.Client | None, timeout: float) -> str:
    try:
        if client is None:
            with httpx.Client(timeout=timeout, follow_redirects=True) as own_client:
                resp = own_client.get(url)
        else:
            resp = client.get(url)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        raise DictionarySourceError(f"Could not fetch word list from {url}: {e}") from e
    return resp.text


def load_words(
    source: str | Path,
    min_length: int = 1,
    client: httpx.Client | None = None,
    timeout: float = 10.0,
) -> list[str]:
    """Read a newline-delimited word list from a file path or an HTTP(S) URL.

    Raises DictionarySourceError if the source is unreadable or contains no
    usable words.
    """
    if is_url(source):
        text = _fetch(str(source), client, timeout)
    else:
        try:
            text = Path(source).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DictionarySourceError(f"Could not read word list {source}: {e}") from e

    words = normalize_words(text.splitlines(), min_length)
    if not words:
        raise DictionarySourceError(f"No usable words in {source} (min_length={min_length})")
    logger.info("Read %d words from %s", len(words), source)
    return words
