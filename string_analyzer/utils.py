import hashlib
import logging
import re
from collections import Counter
from typing import Dict

from string_analyzer.errors import InternalError

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of the UTF-8 bytes of a string"""
    try:
        return hashlib.sha256(text.encode("utf-8")).hexdigest()
    except UnicodeEncodeError as e:
        logger.error(f"Hash generation error: {e}")
        raise InternalError("Unable to hash value") from e


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count as 2"""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def is_palindrome(text: str) -> bool:
    """
    Check if string is palindrome.

    Only case and whitespace are normalized; punctuation is compared
    literally, so "never odd or even" is a palindrome but "A man, a plan" is not.
    """
    cleaned = _WHITESPACE.sub("", text.lower())
    return cleaned == cleaned[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string (case-sensitive)"""
    return len(set(text))


def count_words(text: str) -> int:
    """
    Count whitespace-delimited tokens after trimming.

    An empty or all-whitespace string yields a single empty token, so the
    count is 1 rather than 0.
    """
    return len(_WHITESPACE.split(text.strip()))


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))


def analyze_string(value: str) -> Dict:
    """Analyze a string and return all computed properties"""
    return {
        "length": utf16_length(value),
        "is_palindrome": is_palindrome(value),
        "unique_characters": count_unique_characters(value),
        "word_count": count_words(value),
        "sha256_hash": compute_sha256(value),
        "character_frequency": get_character_frequency(value),
    }
