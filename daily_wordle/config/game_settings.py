"""
Game Configuration Constants Module

This module defines all game configuration constants. All puzzle parameters are
centralized here to enable easy modification.

"""

import json
import os
from typing import List, Final

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every secret word and every attempt.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_ATTEMPTS: Final[int] = 6
"""
Number of attempt slots per puzzle.
Type: Final[int] - Immutable to prevent accidental modification
"""

SETTLE_DELAY_SECONDS: Final[float] = 0.5
"""Wait between restoring a session and leaving INITIALIZING."""

REVEAL_DELAY_PER_LETTER_SECONDS: Final[float] = 0.5
"""Reveal animation budget per letter; a full attempt waits WORD_LENGTH times this."""

ALPHABET: Final[str] = "abcdefghijklmnopqrstuvwxyz"


# Load word list from JSON file
def _load_word_list() -> List[str]:
    """
    Load the daily word list from words.json.
    
    The position of a word in the list is the puzzle number it is played on.
    
    Returns:
        List[str]: List of lowercase 5-letter words
        
    Raises:
        FileNotFoundError: If words.json file is not found
        ValueError: If the file is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')
    
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}")
    
    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")
    
    if not word_list:
        raise ValueError("Word list cannot be empty")
    
    lowercase_words = [word.strip().lower() for word in word_list]
    
    for word in lowercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")
    
    return lowercase_words

# Daily word database loaded from JSON file, doubles as the accepted-word list
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(word_list: List[str] = WORD_LIST) -> bool:
    """
    Validates the integrity and consistency of a word database.
    
    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only a-z characters allowed
    3. Uniqueness validation: No duplicate entries
    
    Returns:
        bool: True if word list passes all validation checks
        
    Raises:
        ValueError: If any validation check fails with detailed error message
        
    """
    if not word_list:
        raise ValueError("Word list cannot be empty")
    
    for index, word in enumerate(word_list):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")
        
        if any(char not in ALPHABET for char in word):
            raise ValueError(f"Word at index {index} '{word}' must only contain lowercase a-z")
    
    if len(word_list) != len(set(word_list)):
        duplicates = sorted({word for word in word_list if word_list.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")
    
    return True


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(f" Word list validation passed ({len(WORD_LIST)} words)")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
