"""
Enumerations for the Sentiment Analysis Service.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum
from typing import Optional


class Sentiment(str, Enum):
    """
    Sentiment label for a single sentence.
    
    The value is the canonical wire and cache form (lowercase). Text that is
    not exactly one of these values has no Sentiment; see try_parse.
    """
    
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    
    @classmethod
    def try_parse(cls, text: str) -> Optional["Sentiment"]:
        """
        Parse a label, ignoring surrounding whitespace.
        
        Matching is case-sensitive and exact: "Positive", "positive." or
        "very positive" all return None.
        
        Args:
            text: Candidate label text
            
        Returns:
            Matching Sentiment, or None if the text is not a canonical label
        """
        try:
            return cls(text.strip())
        except ValueError:
            return None
    
    def __str__(self) -> str:
        return self.value
