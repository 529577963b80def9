"""
Parse generated text into a Sentiment.

The model is prompted to answer with a single "Bot: <label>" line, but may
omit the marker, add prose or trail more lines. Only the first line counts.
"""

from sentiment_service.classification.exceptions import UnrecognizedLabelError
from sentiment_service.models.enums import Sentiment

BOT_MARKER = "Bot:"


def first_line(text: str) -> str:
    """
    Return text up to the first "\\n" ("" for empty text).

    A trailing "\\r" is dropped. Other Unicode line separators are content,
    so they make the label unrecognized rather than ending the line.
    """
    return text.split("\n", 1)[0].removesuffix("\r")


def strip_marker(line: str) -> str:
    """Remove a leading "Bot:" marker; lines without it are returned unchanged."""
    if line.startswith(BOT_MARKER):
        return line[len(BOT_MARKER):]
    return line


def parse_sentiment(generated_text: str) -> Sentiment:
    """
    Interpret model output as a sentiment label.
    
    Examples:
        >>> parse_sentiment("Bot: positive\\nUser: ...")
        <Sentiment.POSITIVE: 'positive'>
        >>> parse_sentiment("neutral")
        <Sentiment.NEUTRAL: 'neutral'>
    
    Raises:
        UnrecognizedLabelError: First line is not exactly a canonical label
            (after removing the marker and surrounding whitespace)
    """
    line = first_line(generated_text)
    sentiment = Sentiment.try_parse(strip_marker(line))
    if sentiment is None:
        raise UnrecognizedLabelError(line)
    return sentiment
