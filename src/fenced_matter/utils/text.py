"""Small string helpers shared by the scanner and excerpt extractor."""


def strip_one_newline(text: str) -> str:
    """Remove a single trailing line terminator (LF or CRLF), nothing else."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text
