import re


def sanitize_filename(name: str) -> str:
    """
    Sanitize a string to be safe for filenames.
    Preserves Japanese characters but removes slashes, colons, etc.
    """
    safe = re.sub(r'[\\/*?:"<>|]', '_', name)
    return safe.strip().strip('.')
