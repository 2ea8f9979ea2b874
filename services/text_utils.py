def clean_flavor_text(txt) -> str:
    if not isinstance(txt, str):
        txt = str(txt or '')
    # Game text carries form feeds and hard line breaks; compress to single spaces
    txt = txt.replace('\f', ' ').replace('\n', ' ').replace('\r', ' ')
    return ' '.join(txt.split())


def display_name(slug: str) -> str:
    """Title-case a PokeAPI slug for display, e.g. "mr-mime" -> "Mr Mime"."""
    return (slug or '').replace('-', ' ').title()


def contains_ci(haystack: str, needle: str) -> bool:
    return (needle or '').lower() in (haystack or '').lower()
