from urllib.parse import quote

NBSP = "\u00a0"


def pad_button(text: str, left: int = 3, right: int = 3) -> str:
    """Surround *text* with non-breaking spaces so buttons look equally wide."""
    return f"{NBSP * left}{text}{NBSP * right}"


def build_asset_url(origin: str, class_id: str, folder: str, file_name: str) -> str:
    """Return the public URL of an image.

    Each segment is encoded on its own: folder and file names may contain
    spaces, dots and Cyrillic characters, and a ``/`` inside a name must not
    become a path separator.
    """
    enc = lambda s: quote(str(s), safe="")  # noqa: E731
    return f"{origin.rstrip('/')}/assets/{enc(class_id)}/{enc(folder)}/{enc(file_name)}"


__all__ = ["NBSP", "pad_button", "build_asset_url"]
