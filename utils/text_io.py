import logging

logger = logging.getLogger(__name__)


def decode_text(data) -> str:
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", errors="ignore")
    return str(data)


def read_files_as_texts(files):
    """Uploaded file-like objects -> (texts, names), decoded as UTF-8."""
    texts, names = [], []
    if not files:
        return texts, names
    for f in files:
        txt = decode_text(f.read())
        name = getattr(f, "name", "uploaded.txt")
        logger.info("read %s (%d chars)", name, len(txt))
        texts.append(txt)
        names.append(name)
    return texts, names
