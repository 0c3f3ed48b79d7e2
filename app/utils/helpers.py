import os
import secrets
import string
from slugify import slugify as python_slugify

HASH_NAME_LENGTH = 40
_HASH_ALPHABET = string.ascii_letters + string.digits


def slugify(text: str) -> str:
    """Generate URL-friendly slug"""
    return python_slugify(text, separator='-')


def file_extension(filename: str) -> str:
    """Lowercase extension without the dot, or empty string"""
    if not filename or '.' not in filename:
        return ''
    return filename.rsplit('.', 1)[1].lower()


def allowed_file(filename: str, allowed_extensions: set) -> bool:
    """Check if file extension is allowed"""
    return file_extension(filename) in allowed_extensions


def hash_name(filename: str) -> str:
    """Random 40 character name keeping the original extension"""
    random_part = ''.join(secrets.choice(_HASH_ALPHABET) for _ in range(HASH_NAME_LENGTH))
    extension = file_extension(filename)
    return f'{random_part}.{extension}' if extension else random_part


def stream_size(stream) -> int:
    """Size in bytes of a seekable stream, leaving the position at the start"""
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


_IMAGE_SIGNATURES = {
    b'\xff\xd8\xff': 'jpeg',
    b'\x89PNG\r\n\x1a\n': 'png',
}


def sniff_image_type(stream):
    """Detect jpeg/png from the leading bytes of a seekable stream"""
    head = stream.read(8)
    stream.seek(0)
    for signature, kind in _IMAGE_SIGNATURES.items():
        if head.startswith(signature):
            return kind
    return None
