"""
Media storage for Saint Central.

Uploaded images are written into named buckets (``church-images``,
``event-images``, ``bible-images``) through Django's default storage backend.
Objects are keyed ``<bucket>/<user_id>/<timestamp>.<ext>`` and exposed through
a public URL that clients persist on the owning row (church image, event
image_url, bible study image).
"""

import time
from io import BytesIO

import structlog
from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from PIL import Image, UnidentifiedImageError

from .exceptions import MediaUploadError

logger = structlog.get_logger(__name__)

CHURCH_IMAGES = 'church-images'
EVENT_IMAGES = 'event-images'
BIBLE_IMAGES = 'bible-images'


class MediaStorageService:
    """
    Service for validating and storing images in buckets.
    """

    @staticmethod
    def buckets():
        return settings.MEDIA_BUCKETS

    @classmethod
    def validate(cls, bucket, uploaded_file):
        """
        Validate bucket, content type, size and image bytes.

        Returns the file extension to store the object under.
        """
        if bucket not in cls.buckets():
            raise MediaUploadError(f"Unknown storage bucket '{bucket}'.")

        content_type = getattr(uploaded_file, 'content_type', None) or ''
        allowed = settings.MEDIA_ALLOWED_TYPES
        if content_type not in allowed:
            raise MediaUploadError(
                f"Unsupported image type '{content_type or 'unknown'}'. "
                f"Allowed types: {', '.join(sorted(allowed))}."
            )

        max_size = cls.buckets()[bucket].get('max_size')
        if max_size and uploaded_file.size > max_size:
            raise MediaUploadError(
                f"Image is too large ({uploaded_file.size} bytes). "
                f"Maximum size is {max_size} bytes."
            )

        data = uploaded_file.read()
        uploaded_file.seek(0)
        try:
            with Image.open(BytesIO(data)) as image:
                image.verify()
        except (UnidentifiedImageError, OSError, SyntaxError):
            raise MediaUploadError("The uploaded file is not a valid image.")

        return allowed[content_type]

    @classmethod
    def upload(cls, bucket, user, uploaded_file):
        """
        Store an uploaded image and return its public URL and object path.
        """
        extension = cls.validate(bucket, uploaded_file)
        object_path = f"{bucket}/{user.id}/{int(time.time() * 1000)}.{extension}"

        stored_path = default_storage.save(
            object_path, ContentFile(uploaded_file.read()))

        logger.info(
            "Stored media object",
            bucket=bucket,
            path=stored_path,
            user_id=str(user.id),
            size=uploaded_file.size,
        )

        return {
            'bucket': bucket,
            'path': stored_path,
            'public_url': cls.public_url(stored_path),
        }

    @staticmethod
    def public_url(path):
        """Build the public URL of a stored object path."""
        base_url = settings.MEDIA_PUBLIC_BASE_URL
        if base_url:
            return f"{base_url.rstrip('/')}/{path.lstrip('/')}"
        return default_storage.url(path)

    @classmethod
    def resolve_url(cls, bucket, value):
        """
        Normalise a stored image reference into a URL.

        Full URLs are returned as-is; object paths, with or without the
        bucket prefix, are turned into the bucket's public URL.
        """
        if not value:
            return None
        if value.startswith(('http://', 'https://', 'data:')):
            return value
        path = value.lstrip('/')
        if not path.startswith(f"{bucket}/"):
            path = f"{bucket}/{path}"
        return cls.public_url(path)
