"""Profile picture storage in S3."""

import logging
import os
import uuid
from typing import Any, BinaryIO

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import UploadFile

from fixit.config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"

# Leading byte signatures, checked in order
SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"BM", "image/bmp"),
    (b"\x00\x00\x01\x00", "image/x-icon"),
    (b"%PDF-", "application/pdf"),
    (b"PK\x03\x04", "application/zip"),
    (b"\x1f\x8b\x08", "application/x-gzip"),
)

# Only the first 512 bytes are considered when sniffing
SNIFF_LENGTH = 512


def detect_content_type(data: bytes) -> str:
    """Guess the MIME type of ``data`` from its leading bytes."""
    head = data[:SNIFF_LENGTH]
    if head[:4] == b"RIFF" and head[8:12] == b"WEBP":
        return "image/webp"
    for signature, content_type in SIGNATURES:
        if head.startswith(signature):
            return content_type
    if head and _looks_like_text(head):
        return TEXT_CONTENT_TYPE
    return DEFAULT_CONTENT_TYPE


def _looks_like_text(head: bytes) -> bool:
    # Control bytes other than whitespace mark binary data
    return not any(b < 0x20 and b not in b"\t\n\x0c\r\x1b" for b in head)


def build_object_key(path: str, filename: str) -> str:
    """Build a unique object key that keeps the original file extension."""
    _, extension = os.path.splitext(filename or "")
    return f"{path}/{uuid.uuid4().hex}{extension}"


def create_s3_client() -> Any:
    """Create an S3 client for the configured region."""
    settings = get_settings()
    return boto3.client("s3", region_name=settings.aws_region)


def upload_profile_picture(
    path: str,
    s3_client: Any,
    file: BinaryIO,
    filename: str,
    size: int | None = None,
) -> str:
    """Upload a profile picture and return its public URL.

    The whole file (or the first ``size`` bytes when a size is declared) is
    read into memory and sent in a single public-read, AES-256 encrypted,
    intelligently tiered ``put_object`` call. S3 errors propagate.
    """
    settings = get_settings()
    buffer = file.read(size) if size is not None else file.read()
    key = build_object_key(path, filename)
    content_type = detect_content_type(buffer)

    try:
        s3_client.put_object(
            Bucket=settings.s3_bucket,
            Key=key,
            ACL="public-read",
            Body=buffer,
            ContentLength=len(buffer),
            ContentType=content_type,
            ContentDisposition="attachment",
            ServerSideEncryption="AES256",
            StorageClass="INTELLIGENT_TIERING",
        )
    except (BotoCoreError, ClientError) as e:
        logger.error(f"Failed to upload {key} to {settings.s3_bucket}: {e}")
        raise

    logger.info(f"Uploaded profile picture {key} ({len(buffer)} bytes, {content_type})")
    return f"{settings.s3_public_url}{key}"


def upload_profile_picture_from_upload(path: str, s3_client: Any, upload: UploadFile) -> str:
    """Upload a profile picture received as a multipart form file."""
    return upload_profile_picture(
        path,
        s3_client,
        upload.file,
        upload.filename or "",
        size=upload.size,
    )
