"""
Upload API router
"""

from fastapi import APIRouter, Depends, File, Request, UploadFile
from typing import List, Optional

from portfolio_api.core.errors import ValidationError
from portfolio_api.core.responses import success
from portfolio_api.core.security import require_editor
from portfolio_api.services.upload_service import MAX_IMAGES, LocalStorage, check_document, check_image

router = APIRouter(dependencies=[Depends(require_editor)])


def get_storage(request: Request) -> LocalStorage:
    return request.app.state.storage


async def _read(storage: LocalStorage, file: UploadFile) -> bytes:
    try:
        # one byte over the limit is enough to reject
        data = await file.read(storage.max_size + 1)
    finally:
        await file.close()
    storage.check_size(data)
    return data


async def _store(storage: LocalStorage, file: UploadFile, include_mime: bool = False):
    data = await _read(storage, file)
    return storage.save_bytes(
        data,
        original_name=file.filename or "file",
        content_type=file.content_type,
        include_mime=include_mime,
    )


@router.post("/image")
async def upload_image(
    image: Optional[UploadFile] = File(None),
    storage: LocalStorage = Depends(get_storage),
):
    if image is None:
        raise ValidationError("No file uploaded")
    check_image(image.filename, image.content_type)
    stored = await _store(storage, image)
    return success(stored, message="Image uploaded successfully")


@router.post("/images")
async def upload_images(
    images: Optional[List[UploadFile]] = File(None),
    storage: LocalStorage = Depends(get_storage),
):
    if not images:
        raise ValidationError("No files uploaded")
    if len(images) > MAX_IMAGES:
        raise ValidationError(f"Too many files (max {MAX_IMAGES})")
    for image in images:
        check_image(image.filename, image.content_type)

    payloads = [await _read(storage, image) for image in images]
    stored = [
        storage.save_bytes(data, original_name=image.filename or "file", content_type=image.content_type)
        for image, data in zip(images, payloads)
    ]
    return success(stored, message=f"{len(stored)} images uploaded successfully")


@router.post("/document")
async def upload_document(
    document: Optional[UploadFile] = File(None),
    storage: LocalStorage = Depends(get_storage),
):
    if document is None:
        raise ValidationError("No file uploaded")
    check_document(document.filename, document.content_type)
    stored = await _store(storage, document)
    return success(stored, message="Document uploaded successfully")


@router.post("/file")
async def upload_file(
    file: Optional[UploadFile] = File(None),
    storage: LocalStorage = Depends(get_storage),
):
    if file is None:
        raise ValidationError("No file uploaded")
    stored = await _store(storage, file, include_mime=True)
    return success(stored, message="File uploaded successfully")


@router.delete("/{filename}")
async def delete_file(filename: str, storage: LocalStorage = Depends(get_storage)):
    storage.delete(filename)
    return success(message="File deleted successfully")
