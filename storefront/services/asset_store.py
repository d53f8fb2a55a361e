# storefront/services/asset_store.py
import asyncio
import logging
import secrets
import aiofiles
from datetime import datetime
from pathlib import Path
from typing import Optional, Union
from ..config import Config
from ..errors import AssetTooLarge, InvalidAssetType, StorageTimeout, StorageUnavailable


def too_large(max_size: int) -> AssetTooLarge:
    if max_size >= 1024 * 1024:
        return AssetTooLarge(f"File too large. Max {max_size // (1024 * 1024)}MB")
    return AssetTooLarge(f"File too large. Max {max_size} bytes")


class AssetStore:
    """Product images on local disk, served back under /uploads"""

    ALLOWED_CONTENT_TYPES = {
        'image/jpeg',
        'image/jpg',
        'image/png',
        'image/gif',
        'image/webp',
    }
    ALLOWED_EXTENSIONS = {'.jpeg', '.jpg', '.png', '.gif', '.webp'}

    def __init__(self, upload_path: Optional[Union[str, Path]] = None,
                 max_size: Optional[int] = None,
                 io_timeout: Optional[float] = None):
        self.upload_path = Path(upload_path or Config.UPLOAD_DIR)
        self.max_size = max_size or Config.MAX_UPLOAD_SIZE
        self.io_timeout = io_timeout or Config.IO_TIMEOUT
        self.logger = logging.getLogger(__name__)
        self.ensure_directories()

    def ensure_directories(self):
        self.upload_path.mkdir(parents=True, exist_ok=True)

    def check_type(self, original_filename: str, content_type: Optional[str]) -> str:
        """Return the normalized extension or raise InvalidAssetType"""
        extension = Path(original_filename or '').suffix.lower()
        mime_type = (content_type or '').split(';')[0].strip().lower()
        if extension not in self.ALLOWED_EXTENSIONS or mime_type not in self.ALLOWED_CONTENT_TYPES:
            raise InvalidAssetType()
        return extension

    def check_size(self, size: int):
        if size > self.max_size:
            raise too_large(self.max_size)

    def generate_filename(self, extension: str) -> str:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        return f"{timestamp}_{secrets.token_hex(6)}{extension}"

    async def save(self, content: bytes, original_filename: str,
                   content_type: Optional[str]) -> str:
        """Store an uploaded image and return the generated filename"""
        extension = self.check_type(original_filename, content_type)
        if not content:
            raise InvalidAssetType("Empty image file")
        self.check_size(len(content))

        filename = self.generate_filename(extension)
        save_path = self.upload_path / filename

        try:
            await asyncio.wait_for(self._write(save_path, content), self.io_timeout)
        except asyncio.TimeoutError as e:
            await self.delete(filename)
            raise StorageTimeout("Timed out writing uploaded file") from e
        except OSError as e:
            self.logger.error(f"Error saving file {filename}: {e}")
            await self.delete(filename)
            raise StorageUnavailable("Could not store uploaded file") from e

        self.logger.info(f"Stored asset {filename} ({len(content)} bytes)")
        return filename

    async def _write(self, path: Path, content: bytes):
        async with aiofiles.open(path, 'wb') as f:
            await f.write(content)

    def path_for(self, filename: str) -> Optional[Path]:
        # Stored names never contain directories
        if not filename or Path(filename).name != filename:
            return None
        return self.upload_path / filename

    def exists(self, filename: Optional[str]) -> bool:
        path = self.path_for(filename) if filename else None
        return bool(path and path.is_file())

    async def delete(self, filename: Optional[str]) -> bool:
        """Remove a stored file; False when there was nothing to remove"""
        path = self.path_for(filename) if filename else None
        if path is None:
            return False
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            self.logger.warning(f"Could not delete asset {filename}: {e}")
            return False
        self.logger.info(f"Deleted asset {filename}")
        return True
