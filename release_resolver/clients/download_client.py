import os
import logging
import shutil
import tempfile
from urllib.parse import urlparse

import requests

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


class DownloadClient:
    def __init__(self, download_dir: str | None = None, timeout: int = 300):
        self.download_dir: str | None = download_dir
        if download_dir:
            os.makedirs(download_dir, exist_ok=True)
        self.timeout: int = timeout

    def fetch(self, url: str) -> str:
        target_dir = tempfile.mkdtemp(dir=self.download_dir)
        file_name = os.path.basename(urlparse(url).path) or "download"
        dest = os.path.join(target_dir, file_name)
        logger.info(f"Downloading {url} to {dest}")
        try:
            with requests.get(url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                with open(dest, "wb") as f:
                    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                        f.write(chunk)
        except Exception:
            logger.error(f"Download of {url} failed, removing {target_dir}")
            shutil.rmtree(target_dir, ignore_errors=True)
            raise
        return dest
