import logging
import uuid

from sqlalchemy.orm import Session

import config
from models.download import DownloadDTO
from repositories.download import DownloadRepository
from utils.html_escape import safe_html, safe_url


class DownloadService:
    """Lookup and links for files uploaded through FILE_UPLOAD attributes."""

    @staticmethod
    def get_download_by_guid(raw_guid: str, session: Session) -> DownloadDTO | None:
        """
        Get a download by the guid stored in the attributes XML.

        Args:
            raw_guid: Raw attribute value (should be a UUID string)
            session: Database session

        Returns:
            DownloadDTO, or None if the value is not a UUID or no download exists
        """
        try:
            download_guid = uuid.UUID(str(raw_guid).strip())
        except ValueError:
            logging.debug(f"File upload attribute value is not a valid guid: {raw_guid!r}")
            return None

        download = DownloadRepository.get_by_guid(download_guid, session)
        if download is None:
            logging.warning(f"Download {download_guid} referenced by attributes XML not found")
        return download

    @staticmethod
    def get_file_upload_url(download: DownloadDTO) -> str:
        """Public URL serving an uploaded file, based on config.STORE_URL."""
        return f"{config.STORE_URL}download/getfileupload/?downloadId={download.download_guid}"

    @staticmethod
    def format_file_upload(download: DownloadDTO, html_encode: bool, allow_hyperlinks: bool) -> str:
        """
        Render an uploaded file for an attribute line.

        Args:
            download: Uploaded file
            html_encode: Escape the file name
            allow_hyperlinks: Render an <a> tag pointing to the download endpoint

        Returns:
            Hyperlink markup or the bare file name
        """
        file_name = download.file_name
        if html_encode:
            file_name = safe_html(file_name)

        if not allow_hyperlinks:
            return file_name

        download_url = safe_url(DownloadService.get_file_upload_url(download))
        if not download_url:
            # STORE_URL without http(s) scheme - no link
            return file_name
        return f"<a href=\"{download_url}\" class=\"fileuploadattribute\">{file_name}</a>"
