import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from db import session_execute
from models.download import Download, DownloadDTO


class DownloadRepository:

    @staticmethod
    def get_by_guid(download_guid: uuid.UUID, session: Session) -> DownloadDTO | None:
        stmt = select(Download).where(Download.download_guid == download_guid)
        download = session_execute(stmt, session).scalar()
        if download is None:
            return None
        return DownloadDTO.model_validate(download, from_attributes=True)
