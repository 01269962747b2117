import uuid

from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, Uuid

from models.base import Base


# Customer-uploaded file referenced by FILE_UPLOAD attributes
class Download(Base):
    __tablename__ = 'downloads'

    id = Column(Integer, primary_key=True, autoincrement=True)
    download_guid = Column(Uuid, nullable=False, unique=True, default=uuid.uuid4)
    filename = Column(String, nullable=True)
    extension = Column(String(20), nullable=False, default="")
    content_type = Column(String, nullable=True)


class DownloadDTO(BaseModel):
    id: int | None = None
    download_guid: uuid.UUID
    filename: str | None = None
    extension: str = ""
    content_type: str | None = None

    @property
    def file_name(self) -> str:
        """Display name: stored filename (or the guid when missing) plus extension."""
        return f"{self.filename or self.download_guid}{self.extension}"
