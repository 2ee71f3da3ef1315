"""
Explicit runtime settings

Built once by the application factory from the environment constants and
handed to the components that need them, so services never read process
state on their own.
"""

# Python Packages
import re
from dataclasses import dataclass

# Constants
from ..base import constants





@dataclass(frozen = True)
class MediaConfig:
    """ Remote media host (S3) settings... """

    bucket_name: str
    region: str
    access_key_id: str = ""
    secret_access_key: str = ""
    public_url: str = ""
    folder: str = "deals"

    def __post_init__(self):
        """
        The folder is the head of every media identifier, so it must survive
        the URL round trip: no dots, no empty segments, and a first segment
        that cannot be read as a version (v123).
        """

        segments = self.folder.split("/")

        if not self.folder or "." in self.folder or not all(segments):
            raise ValueError(f"Invalid MEDIA_FOLDER={self.folder!r}: use slash-separated names without dots.")

        if re.fullmatch(r"v\d+", segments[0]):
            raise ValueError(f"Invalid MEDIA_FOLDER={self.folder!r}: first segment looks like a version (v<digits>).")

    @classmethod
    def from_constants(cls):
        return cls(
            bucket_name = constants.AWS_S3_BUCKET_NAME,
            region = constants.AWS_REGION,
            access_key_id = constants.AWS_ACCESS_KEY_ID,
            secret_access_key = constants.AWS_SECRET_ACCESS_KEY,
            public_url = constants.AWS_S3_PUBLIC_URL,
            folder = constants.MEDIA_FOLDER
        )

    @property
    def base_url(self) -> str:
        """ Public URL objects are served from, without trailing slash """

        if self.public_url:
            return self.public_url.rstrip("/")

        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com"



@dataclass(frozen = True)
class DealConfig:
    """ Deal form conventions and defaults... """

    image_field_prefix: str = constants.DEAL_IMAGE_FIELD_PREFIX
    create_image_slots: int = constants.DEAL_CREATE_IMAGE_SLOTS
    default_deal_type: str = constants.DEAL_DEFAULT_TYPE
    max_workers: int = 4

    @classmethod
    def from_constants(cls):
        return cls(max_workers = constants.MEDIA_MAX_WORKERS)
