""" File: S3 Uploader Service """

# Python Packages
import os
import uuid

# Exceptions
from ...util.exceptions import RemoteServiceException

# App Messages
from ...util import messages





class S3Uploader:

    def __init__(self, config, client):
        self.config = config
        self.bucket_name = config.bucket_name
        self.client = client


    def build_identifier(self) -> str:
        """
        New unique identifier inside the configured folder, e.g. deals/3f2a...
        """

        return f"{self.config.folder}/{uuid.uuid4().hex}"


    def upload_image(self, file_obj) -> str:
        """
        Upload an image file (werkzeug FileStorage) to S3

        Returns:
            str: public URL of the stored object
        """

        extension = os.path.splitext(file_obj.filename or "")[1].lower() or ".bin"
        identifier = self.build_identifier()
        s3_key = f"upload/{identifier}{extension}"

        extra_args = {}
        if getattr(file_obj, "mimetype", None):
            extra_args["ContentType"] = file_obj.mimetype

        try:
            self.client.upload_fileobj(
                Fileobj = getattr(file_obj, "stream", file_obj),
                Bucket = self.bucket_name,
                Key = s3_key,
                ExtraArgs = extra_args
            )

        except Exception as e:
            raise RemoteServiceException(
                error_code = "MEDIA_UPLOAD_FAILED",
                message = messages.ERROR["MEDIA_UPLOAD_FAILED"],
                details = f"S3 upload failed for {file_obj.filename}: {str(e)}"
            )

        return f"{self.config.base_url}/{s3_key}"
