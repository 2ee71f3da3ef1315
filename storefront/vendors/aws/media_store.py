"""
S3 Media Store

The media host used by the deal services: upload an image, delete an
asset by its resolved identifier.
"""

# Python Packages
import boto3

# S3 Operations
from .s3_uploader import S3Uploader
from .s3_delete import S3DeleteService





def build_s3_client(config):
    """
    S3 client from an explicit MediaConfig
    """

    return boto3.client(
        "s3",
        aws_access_key_id = config.access_key_id or None,
        aws_secret_access_key = config.secret_access_key or None,
        region_name = config.region
    )



class S3MediaStore:

    def __init__(self, config, client = None):
        """
        Args:
            config (MediaConfig): bucket, region, credentials, public URL
            client: optional pre-built boto3 S3 client
        """

        self.config = config
        client = client or build_s3_client(config)

        self.uploader = S3Uploader(config, client)
        self.deleter = S3DeleteService(config, client)


    def upload(self, file_obj) -> str:
        return self.uploader.upload_image(file_obj)


    def delete(self, identifier: str) -> int:
        return self.deleter.delete_asset(identifier)
