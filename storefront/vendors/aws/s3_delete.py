"""
S3 Delete Service

Handles:
    - Delete every object stored under a media identifier
    - Safe pagination (more than 1000 objects)
"""

# Exceptions
from ...util.exceptions import RemoteServiceException

# App Messages
from ...util import messages





class S3DeleteService:
    """
    AWS S3 Delete Operations
    """

    def __init__(self, config, client):
        self.s3_client = client
        self.bucket_name = config.bucket_name


    # ---------------------------------------------------------
    # 🔹 Delete Media Asset
    # ---------------------------------------------------------
    def delete_asset(self, identifier: str) -> int:
        """
        Delete the stored object(s) for a media identifier.

        The key is ``upload/<identifier>.<ext>``; the extension is not part
        of the identifier, so the objects are found by prefix.

        Args:
            identifier (str): e.g. deals/3f2a9c

        Returns:
            int: number of deleted objects
        """

        return self.delete_prefix(f"upload/{identifier}.")


    def delete_prefix(self, prefix: str) -> int:
        """
        Delete all objects under a given prefix
        """

        deleted = 0

        try:
            continuation_token = None

            while True:
                # List objects
                if continuation_token:
                    response = self.s3_client.list_objects_v2(
                        Bucket = self.bucket_name,
                        Prefix = prefix,
                        ContinuationToken = continuation_token
                    )
                else:
                    response = self.s3_client.list_objects_v2(
                        Bucket = self.bucket_name,
                        Prefix = prefix
                    )

                # If no objects found
                if "Contents" not in response:
                    break

                objects_to_delete = [
                    {"Key": obj["Key"]}
                    for obj in response["Contents"]
                ]

                # Delete batch
                self.s3_client.delete_objects(
                    Bucket = self.bucket_name,
                    Delete = {"Objects": objects_to_delete}
                )
                deleted += len(objects_to_delete)

                # Check if more objects exist
                if response.get("IsTruncated"):
                    continuation_token = response.get("NextContinuationToken")

                else:
                    break

        except Exception as e:
            raise RemoteServiceException(
                error_code = "MEDIA_DELETE_FAILED",
                message = messages.ERROR["MEDIA_DELETE_FAILED"],
                details = f"S3 delete failed for {prefix}: {str(e)}"
            )

        return deleted
