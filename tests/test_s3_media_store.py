"""Tests for the S3-backed media store against a mocked boto3 client."""

import io
from unittest import mock

import pytest
from werkzeug.datastructures import FileStorage

from storefront.config.settings import MediaConfig
from storefront.vendors.aws.media_reference import resolve_media_identifier
from storefront.vendors.aws.media_store import S3MediaStore
from storefront.util.exceptions import RemoteServiceException


@pytest.fixture
def config() -> MediaConfig:
    return MediaConfig(bucket_name="shop-media", region="eu-west-1", folder="deals")


@pytest.fixture
def client():
    return mock.MagicMock()


@pytest.fixture
def store(config, client) -> S3MediaStore:
    return S3MediaStore(config, client=client)


class TestUpload:

    def test_upload_returns_resolvable_public_url(self, store, client):
        file = FileStorage(stream=io.BytesIO(b"data"), filename="Photo.JPG", content_type="image/jpeg")

        url = store.upload(file)

        assert url.startswith("https://shop-media.s3.eu-west-1.amazonaws.com/upload/deals/")
        assert url.endswith(".jpg")

        kwargs = client.upload_fileobj.call_args.kwargs
        assert kwargs["Bucket"] == "shop-media"
        assert kwargs["Key"] == url.split(".amazonaws.com/", 1)[1]
        assert kwargs["ExtraArgs"] == {"ContentType": "image/jpeg"}

        identifier = resolve_media_identifier(url)
        assert identifier.startswith("deals/")
        assert kwargs["Key"] == f"upload/{identifier}.jpg"

    def test_public_url_override(self, client):
        store = S3MediaStore(
            MediaConfig(bucket_name="b", region="r", public_url="https://cdn.shop.test/"),
            client=client,
        )
        file = FileStorage(stream=io.BytesIO(b"data"), filename="a.png")

        assert store.upload(file).startswith("https://cdn.shop.test/upload/deals/")

    def test_upload_failure_raises_remote_service_exception(self, store, client):
        client.upload_fileobj.side_effect = RuntimeError("boom")
        file = FileStorage(stream=io.BytesIO(b"data"), filename="a.png")

        with pytest.raises(RemoteServiceException) as exc:
            store.upload(file)

        assert exc.value.error_code == "MEDIA_UPLOAD_FAILED"


class TestDelete:

    def test_delete_lists_by_identifier_prefix(self, store, client):
        client.list_objects_v2.return_value = {
            "Contents": [{"Key": "upload/deals/abc.jpg"}],
            "IsTruncated": False,
        }

        assert store.delete("deals/abc") == 1

        client.list_objects_v2.assert_called_once_with(Bucket="shop-media", Prefix="upload/deals/abc.")
        client.delete_objects.assert_called_once_with(
            Bucket="shop-media",
            Delete={"Objects": [{"Key": "upload/deals/abc.jpg"}]},
        )

    def test_delete_follows_pagination(self, store, client):
        client.list_objects_v2.side_effect = [
            {"Contents": [{"Key": "upload/deals/abc.jpg"}], "IsTruncated": True, "NextContinuationToken": "t1"},
            {"Contents": [{"Key": "upload/deals/abc.jpeg"}], "IsTruncated": False},
        ]

        assert store.delete("deals/abc") == 2
        assert client.list_objects_v2.call_args_list[1].kwargs["ContinuationToken"] == "t1"

    def test_delete_missing_object_is_noop(self, store, client):
        client.list_objects_v2.return_value = {"KeyCount": 0}

        assert store.delete("deals/gone") == 0
        client.delete_objects.assert_not_called()

    def test_delete_failure_raises_remote_service_exception(self, store, client):
        client.list_objects_v2.side_effect = RuntimeError("denied")

        with pytest.raises(RemoteServiceException) as exc:
            store.delete("deals/abc")

        assert exc.value.error_code == "MEDIA_DELETE_FAILED"


class TestFolder:

    @pytest.mark.parametrize("folder", ["v2", "v10/deals", "deals.img", "", "/deals", "deals/", "a//b"])
    def test_folder_that_cannot_round_trip_is_rejected(self, folder):
        with pytest.raises(ValueError):
            MediaConfig(bucket_name="b", region="r", folder=folder)

    @pytest.mark.parametrize("folder", ["deals", "shop/deals", "deals/v2", "video"])
    def test_uploaded_url_resolves_back_into_folder(self, client, folder):
        store = S3MediaStore(MediaConfig(bucket_name="b", region="r", folder=folder), client=client)

        url = store.upload(FileStorage(stream=io.BytesIO(b"data"), filename="a.png"))

        identifier = resolve_media_identifier(url)
        assert identifier.startswith(f"{folder}/")
        assert client.upload_fileobj.call_args.kwargs["Key"] == f"upload/{identifier}.png"
