"""Tests for ImageReconciliationService."""

import pytest

from storefront.base import constants
from storefront.config.settings import DealConfig
from storefront.deals.services.image_reconciliation_service import ImageReconciliationService
from storefront.util.exceptions import RemoteServiceException


@pytest.fixture
def service(media_store, deal_config) -> ImageReconciliationService:
    return ImageReconciliationService(media_store, deal_config)


class TestReconcile:
    """remove-then-append semantics."""

    def test_remove_one_and_append_one(self, service, media_store, media_url, image_file):
        current = [media_url("a"), media_url("b"), media_url("c")]

        result = service.reconcile(current, [media_url("b")], {"dealImage1": image_file("new.jpg")})

        assert result.images == [media_url("a"), media_url("c"), media_url("new")]
        assert media_store.deleted == ["deals/b"]
        assert result.failed_deletions == []

    def test_disjoint_removal_only_appends(self, service, media_store, media_url, image_file):
        current = [media_url("a"), media_url("b")]

        result = service.reconcile(
            current,
            [media_url("zzz")],
            {"dealImage1": image_file("d.jpg"), "dealImage2": image_file("e.jpg")},
        )

        assert result.images == current + [media_url("d"), media_url("e")]

    def test_no_changes(self, service, media_store, media_url):
        current = [media_url("a")]

        result = service.reconcile(current, [], {})

        assert result.images == current
        assert media_store.deleted == []
        assert media_store.uploads == []

    def test_remove_all(self, service, media_store, media_url):
        current = [media_url("a"), media_url("b")]

        result = service.reconcile(current, list(reversed(current)), {})

        assert result.images == []
        assert sorted(media_store.deleted) == ["deals/a", "deals/b"]

    def test_count_matches_removals_and_uploads(self, service, media_url, image_file):
        current = [media_url(stem) for stem in "abcde"]
        removed = [media_url("e"), media_url("b")]
        files = {f"dealImage{i}": image_file(f"n{i}.jpg") for i in range(1, 4)}

        result = service.reconcile(current, removed, files)

        assert len(result.images) == len(current) - len(removed) + len(files)

    def test_delete_failure_is_recorded_not_raised(self, service, media_store, media_url):
        media_store.fail_deletes.add("deals/a")
        current = [media_url("a"), media_url("b")]

        result = service.reconcile(current, [media_url("a"), media_url("b")], {})

        assert result.images == []
        assert result.failed_deletions == ["deals/a"]
        assert media_store.deleted == ["deals/b"]

    def test_unresolvable_removed_url_still_leaves_the_list(self, service, media_store):
        current = ["https://cdn.test/legacy/a.jpg", "https://cdn.test/legacy/b.jpg"]

        result = service.reconcile(current, ["https://cdn.test/legacy/a.jpg"], {})

        assert result.images == ["https://cdn.test/legacy/b.jpg"]
        assert media_store.deleted == []

    def test_upload_failure_aborts_before_deleting(self, service, media_store, media_url, image_file):
        media_store.fail_uploads.add("bad.jpg")

        with pytest.raises(RemoteServiceException) as exc:
            service.reconcile([media_url("a")], [media_url("a")], {"dealImage1": image_file("bad.jpg")})

        assert exc.value.status_code == 500
        assert media_store.deleted == []


class TestCollectFiles:

    def test_update_files_ordered_by_suffix(self, service, image_file):
        files = {
            "dealImage10": image_file("ten.jpg"),
            "other": image_file("skip.jpg"),
            "dealImage2": image_file("two.jpg"),
            "dealImage1": image_file("one.jpg"),
        }

        collected = service.collect_update_files(files)

        assert [f.filename for f in collected] == ["one.jpg", "two.jpg", "ten.jpg"]

    def test_create_files_limited_to_slots(self, service, image_file):
        files = {f"dealImage{i}": image_file(f"{i}.jpg") for i in (1, 3, 5)}

        collected = service.collect_create_files(files)

        assert [f.filename for f in collected] == ["1.jpg", "3.jpg"]

    def test_uploads_keep_input_order(self, service, media_url, image_file):
        files = [image_file(f"img{i}.jpg") for i in range(6)]

        assert service.upload_images(files) == [media_url(f"img{i}") for i in range(6)]


class TestWorkers:
    """Thread pool size comes from DealConfig."""

    def test_pool_bounded_by_configured_workers(self, service, deal_config):
        assert service._workers(10) == deal_config.max_workers
        assert service._workers(1) == 1
        assert service._workers(0) == 1

    def test_worker_bound_read_from_environment_constant(self):
        assert DealConfig.from_constants().max_workers == constants.MEDIA_MAX_WORKERS
