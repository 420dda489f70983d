"""
Directory Tests

Regional caterer lookup and admin review of partner accounts.
"""
import pytest

from directory.exceptions import DirectoryEntryNotFoundError, DirectoryError
from directory.models import ApprovalStatus, Caterer
from directory.services import DirectoryService
from notifications.models import Notification


@pytest.mark.django_db
class TestDirectoryLookups:

    def test_only_approved_caterers_of_the_region(self, caterer_a, caterer_b, caterer_elsewhere, pending_caterer):
        assert sorted(DirectoryService.approved_caterer_ids_in_region('tunis')) == ['caterer-a', 'caterer-b']
        assert DirectoryService.approved_caterer_ids_in_region('sfax') == ['caterer-sfax']
        assert DirectoryService.approved_caterer_ids_in_region('sousse') == []

    def test_delivery_person_approval(self, delivery_person, pending_delivery_person):
        assert DirectoryService.is_approved_delivery_person('delivery-1') is True
        assert DirectoryService.is_approved_delivery_person('delivery-pending') is False
        assert DirectoryService.is_approved_delivery_person('nobody') is False

    def test_get_unknown_delivery_person(self, db):
        with pytest.raises(DirectoryEntryNotFoundError):
            DirectoryService.get_delivery_person('nobody')


@pytest.mark.django_db
class TestDirectoryReview:

    def test_approving_notifies_after_commit(self, pending_caterer, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True) as callbacks:
            caterer = DirectoryService.review_caterer('caterer-pending', ApprovalStatus.APPROVED)

        assert caterer.status == ApprovalStatus.APPROVED
        assert Caterer.objects.get(uid='caterer-pending').is_approved
        assert len(callbacks) == 1
        notification = Notification.objects.get(recipient_id='caterer-pending')
        assert notification.message == 'Your caterer account has been approved.'

    def test_rejecting_delivery_person(self, pending_delivery_person, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            DirectoryService.review_delivery_person('delivery-pending', ApprovalStatus.REJECTED)

        assert not DirectoryService.is_approved_delivery_person('delivery-pending')
        assert Notification.objects.get(recipient_id='delivery-pending').message == (
            'Your delivery account application has been rejected.'
        )

    def test_pending_is_not_a_review_decision(self, pending_caterer):
        with pytest.raises(DirectoryError):
            DirectoryService.review_caterer('caterer-pending', ApprovalStatus.PENDING)

    def test_unknown_uid(self, db):
        with pytest.raises(DirectoryEntryNotFoundError):
            DirectoryService.review_caterer('nobody', ApprovalStatus.APPROVED)
