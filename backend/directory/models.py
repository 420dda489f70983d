from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class ApprovalStatus(models.TextChoices):
    PENDING = "pending", _("Pending")
    APPROVED = "approved", _("Approved")
    REJECTED = "rejected", _("Rejected")


class DirectoryEntry(models.Model):
    """
    Common fields for partner accounts that go through admin approval.

    The primary key is the uid issued by the identity provider.
    """

    uid = models.CharField(max_length=128, primary_key=True)
    name = models.CharField(max_length=255)
    email = models.EmailField(blank=True)
    region = models.CharField(max_length=100, db_index=True)
    status = models.CharField(
        max_length=20,
        choices=ApprovalStatus.choices,
        default=ApprovalStatus.PENDING,
        db_index=True,
    )
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} ({self.region}, {self.status})"

    @property
    def is_approved(self) -> bool:
        return self.status == ApprovalStatus.APPROVED


class Caterer(DirectoryEntry):
    class Meta(DirectoryEntry.Meta):
        verbose_name = _("Caterer")
        verbose_name_plural = _("Caterers")


class DeliveryPerson(DirectoryEntry):
    class Meta(DirectoryEntry.Meta):
        verbose_name = _("Delivery Person")
        verbose_name_plural = _("Delivery People")
