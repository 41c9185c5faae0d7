"""
Database models for the staff records backend.

Table and column names follow the schema the React client and the
earlier Node service already use (``user_data``, ``main_data``,
``contracts``, ``promotions``, ``postings``) so existing data can be
served without a rename.  Staff are keyed by their MCR number.
"""
from __future__ import annotations

from django.contrib.auth.hashers import check_password, make_password
from django.db import models

from .hashers import to_django_encoding


class UserAccount(models.Model):
    """A login identity in the credential store.

    The role is fixed at registration and embedded in every bearer token
    issued for the account.
    """
    ROLE_CHOICES = [
        ('management', 'Management'),
        ('hr', 'Human Resources'),
        ('doctor', 'Doctor'),
    ]
    mcr_number = models.CharField(max_length=20, primary_key=True)
    email = models.EmailField(max_length=255)
    user_password = models.CharField(max_length=255)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES)

    class Meta:
        db_table = 'user_data'

    def set_password(self, raw_password: str) -> None:
        self.user_password = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        if not self.user_password:
            return False
        return check_password(raw_password, to_django_encoding(self.user_password))

    def __str__(self) -> str:
        return f"{self.mcr_number} ({self.role})"


class StaffRecord(models.Model):
    """A doctor/staff profile with audit columns.

    Records are soft-deleted: ``deleted`` is flipped and the deletion
    metadata filled in, the row itself is never removed by the API.
    """
    mcr_number = models.CharField(max_length=20, primary_key=True)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    department = models.CharField(max_length=100)
    appointment = models.CharField(max_length=100)
    teaching_training_hours = models.FloatField(null=True, blank=True)
    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    renewal_start_date = models.DateField(null=True, blank=True)
    renewal_end_date = models.DateField(null=True, blank=True)
    email = models.EmailField(max_length=255)

    created_by = models.CharField(max_length=20, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_by = models.CharField(max_length=20, null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)
    deleted = models.BooleanField(default=False, db_index=True)
    deleted_by = models.CharField(max_length=20, null=True, blank=True)
    deleted_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'main_data'

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.mcr_number})"


class Contract(models.Model):
    """A teaching contract between a staff member and a school."""
    staff = models.ForeignKey(
        StaffRecord, on_delete=models.CASCADE, related_name='contracts', db_column='mcr_number'
    )
    school_name = models.CharField(max_length=255)
    start_date = models.DateField()
    end_date = models.DateField()
    status = models.CharField(max_length=50)
    prev_title = models.CharField(max_length=255, blank=True, default='')
    new_title = models.CharField(max_length=255, blank=True, default='')
    training_hours = models.FloatField(null=True, blank=True)
    training_hours_2022 = models.FloatField(null=True, blank=True)
    training_hours_2023 = models.FloatField(null=True, blank=True)
    training_hours_2024 = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = 'contracts'

    @property
    def total_training_hours(self) -> float:
        return sum(
            h or 0
            for h in (
                self.training_hours,
                self.training_hours_2022,
                self.training_hours_2023,
                self.training_hours_2024,
            )
        )

    def __str__(self) -> str:
        return f"{self.staff_id} @ {self.school_name} ({self.status})"


class Promotion(models.Model):
    staff = models.ForeignKey(
        StaffRecord, on_delete=models.CASCADE, related_name='promotions', db_column='mcr_number'
    )
    previous_title = models.CharField(max_length=255)
    new_title = models.CharField(max_length=255)
    promotion_date = models.DateField()

    class Meta:
        db_table = 'promotions'

    def __str__(self) -> str:
        return f"{self.staff_id}: {self.previous_title} -> {self.new_title}"


class Posting(models.Model):
    """A numbered teaching posting at a school within an academic year."""
    staff = models.ForeignKey(
        StaffRecord, on_delete=models.CASCADE, related_name='postings', db_column='mcr_number'
    )
    academic_year = models.CharField(max_length=20)
    school_name = models.CharField(max_length=255)
    posting_number = models.PositiveIntegerField()
    total_training_hour = models.FloatField()
    rating = models.FloatField()

    class Meta:
        db_table = 'postings'
        unique_together = [('staff', 'school_name', 'academic_year', 'posting_number')]

    def __str__(self) -> str:
        return f"{self.staff_id} {self.school_name} {self.academic_year} #{self.posting_number}"
