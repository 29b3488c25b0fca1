"""
Database models for the veterinary clinic backend.

Users own pets and schedulings; services are the catalogue that
schedulings point at; medical records are written by staff about a
pet and looked up by clients through a server generated access code.

Pets and services are soft-deleted through their ``active`` flag: the
default ``objects`` manager only sees active rows and ``all_objects``
is the unfiltered escape hatch for administrative queries.  Users use
Django's own ``is_active`` flag for the same purpose.
"""
from __future__ import annotations

from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


class UserManager(BaseUserManager):
    """Manager for the e-mail based :class:`User` model."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields) -> "User":
        if not email:
            raise ValueError("The e-mail address must be set")
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields) -> "User":
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields) -> "User":
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")
        return self._create_user(email, password, **extra_fields)

    def active(self):
        return self.get_queryset().filter(is_active=True)


class User(AbstractUser):
    """Clinic user: a client, a staff member or a superuser.

    Clients own pets and schedulings.  ``is_staff`` users may write
    medical records and ``is_superuser`` users may do anything.  The
    e-mail address is the login name.
    """
    username = None
    email = models.EmailField(max_length=100, unique=True)
    phone = models.BigIntegerField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["first_name", "last_name"]

    objects = UserManager()

    def __str__(self) -> str:
        return f"{self.email} ({self.role_label})"

    @property
    def role_label(self) -> str:
        if self.is_superuser:
            return "superuser"
        if self.is_staff:
            return "staff"
        return "client"


class ActiveManager(models.Manager):
    """Default manager hiding soft-deleted rows."""

    def get_queryset(self):
        return super().get_queryset().filter(active=True)


class Pet(models.Model):
    GENDER_CHOICES = [
        ("M", "Male"),
        ("F", "Female"),
    ]
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="pets")
    name = models.CharField(max_length=100)
    species = models.CharField(max_length=100)
    breed = models.CharField(max_length=50)
    weight = models.DecimalField(max_digits=10, decimal_places=2)
    age = models.PositiveSmallIntegerField(null=True, blank=True)
    gender = models.CharField(max_length=1, choices=GENDER_CHOICES)
    # The spelling matches the public API field name
    agressive = models.BooleanField(default=False)
    active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ActiveManager()
    all_objects = models.Manager()

    def __str__(self) -> str:
        return f"{self.name} ({self.species})"


class Service(models.Model):
    """A billable service offered by the clinic (consultation, bath, ...)."""
    name = models.CharField(max_length=255, unique=True)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ActiveManager()
    all_objects = models.Manager()

    def __str__(self) -> str:
        return self.name


class Scheduling(models.Model):
    """An appointment of a pet for a service at a given date."""
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="schedulings")
    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name="schedulings")
    service = models.ForeignKey(Service, on_delete=models.CASCADE, related_name="schedulings")
    date = models.DateTimeField()
    finished = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["user", "date"], name="clinic_sche_user_id_8f3c2a_idx"),
        ]

    def __str__(self) -> str:
        return f"Scheduling #{self.pk} pet={self.pet_id} at {self.date:%F %T}"


class MedicalRecord(models.Model):
    """Observation written by staff about a pet.

    ``access_code`` is generated once on creation and lets the owner
    look the record up without an ownership check.
    """
    access_code = models.CharField(max_length=60, unique=True, editable=False)
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="medical_records")
    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name="medical_records")
    observation = models.TextField(max_length=3000)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"MedicalRecord #{self.pk} pet={self.pet_id}"


class AuditEvent(models.Model):
    user = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True)
    action = models.CharField(max_length=64)
    object_type = models.CharField(max_length=64, blank=True, null=True)
    object_id = models.IntegerField(blank=True, null=True)
    detail = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["action", "created_at"], name="clinic_audi_action_5b1e0d_idx"),
            models.Index(fields=["object_type", "object_id", "created_at"], name="clinic_audi_object__9c7a41_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.action}:{self.user_id}@{self.created_at:%F %T}"
