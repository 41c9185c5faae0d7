from rest_framework import serializers

from records.models import UserAccount
from .base import StrictSerializer


class LoginSerializer(StrictSerializer):
    aliases = {'identifier': 'mcr_number', 'role': 'selectedRole'}

    mcr_number = serializers.CharField(max_length=20)
    password = serializers.CharField(trim_whitespace=False)
    selectedRole = serializers.CharField(max_length=20)


class RegisterSerializer(StrictSerializer):
    aliases = {'identifier': 'mcr_number'}

    mcr_number = serializers.CharField(max_length=20)
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(trim_whitespace=False, write_only=True)
    role = serializers.ChoiceField(choices=[c for c, _ in UserAccount.ROLE_CHOICES])
