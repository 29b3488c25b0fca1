from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from clinic.models import User
from clinic.validators import DigitCountValidator, clean_text

from .pet import PetSerializer
from .scheduling import SchedulingSerializer


class UserSerializer(serializers.ModelSerializer):
    """User input and output.

    The e-mail must be unique; on PUT/PATCH the user's own current
    address does not count as taken.  ``is_staff``/``is_superuser`` are
    accepted here but only kept for superusers by the write resolver.
    """
    first_name = serializers.CharField(min_length=3, max_length=50)
    last_name = serializers.CharField(min_length=3, max_length=50)
    phone = serializers.IntegerField(min_value=0, validators=[DigitCountValidator(12, 13)])
    email = serializers.EmailField(
        min_length=8, max_length=100,
        validators=[UniqueValidator(queryset=User.objects.all(), message='The email has already been taken.')],
    )
    password = serializers.CharField(min_length=8, max_length=100, write_only=True, trim_whitespace=False)
    is_staff = serializers.BooleanField(required=False)
    is_superuser = serializers.BooleanField(required=False)
    pets = PetSerializer(many=True, read_only=True)
    schedulings = SchedulingSerializer(many=True, read_only=True)
    created_at = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'first_name', 'last_name', 'phone', 'email', 'password',
            'is_staff', 'is_superuser', 'pets', 'schedulings', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'updated_at']

    def validate_first_name(self, v):
        return clean_text(v, min_length=3)

    def validate_last_name(self, v):
        return clean_text(v, min_length=3)

    def create(self, validated_data):
        password = validated_data.pop('password')
        return User.objects.create_user(password=password, **validated_data)

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if password:
            instance.set_password(password)
        instance.save()
        return instance
