from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from clinic.models import Service
from clinic.validators import clean_text


class ServiceSerializer(serializers.ModelSerializer):
    # Names stay unique across soft-deleted services too (database constraint)
    name = serializers.CharField(
        min_length=2, max_length=255,
        validators=[UniqueValidator(queryset=Service.all_objects.all(), message='The name has already been taken.')],
    )
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, max_value=100000)

    class Meta:
        model = Service
        fields = ['id', 'name', 'price', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_name(self, v):
        return clean_text(v, min_length=2)
