from rest_framework import serializers

from clinic.models import MedicalRecord, Pet, User
from clinic.services.medical_records import create_medical_record
from clinic.validators import ExistsValidator, clean_text


class MedicalRecordSerializer(serializers.ModelSerializer):
    """Medical record input and output.

    ``access_code`` is generated on creation and is never accepted from
    the client.
    """
    access_code = serializers.CharField(read_only=True)
    user_id = serializers.IntegerField(validators=[ExistsValidator(User.objects.filter(is_active=True), label='user_id')])
    pet_id = serializers.IntegerField(validators=[ExistsValidator(Pet.objects.all(), label='pet_id')])
    observation = serializers.CharField(max_length=3000)

    class Meta:
        model = MedicalRecord
        fields = ['id', 'access_code', 'user_id', 'pet_id', 'observation', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_observation(self, v):
        return clean_text(v, min_length=1)

    def create(self, validated_data):
        return create_medical_record(validated_data)


class AccessCodeQuerySerializer(serializers.Serializer):
    code = serializers.CharField(max_length=60)
