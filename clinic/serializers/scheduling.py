from rest_framework import serializers

from clinic.models import Pet, Scheduling, Service, User
from clinic.validators import ExistsValidator

DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class SchedulingSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(
        required=False, allow_null=True,
        validators=[ExistsValidator(User.objects.filter(is_active=True), label='user_id')],
    )
    pet_id = serializers.IntegerField(validators=[ExistsValidator(Pet.objects.all(), label='pet_id')])
    service_id = serializers.IntegerField(validators=[ExistsValidator(Service.objects.all(), label='service_id')])
    date = serializers.DateTimeField(format=DATE_FORMAT, input_formats=[DATE_FORMAT])
    finished = serializers.BooleanField(required=False)

    class Meta:
        model = Scheduling
        fields = ['id', 'user_id', 'pet_id', 'service_id', 'date', 'finished', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']
