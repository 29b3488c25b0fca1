from decimal import ROUND_HALF_UP, Decimal

from rest_framework import serializers

from clinic.models import Pet, User
from clinic.validators import DigitCountValidator, ExistsValidator, clean_text


class PetSerializer(serializers.ModelSerializer):
    """Pet input and output.

    ``user_id`` is optional everywhere; the write resolver fills it in.
    ``age`` is optional; every other field is required on POST/PUT.
    """
    user_id = serializers.IntegerField(
        required=False, allow_null=True,
        validators=[ExistsValidator(User.objects.filter(is_active=True), label='user_id')],
    )
    name = serializers.CharField(min_length=3, max_length=100)
    species = serializers.CharField(min_length=3, max_length=100)
    breed = serializers.CharField(min_length=3, max_length=50)
    weight = serializers.DecimalField(max_digits=None, decimal_places=None, min_value=0, max_value=1000)
    age = serializers.IntegerField(required=False, allow_null=True, min_value=0, validators=[DigitCountValidator(1, 2)])
    gender = serializers.ChoiceField(choices=['M', 'F'])
    agressive = serializers.BooleanField()

    class Meta:
        model = Pet
        fields = ['id', 'user_id', 'name', 'species', 'breed', 'weight', 'age', 'gender', 'agressive', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_name(self, v):
        return clean_text(v, min_length=3)

    def validate_species(self, v):
        return clean_text(v, min_length=3)

    def validate_breed(self, v):
        return clean_text(v, min_length=3)

    def validate_weight(self, v):
        # Stored with two decimal places
        return v.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
