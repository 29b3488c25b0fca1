"""
Per-verb validation rules of the clinic serializers.
"""
from decimal import Decimal
from types import SimpleNamespace

import pytest
from rest_framework.exceptions import ValidationError

from clinic.serializers.base import bind_input
from clinic.serializers.medical_record import MedicalRecordSerializer
from clinic.serializers.pet import PetSerializer
from clinic.serializers.scheduling import SchedulingSerializer
from clinic.serializers.service import ServiceSerializer
from clinic.serializers.user import UserSerializer
from clinic.validators import DigitCountValidator, clean_text

from .factories import create_pet, create_service, create_user, pet_payload, user_payload

pytestmark = pytest.mark.django_db


def errors_of(serializer_class, data, instance=None, partial=False):
    s = serializer_class(instance, data=data, partial=partial)
    s.is_valid()
    return s.errors


def fake_request(method, data):
    return SimpleNamespace(method=method, data=data)


# ---------------------------------------------------------------------
# bind_input
# ---------------------------------------------------------------------
def test_bind_input_post_requires_full_shape():
    with pytest.raises(ValidationError) as exc:
        bind_input(PetSerializer, fake_request('POST', {'name': 'Rex'}))
    assert {'species', 'breed', 'weight', 'gender', 'agressive'} <= set(exc.value.detail)


def test_bind_input_put_requires_full_shape():
    pet = create_pet(create_user())
    with pytest.raises(ValidationError) as exc:
        bind_input(PetSerializer, fake_request('PUT', {'name': 'Rex'}), instance=pet)
    assert 'species' in exc.value.detail


def test_bind_input_patch_is_partial():
    pet = create_pet(create_user())
    s = bind_input(PetSerializer, fake_request('PATCH', {'name': 'Bolt'}), instance=pet)
    assert s.validated_data == {'name': 'Bolt'}


def test_bind_input_patch_keeps_format_rules():
    pet = create_pet(create_user())
    with pytest.raises(ValidationError) as exc:
        bind_input(PetSerializer, fake_request('PATCH', {'gender': 'X'}), instance=pet)
    assert 'gender' in exc.value.detail


# ---------------------------------------------------------------------
# Pets
# ---------------------------------------------------------------------
def test_pet_valid_payload_without_owner_and_age():
    data = pet_payload()
    data.pop('age')
    assert errors_of(PetSerializer, data) == {}


@pytest.mark.parametrize('field, value', [
    ('name', 'Re'),
    ('name', 'x' * 101),
    ('species', 'Do'),
    ('breed', 'x' * 51),
    ('weight', 1000.01),
    ('weight', 'heavy'),
    ('age', 100),
    ('gender', 'MF'),
    ('gender', 'X'),
    ('agressive', 'maybe'),
])
def test_pet_field_rules(field, value):
    assert field in errors_of(PetSerializer, pet_payload(**{field: value}))


def test_pet_owner_must_exist_and_be_active():
    gone = create_user(is_active=False)
    assert 'user_id' in errors_of(PetSerializer, pet_payload(user_id=999999))
    assert 'user_id' in errors_of(PetSerializer, pet_payload(user_id=gone.pk))
    assert errors_of(PetSerializer, pet_payload(user_id=create_user().pk)) == {}


def test_pet_text_is_sanitised():
    s = PetSerializer(data=pet_payload(name='<b>Luna</b>'))
    assert s.is_valid(), s.errors
    assert s.validated_data['name'] == 'Luna'


@pytest.mark.parametrize('field, value', [
    ('name', '<b></b>'),
    ('name', '<i>Lu</i>'),
    ('species', '<i>x</i>'),
    ('breed', '<p>  </p>'),
])
def test_pet_length_is_checked_after_markup_is_stripped(field, value):
    assert field in errors_of(PetSerializer, pet_payload(**{field: value}))


def test_pet_weight_accepts_any_precision_and_is_rounded():
    s = PetSerializer(data=pet_payload(weight=12.345))
    assert s.is_valid(), s.errors
    assert s.validated_data['weight'] == Decimal('12.35')


# ---------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------
def test_user_valid_payload():
    assert errors_of(UserSerializer, user_payload()) == {}


@pytest.mark.parametrize('field, value', [
    ('first_name', 'Al'),
    ('last_name', 'x' * 51),
    ('phone', 12345678901),
    ('phone', 12345678901234),
    ('phone', -551198765432),
    ('email', 'not-an-email'),
    ('email', 'a@b.co'),
    ('password', 'short'),
])
def test_user_field_rules(field, value):
    assert field in errors_of(UserSerializer, user_payload(**{field: value}))


def test_user_phone_accepts_12_and_13_digits():
    assert errors_of(UserSerializer, user_payload(phone=551198765432)) == {}
    assert errors_of(UserSerializer, user_payload(phone=5511987654321)) == {}


def test_user_email_unique_except_own_record():
    taken = create_user(email='taken@example.com')
    assert 'email' in errors_of(UserSerializer, user_payload(email='taken@example.com'))
    # Updating with the user's own current address is fine
    assert errors_of(UserSerializer, user_payload(email='taken@example.com'), instance=taken) == {}
    assert errors_of(UserSerializer, {'email': 'taken@example.com'}, instance=taken, partial=True) == {}


def test_user_patch_everything_optional():
    assert errors_of(UserSerializer, {}, instance=create_user(), partial=True) == {}


# ---------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------
def test_service_rules():
    assert errors_of(ServiceSerializer, {'name': 'Bath', 'price': 80}) == {}
    assert 'name' in errors_of(ServiceSerializer, {'name': 'B', 'price': 80})
    assert 'name' in errors_of(ServiceSerializer, {'name': '<b>B</b>', 'price': 80})
    assert 'price' in errors_of(ServiceSerializer, {'name': 'Bath', 'price': 100000.01})


def test_service_name_unique_including_soft_deleted():
    create_service(name='Grooming', active=False)
    assert 'name' in errors_of(ServiceSerializer, {'name': 'Grooming', 'price': 10})


def test_service_name_unique_excludes_own_record():
    service = create_service(name='Vaccine')
    assert errors_of(ServiceSerializer, {'name': 'Vaccine', 'price': 10}, instance=service) == {}


# ---------------------------------------------------------------------
# Schedulings
# ---------------------------------------------------------------------
def test_scheduling_rules():
    owner = create_user()
    pet = create_pet(owner)
    service = create_service()
    good = {'pet_id': pet.pk, 'service_id': service.pk, 'date': '2026-11-20 10:00:00'}
    assert errors_of(SchedulingSerializer, good) == {}
    assert 'date' in errors_of(SchedulingSerializer, {**good, 'date': '20/11/2026 10:00'})
    assert 'pet_id' in errors_of(SchedulingSerializer, {**good, 'pet_id': 999999})
    assert 'service_id' in errors_of(SchedulingSerializer, {**good, 'service_id': 999999})
    assert set(errors_of(SchedulingSerializer, {})) == {'pet_id', 'service_id', 'date'}


def test_scheduling_rejects_soft_deleted_references():
    pet = create_pet(create_user(), active=False)
    service = create_service(active=False)
    errors = errors_of(SchedulingSerializer, {'pet_id': pet.pk, 'service_id': service.pk, 'date': '2026-11-20 10:00:00'})
    assert {'pet_id', 'service_id'} <= set(errors)


# ---------------------------------------------------------------------
# Medical records
# ---------------------------------------------------------------------
def test_medical_record_rules():
    owner = create_user()
    pet = create_pet(owner)
    assert set(errors_of(MedicalRecordSerializer, {})) == {'user_id', 'pet_id', 'observation'}
    errors = errors_of(MedicalRecordSerializer, {'user_id': owner.pk, 'pet_id': pet.pk, 'observation': 'x' * 3001})
    assert list(errors) == ['observation']


def test_medical_record_access_code_is_not_accepted():
    owner = create_user()
    pet = create_pet(owner)
    s = MedicalRecordSerializer(data={'user_id': owner.pk, 'pet_id': pet.pk, 'observation': 'ok', 'access_code': 'mine'})
    assert s.is_valid(), s.errors
    assert 'access_code' not in s.validated_data


# ---------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------
def test_digit_count_validator():
    v = DigitCountValidator(1, 2)
    v(0)
    v(99)
    with pytest.raises(ValidationError):
        v(100)


def test_clean_text():
    assert clean_text('  <script>x</script>Tom ') == 'xTom'
    assert clean_text(None) is None


def test_clean_text_keeps_plain_text_characters():
    assert clean_text('weight < 5kg & eating') == 'weight < 5kg & eating'
    assert clean_text('<b>"Tom" & Jerry</b>') == '"Tom" & Jerry'


def test_clean_text_min_length_applies_to_cleaned_value():
    assert clean_text('<b>Rex</b>', min_length=3) == 'Rex'
    with pytest.raises(ValidationError):
        clean_text('<b></b>', min_length=1)
