"""
URL mappings for the veterinary clinic API.

Every resource lives under ``api/v1/``.  Trailing slashes are omitted
(``APPEND_SLASH`` is off) and item routes take an integer id.
"""
from django.urls import path

from .auth_views import login_view, logout_view
from .views import health
from .views.medical_records import medical_record_detail, medical_record_result, medical_records
from .views.pets import pet_detail, pets
from .views.schedulings import scheduling_detail, schedulings
from .views.services import service_detail, services
from .views.users import user_detail, users

urlpatterns = [
    path('healthz', health.healthz),

    # Auth
    path('api/v1/auth', login_view, name='auth-login'),
    path('api/v1/logout', logout_view, name='auth-logout'),

    # Users
    path('api/v1/users', users, name='user-list'),
    path('api/v1/users/<int:pk>', user_detail, name='user-detail'),

    # Pets
    path('api/v1/pets', pets, name='pet-list'),
    path('api/v1/pets/<int:pk>', pet_detail, name='pet-detail'),

    # Services
    path('api/v1/services', services, name='service-list'),
    path('api/v1/services/<int:pk>', service_detail, name='service-detail'),

    # Schedulings
    path('api/v1/schedulings', schedulings, name='scheduling-list'),
    path('api/v1/schedulings/<int:pk>', scheduling_detail, name='scheduling-detail'),

    # Medical records; "result" must come before the id route
    path('api/v1/medicalrecords/result', medical_record_result, name='medical-record-result'),
    path('api/v1/medicalrecords', medical_records, name='medical-record-list'),
    path('api/v1/medicalrecords/<int:pk>', medical_record_detail, name='medical-record-detail'),
]
