"""
Django admin registrations for the clinic models.

Pet and service admins list soft-deleted rows as well (through
``all_objects``) so they can be inspected and re-activated.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import (
    AuditEvent,
    MedicalRecord,
    Pet,
    Scheduling,
    Service,
    User,
)
from .services.medical_records import generate_access_code


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    ordering = ('email',)
    list_display = ('email', 'first_name', 'last_name', 'is_staff', 'is_superuser', 'is_active')
    list_filter = ('is_staff', 'is_superuser', 'is_active')
    search_fields = ('email', 'first_name', 'last_name')
    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Personal info', {'fields': ('first_name', 'last_name', 'phone')}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Important dates', {'fields': ('last_login', 'date_joined')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'first_name', 'last_name', 'password1', 'password2'),
        }),
    )


@admin.register(Pet)
class PetAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'species', 'breed', 'user', 'active')
    list_filter = ('active', 'species', 'gender')
    search_fields = ('name', 'species', 'breed', 'user__email')

    def get_queryset(self, request):
        return Pet.all_objects.select_related('user')


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'price', 'active')
    list_filter = ('active',)
    search_fields = ('name',)

    def get_queryset(self, request):
        return Service.all_objects.all()


@admin.register(Scheduling)
class SchedulingAdmin(admin.ModelAdmin):
    list_display = ('id', 'date', 'pet', 'service', 'user', 'finished')
    list_filter = ('finished',)
    search_fields = ('id', 'pet__name', 'user__email')


@admin.register(MedicalRecord)
class MedicalRecordAdmin(admin.ModelAdmin):
    list_display = ('id', 'pet', 'user', 'created_at')
    readonly_fields = ('access_code',)
    search_fields = ('id', 'access_code', 'pet__name', 'user__email')

    def save_model(self, request, obj, form, change):
        if not obj.access_code:
            obj.access_code = generate_access_code()
        super().save_model(request, obj, form, change)


@admin.register(AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    list_display = ('action', 'user', 'object_type', 'object_id', 'created_at')
    list_filter = ('action', 'object_type')
    search_fields = ('user__email',)
