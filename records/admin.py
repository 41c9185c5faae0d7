"""
Django admin registrations for the staff records models.

Passwords in ``user_data`` are shown only as their stored hash; accounts
are created through ``/register`` or the ``ensure_accounts`` command.
"""

from django.contrib import admin

from .models import Contract, Posting, Promotion, StaffRecord, UserAccount


@admin.register(UserAccount)
class UserAccountAdmin(admin.ModelAdmin):
    list_display = ('mcr_number', 'email', 'role')
    list_filter = ('role',)
    search_fields = ('mcr_number', 'email')
    readonly_fields = ('user_password',)


class ContractInline(admin.TabularInline):
    model = Contract
    extra = 0


class PromotionInline(admin.TabularInline):
    model = Promotion
    extra = 0


@admin.register(StaffRecord)
class StaffRecordAdmin(admin.ModelAdmin):
    list_display = ('mcr_number', 'first_name', 'last_name', 'department', 'appointment', 'deleted')
    list_filter = ('deleted', 'department')
    search_fields = ('mcr_number', 'first_name', 'last_name', 'email')
    readonly_fields = ('created_by', 'created_at', 'updated_by', 'updated_at', 'deleted_by', 'deleted_at')
    inlines = [ContractInline, PromotionInline]


@admin.register(Contract)
class ContractAdmin(admin.ModelAdmin):
    list_display = ('staff', 'school_name', 'status', 'start_date', 'end_date')
    list_filter = ('status', 'school_name')


@admin.register(Promotion)
class PromotionAdmin(admin.ModelAdmin):
    list_display = ('staff', 'previous_title', 'new_title', 'promotion_date')


@admin.register(Posting)
class PostingAdmin(admin.ModelAdmin):
    list_display = ('staff', 'school_name', 'academic_year', 'posting_number', 'rating')
    list_filter = ('academic_year', 'school_name')
