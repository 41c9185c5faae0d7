"""
URL mappings for the staff records API.

Paths are the ones the React client already calls, without trailing
slashes.
"""
from django.urls import path, include

from .auth_views import login_view, register_view, verify_view
from .views import contracts, health, postings, promotions, staff

urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    # Authentication
    path('login', login_view, name='login_view'),
    path('register', register_view, name='register_view'),
    path('auth/verify', verify_view, name='verify_view'),
    # Staff records
    path('database', staff.database, name='database'),
    path('main_data', staff.main_data, name='main_data'),
    path('staff/<str:mcr_number>', staff.staff_detail, name='staff_detail'),
    path('entry', staff.create_entry, name='create_entry'),
    path('restore/<str:mcr_number>', staff.restore, name='restore'),
    # Contracts / promotions
    path('contracts/<str:mcr_number>', contracts.contracts, name='contracts'),
    path('contracts/<str:mcr_number>/<str:school_name>', contracts.contract_for_school, name='contract_for_school'),
    path('promotions/<str:mcr_number>', promotions.promotions, name='promotions'),
    # Postings
    path('postings/check', postings.check_posting, name='check_posting'),
    path('postings', postings.create_posting, name='create_posting'),
]
