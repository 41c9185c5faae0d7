"""
Staff record views.

``/database`` and ``/main_data`` return the full table including
soft-deleted rows; the client filters on ``deleted`` itself.  Deleting a
record only marks it, and ``/restore/<mcr>`` undoes that mark.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from ..authentication import acting_identifier
from ..models import StaffRecord
from ..permissions import HasBearerToken, StaffListAccess
from ..serializers.staff import StaffCreateSerializer, StaffUpdateSerializer
from ..services import staff as staff_service


def _iso(v):
    return v.isoformat() if v else None


def _serialize(s: StaffRecord) -> dict:
    return {
        'mcr_number': s.mcr_number,
        'first_name': s.first_name,
        'last_name': s.last_name,
        'department': s.department,
        'appointment': s.appointment,
        'teaching_training_hours': s.teaching_training_hours,
        'start_date': _iso(s.start_date),
        'end_date': _iso(s.end_date),
        'renewal_start_date': _iso(s.renewal_start_date),
        'renewal_end_date': _iso(s.renewal_end_date),
        'email': s.email,
        'created_by': s.created_by,
        'created_at': _iso(s.created_at),
        'updated_by': s.updated_by,
        'updated_at': _iso(s.updated_at),
        'deleted': s.deleted,
        'deleted_by': s.deleted_by,
        'deleted_at': _iso(s.deleted_at),
    }


@api_view(['GET'])
@permission_classes([HasBearerToken])
def database(request):
    return Response([_serialize(s) for s in staff_service.list_staff()])


@api_view(['GET'])
@permission_classes([StaffListAccess])
def main_data(request):
    return Response([_serialize(s) for s in staff_service.list_staff()])


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([HasBearerToken])
def staff_detail(request, mcr_number: str):
    if request.method == 'GET':
        return Response(_serialize(staff_service.get_staff(mcr_number)))
    acting = acting_identifier(request)
    if request.method == 'DELETE':
        staff_service.soft_delete_staff(mcr_number, acting=acting)
        return Response({'ok': True, 'message': f'Staff with MCR Number {mcr_number} deleted successfully'})
    # PUT
    s = StaffUpdateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    staff_service.update_staff(mcr_number, s.validated_data, acting=acting)
    return Response({'ok': True, 'message': 'Staff details updated successfully'})


@api_view(['POST'])
@permission_classes([HasBearerToken])
def create_entry(request):
    s = StaffCreateSerializer(data=request.data)
    if not s.is_valid():
        if s.only_missing_fields():
            raise ValidationError('Please provide all required fields')
        raise ValidationError(s.errors)
    staff = staff_service.create_staff(dict(s.validated_data), acting=acting_identifier(request))
    return Response(
        {'ok': True, 'message': 'New staff details added successfully', 'mcr_number': staff.mcr_number},
        status=status.HTTP_201_CREATED,
    )


@api_view(['PUT'])
@permission_classes([HasBearerToken])
def restore(request, mcr_number: str):
    staff_service.restore_staff(mcr_number, acting=acting_identifier(request))
    return Response({'ok': True, 'message': f'Staff with MCR Number {mcr_number} restored successfully'})
