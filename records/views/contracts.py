"""
Contract views, keyed by the staff member's MCR number.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from ..authentication import acting_identifier
from ..models import Contract
from ..permissions import HasBearerToken
from ..serializers.contracts import ContractCreateSerializer, ContractKeySerializer
from ..services import contracts as contract_service


def _serialize(c: Contract) -> dict:
    return {
        'id': c.id,
        'mcr_number': c.staff_id,
        'school_name': c.school_name,
        'start_date': c.start_date.isoformat(),
        'end_date': c.end_date.isoformat(),
        'status': c.status,
        'prev_title': c.prev_title,
        'new_title': c.new_title,
        'training_hours': c.training_hours,
        'training_hours_2022': c.training_hours_2022,
        'training_hours_2023': c.training_hours_2023,
        'training_hours_2024': c.training_hours_2024,
        'total_training_hours': c.total_training_hours,
    }


def _serialize_for_form(c: Contract) -> dict:
    """Contract as the add-contract form reads it to pre-fill its fields."""
    data = _serialize(c)
    data['contract_start_date'] = data['start_date']
    data['contract_end_date'] = data['end_date']
    return data


def delete_key_source(request):
    """Composite keys come from the query string, else the body."""
    return request.query_params if request.query_params else request.data


@api_view(['GET', 'POST', 'DELETE'])
@permission_classes([HasBearerToken])
def contracts(request, mcr_number: str):
    if request.method == 'GET':
        return Response([_serialize(c) for c in contract_service.list_contracts(mcr_number)])
    acting = acting_identifier(request)
    if request.method == 'POST':
        s = ContractCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        contract = contract_service.create_contract(mcr_number, s.validated_data, acting=acting)
        return Response(
            {'ok': True, 'message': 'Contract added successfully', 'contract': _serialize(contract)},
            status=status.HTTP_201_CREATED,
        )
    # DELETE
    s = ContractKeySerializer(data=delete_key_source(request))
    s.is_valid(raise_exception=True)
    count = contract_service.delete_contract(mcr_number, acting=acting, **s.validated_data)
    return Response({'ok': True, 'message': 'Contract deleted successfully', 'deleted': count})


@api_view(['GET'])
@permission_classes([HasBearerToken])
def contract_for_school(request, mcr_number: str, school_name: str):
    return Response(_serialize_for_form(contract_service.latest_contract_for_school(mcr_number, school_name)))
