from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from ..authentication import acting_identifier
from ..models import Promotion
from ..permissions import HasBearerToken
from ..serializers.promotions import PromotionCreateSerializer, PromotionKeySerializer
from ..services import promotions as promotion_service
from .contracts import delete_key_source


def _serialize(p: Promotion) -> dict:
    return {
        'id': p.id,
        'mcr_number': p.staff_id,
        'previous_title': p.previous_title,
        'new_title': p.new_title,
        'promotion_date': p.promotion_date.isoformat(),
    }


@api_view(['GET', 'POST', 'DELETE'])
@permission_classes([HasBearerToken])
def promotions(request, mcr_number: str):
    if request.method == 'GET':
        return Response([_serialize(p) for p in promotion_service.list_promotions(mcr_number)])
    acting = acting_identifier(request)
    if request.method == 'POST':
        s = PromotionCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        promotion = promotion_service.create_promotion(mcr_number, s.validated_data, acting=acting)
        return Response(
            {'ok': True, 'message': 'Promotion added successfully', 'promotion': _serialize(promotion)},
            status=status.HTTP_201_CREATED,
        )
    s = PromotionKeySerializer(data=delete_key_source(request))
    s.is_valid(raise_exception=True)
    count = promotion_service.delete_promotions(mcr_number, acting=acting, **s.validated_data)
    return Response({'ok': True, 'message': 'Promotion deleted successfully', 'deleted': count})
