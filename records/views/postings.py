"""
Posting views.

``/postings/check`` answers whether a posting number is already taken at
a school in an academic year: 200 when taken, 404 when free.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from ..authentication import acting_identifier
from ..permissions import HasBearerToken
from ..serializers.postings import PostingCreateSerializer, PostingKeySerializer
from ..services import postings as posting_service


@api_view(['GET'])
@permission_classes([HasBearerToken])
def check_posting(request):
    s = PostingKeySerializer(data=request.query_params)
    s.is_valid(raise_exception=True)
    if not posting_service.posting_exists(**s.validated_data):
        raise NotFound('Posting number is available')
    return Response({'ok': True, 'exists': True})


@api_view(['POST'])
@permission_classes([HasBearerToken])
def create_posting(request):
    s = PostingCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    posting = posting_service.create_posting(s.validated_data, acting=acting_identifier(request))
    return Response({
        'ok': True,
        'message': 'Posting added successfully',
        'posting': {
            'id': posting.id,
            'mcr_number': posting.staff_id,
            'academic_year': posting.academic_year,
            'school_name': posting.school_name,
            'posting_number': posting.posting_number,
            'total_training_hour': posting.total_training_hour,
            'rating': posting.rating,
        },
    }, status=status.HTTP_201_CREATED)
