# inventory/views.py
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from . import services
from .serializers import InventoryItemSerializer, SummarySerializer
from .validators import FIELD_RULES, validate_item


class InventoryItemViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def _list_response(self, items):
        return Response({
            'success': True,
            'count': len(items),
            'data': InventoryItemSerializer(items, many=True).data,
        })

    def list(self, request):
        return self._list_response(services.list_items(request.user.id))

    def retrieve(self, request, pk=None):
        item = services.get_item(request.user.id, pk)
        return Response({'success': True, 'data': InventoryItemSerializer(item).data})

    def create(self, request):
        item = services.create_item(request.user.id, request.data)
        return Response({
            'success': True,
            'data': InventoryItemSerializer(item).data,
            'message': 'Item created successfully!',
        }, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        item = services.update_item(request.user.id, pk, request.data)
        return Response({
            'success': True,
            'data': InventoryItemSerializer(item).data,
            'message': 'Item updated successfully!',
        })

    def partial_update(self, request, pk=None):
        return self.update(request, pk)

    def destroy(self, request, pk=None):
        services.delete_item(request.user.id, pk)
        return Response({'success': True, 'message': 'Item deleted successfully!'})

    @action(detail=False, methods=['get'])
    def search(self, request):
        return self._list_response(services.search_items(request.user.id, request.query_params.get('q')))

    @action(detail=False, methods=['get'], url_path='stats/summary')
    def stats(self, request):
        summary = services.summarize(request.user.id)
        return Response({'success': True, 'data': SummarySerializer(summary).data})

    @action(detail=False, methods=['get'])
    def rules(self, request):
        return Response(FIELD_RULES)

    @action(detail=False, methods=['post'])
    def validate(self, request):
        partial = request.query_params.get('partial') in ('1', 'true')
        errors = validate_item(request.data, partial=partial)
        return Response({'success': not errors, 'errors': errors})
